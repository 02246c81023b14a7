"""
Response compression.

gzip for responses above a size threshold, skipped when the client sends
`X-No-Compression`.
"""

from starlette.datastructures import Headers
from starlette.middleware.gzip import GZipMiddleware
from starlette.types import Receive, Scope, Send

NO_COMPRESSION_HEADER = "x-no-compression"


class ConditionalGZipMiddleware(GZipMiddleware):
    """GZipMiddleware that honours an opt-out request header."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and NO_COMPRESSION_HEADER in Headers(scope=scope):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
