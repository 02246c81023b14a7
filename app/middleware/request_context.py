"""
Request context middleware.

Assigns every request an id (taken from `X-Request-ID` when the client sends
one), exposes it to log records and echoes it on the response.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from common.utils.log_config import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Establish the per-request logging context and log the access line."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = request_id_var.set(request_id)
        start_time = time.perf_counter()

        try:
            try:
                response = await call_next(request)
            except Exception:
                # The 500 body is rendered outside this middleware; log the
                # access line here while the request id is still bound.
                latency_ms = round((time.perf_counter() - start_time) * 1000, 2)
                logger.error(f"{request.method} {request.url.path} 500 {latency_ms}ms")
                raise
            latency_ms = round((time.perf_counter() - start_time) * 1000, 2)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                f"{request.method} {request.url.path} {response.status_code} {latency_ms}ms"
            )
            return response
        finally:
            request_id_var.reset(token)
