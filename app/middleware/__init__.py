"""
FinTrack middleware.
"""

from app.middleware.auth import AuthContext, AuthMiddleware
from app.middleware.compression import ConditionalGZipMiddleware
from app.middleware.request_context import RequestContextMiddleware, REQUEST_ID_HEADER

__all__ = [
    "AuthContext",
    "AuthMiddleware",
    "ConditionalGZipMiddleware",
    "RequestContextMiddleware",
    "REQUEST_ID_HEADER",
]
