"""
Authentication module - Token providers and password hashing.
"""

from common.auth.base import (
    TokenProvider,
    TokenError,
    MalformedTokenError,
    BadSignatureError,
    ExpiredTokenError,
)
from common.auth.jwt_auth import JWTAuth
from common.auth.password_hasher import PasswordHasher

__all__ = [
    "TokenProvider",
    "TokenError",
    "MalformedTokenError",
    "BadSignatureError",
    "ExpiredTokenError",
    "JWTAuth",
    "PasswordHasher",
]
