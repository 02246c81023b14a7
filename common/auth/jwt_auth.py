"""
JWT token provider.

Stateless bearer tokens signed with a server-held secret:
- HS256 (configurable) signatures via python-jose
- `sub` carries the user id, `exp` bounds the lifetime
- Signature is verified before any claim is looked at

Example:
    auth = JWTAuth(
        secret="your-secret-key",
        access_token_expire_minutes=60,
    )

    token = auth.create_token(user_id)
    claims = auth.verify_token(token)
    print(claims["sub"])  # user_id
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Callable

from jose import jws, jwt
from jose.exceptions import ExpiredSignatureError, JWSError, JWTError

from common.auth.base import (
    TokenProvider,
    MalformedTokenError,
    BadSignatureError,
    ExpiredTokenError,
)

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"


def _utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


class JWTAuth(TokenProvider):
    """
    JWT token provider.

    Holds the signing secret for the lifetime of the process. The secret is
    never logged or exposed through any accessor.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 60,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """
        Initialize JWT auth provider.

        Args:
            secret: Secret key for JWT signing
            algorithm: JWT algorithm (default: HS256)
            access_token_expire_minutes: Token lifetime
            clock: Source of the current time, used when issuing tokens
        """
        if not secret:
            raise ValueError("JWT secret must not be empty")

        self._secret = secret
        self.algorithm = algorithm
        self.access_token_expire = timedelta(minutes=access_token_expire_minutes)
        self._clock = clock

    def __repr__(self) -> str:
        return f"JWTAuth(algorithm={self.algorithm!r}, expire={self.access_token_expire})"

    def create_token(self, user_id: str, **claims: Any) -> str:
        """Create a signed access token for the user."""
        issued_at = self._clock()
        payload = {
            **claims,
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.access_token_expire,
            "type": ACCESS_TOKEN_TYPE,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode an access token.

        The signature check runs first and on its own, so a tampered token
        is rejected before its expiry or subject is read.
        """
        if not token or not isinstance(token, str):
            raise MalformedTokenError("Token is empty")

        try:
            header = jwt.get_unverified_header(token)
        except JWTError as e:
            raise MalformedTokenError("Token could not be parsed") from e

        if header.get("alg") != self.algorithm:
            raise BadSignatureError("Unexpected signing algorithm")

        try:
            jws.verify(token, self._secret, algorithms=[self.algorithm])
        except JWSError as e:
            raise BadSignatureError("Signature verification failed") from e

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except ExpiredSignatureError as e:
            raise ExpiredTokenError("Token has expired") from e
        except JWTError as e:
            raise MalformedTokenError(f"Invalid token claims: {e}") from e

        if payload.get("type", ACCESS_TOKEN_TYPE) != ACCESS_TOKEN_TYPE:
            raise MalformedTokenError("Unexpected token type")

        if not payload.get("sub"):
            raise MalformedTokenError("Token missing subject")

        return payload
