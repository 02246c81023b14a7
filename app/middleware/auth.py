"""
Authentication gate for protected routes.

Validates bearer tokens and produces an immutable identity context that is
passed to handlers explicitly through dependency injection.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from common.auth import TokenError, TokenProvider
from common.utils.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller, resolved from a verified token."""

    user_id: str
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None


def _claim_time(value) -> Optional[datetime]:
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    return None


class AuthMiddleware:
    """
    Pass/fail gate in front of protected handlers.

    Every rejection uses the same message and code; the specific reason is
    only logged.
    """

    def __init__(self, token_provider: TokenProvider, scheme: str = "Bearer"):
        """
        Initialize AuthMiddleware.

        Args:
            token_provider: For token verification
            scheme: Expected authorization scheme
        """
        self._token_provider = token_provider
        self._scheme = scheme

    def authenticate(self, authorization: Optional[str]) -> AuthContext:
        """
        Verify the Authorization header value.

        Args:
            authorization: Raw Authorization header, or None if absent

        Returns:
            AuthContext for the token subject

        Raises:
            UnauthorizedException: Missing header, wrong scheme, or invalid token
        """
        token = self._extract_token(authorization)

        if not token:
            logger.info("Rejected request: no bearer token provided")
            raise UnauthorizedException()

        try:
            claims = self._token_provider.verify_token(token)
        except TokenError as e:
            logger.info(f"Rejected request: token {e.reason}")
            raise UnauthorizedException()

        return AuthContext(
            user_id=claims["sub"],
            issued_at=_claim_time(claims.get("iat")),
            expires_at=_claim_time(claims.get("exp")),
        )

    def _extract_token(self, authorization: Optional[str]) -> Optional[str]:
        """
        Extract bearer token from an Authorization header value.

        Expected format: "Authorization: Bearer <token>"
        """
        if not authorization:
            return None

        parts = authorization.strip().split(None, 1)
        if len(parts) != 2 or parts[0].lower() != self._scheme.lower():
            return None

        return parts[1].strip() or None
