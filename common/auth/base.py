"""
Abstract token provider interface.

Defines the contract that bearer-token implementations must satisfy.
This allows swapping the token strategy (JWT today, opaque session tokens
later) without changing the auth service or middleware.

Example:
    from common.auth import TokenProvider, JWTAuth

    def get_token_provider(settings) -> TokenProvider:
        return JWTAuth(secret=settings.JWT_SECRET)
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class TokenError(Exception):
    """Base class for every token verification failure."""

    reason = "invalid"


class MalformedTokenError(TokenError):
    """Token cannot be parsed or lacks required claims."""

    reason = "malformed"


class BadSignatureError(TokenError):
    """Token signature does not match the server key."""

    reason = "bad_signature"


class ExpiredTokenError(TokenError):
    """Token signature is valid but its expiry has passed."""

    reason = "expired"


class TokenProvider(ABC):
    """
    Abstract bearer token provider.

    Implementations issue tokens carrying a user identity and verify them
    statelessly.
    """

    @abstractmethod
    def create_token(self, user_id: str, **claims: Any) -> str:
        """
        Create an authentication token for a user.

        Args:
            user_id: The user's ID
            **claims: Additional claims to include in the token

        Returns:
            The authentication token string
        """

    @abstractmethod
    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify an authentication token.

        Args:
            token: The token to verify

        Returns:
            Dictionary containing decoded token claims (at minimum: sub)

        Raises:
            MalformedTokenError: Token cannot be parsed
            BadSignatureError: Token was tampered with or signed by another key
            ExpiredTokenError: Token is past its expiry
        """
