"""
Request body schemas.
"""

from app.schemas.auth import RegisterRequest, LoginRequest

__all__ = ["RegisterRequest", "LoginRequest"]
