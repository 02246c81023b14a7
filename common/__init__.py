"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- database: Async MongoDB connection with Motor
- auth: JWT token provider and bcrypt password hashing
- utils: Standard responses, exceptions, password validation, logging
- config: Base settings class
"""

from common.database import MongoDB
from common.auth import TokenProvider, JWTAuth, PasswordHasher
from common.utils import (
    success_response,
    error_response,
    APIException,
    UnauthorizedException,
    NotFoundException,
    ValidationException,
    validate_password,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Auth
    "TokenProvider",
    "JWTAuth",
    "PasswordHasher",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "UnauthorizedException",
    "NotFoundException",
    "ValidationException",
    "validate_password",
    # Config
    "BaseAppSettings",
]
