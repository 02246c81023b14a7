"""
Utilities module - Common helpers for API responses, exceptions, validation and logging.
"""

from common.utils.responses import success_response, error_response
from common.utils.exceptions import (
    APIException,
    ValidationException,
    EmailAlreadyRegisteredException,
    UnauthorizedException,
    InvalidCredentialsException,
    NotFoundException,
    InternalServerException,
)
from common.utils.password import validate_password
from common.utils.log_config import configure_logging, request_id_var, mask_uri

__all__ = [
    "success_response",
    "error_response",
    "APIException",
    "ValidationException",
    "EmailAlreadyRegisteredException",
    "UnauthorizedException",
    "InvalidCredentialsException",
    "NotFoundException",
    "InternalServerException",
    "validate_password",
    "configure_logging",
    "request_id_var",
    "mask_uri",
]
