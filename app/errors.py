"""
Exception handlers for FastAPI.

Render every failure in the standard envelope:
``{"success": false, "message": ..., "error": {"code": ...}}``.
Unexpected exceptions are logged with their traceback and returned without
any internal detail.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.utils import error_response
from common.utils.exceptions import APIException

logger = logging.getLogger(__name__)


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Handler for APIException and its subclasses."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, code=exc.code, details=exc.details),
        headers=getattr(exc, "headers", None),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handler for framework-raised HTTP errors (unknown route, bad method)."""
    if exc.status_code == 404:
        message = "Route not found"
        code = "NOT_FOUND"
    else:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        code = None
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(message, code=code),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Request body/params failed schema validation: 400, not FastAPI's 422."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(loc) or "body", "message": error.get("msg", "Invalid value")})

    message = errors[0]["message"] if len(errors) == 1 else "Validation error"
    return JSONResponse(
        status_code=400,
        content=error_response(message, code="VALIDATION_ERROR", errors=errors),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unhandled exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=error_response("Internal server error", code="INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all envelope-producing handlers on the app."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
