"""
FastAPI router for Auth endpoints.

Provides registration, login and current-user lookup.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from common.utils import success_response
from app.auth.dependencies import get_auth_service, require_auth
from app.auth.service import AuthService
from app.middleware.auth import AuthContext
from app.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Register a new user account.

    Returns the new user and a bearer token.
    """
    result = await auth_service.register(
        email=body.email,
        password=body.password,
        name=body.name,
    )
    return success_response(result, message="User registered successfully")


@router.post("/login")
async def login(
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Login to an existing account.

    Authenticates user with email and password.
    """
    result = await auth_service.login(email=body.email, password=body.password)
    return success_response(result, message="Login successful")


@router.get("/me")
async def get_me(
    auth: Annotated[AuthContext, Depends(require_auth)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Get the currently authenticated user.
    """
    user = await auth_service.get_current_user(auth.user_id)
    return success_response({"user": user})
