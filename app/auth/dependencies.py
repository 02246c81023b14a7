"""
FastAPI dependencies for the auth system.

Services are built once per application by `init_auth_services` and kept on
`app.state`; handlers receive them through `Depends`, never through module
globals.
"""

import logging
from dataclasses import dataclass
from typing import Annotated, Optional

from fastapi import Depends, Header, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.auth import JWTAuth, PasswordHasher
from app.auth.service import AuthService
from app.auth.store import UserStore
from app.config import Settings
from app.middleware.auth import AuthContext, AuthMiddleware

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthServices:
    """Wired auth components for one application instance."""

    user_store: UserStore
    password_hasher: PasswordHasher
    token_provider: JWTAuth
    auth_service: AuthService
    auth_middleware: AuthMiddleware


async def init_auth_services(db: AsyncIOMotorDatabase, settings: Settings) -> AuthServices:
    """
    Build the auth components in dependency order.

    Called once at application startup. Order: store (and its indexes),
    password hasher, token provider, service, middleware.

    Args:
        db: MongoDB database connection
        settings: Application settings
    """
    user_store = UserStore(db, collection_name=settings.USERS_COLLECTION)
    await user_store.ensure_indexes()

    password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)

    token_provider = JWTAuth(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        access_token_expire_minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES,
    )

    auth_service = AuthService(
        user_store=user_store,
        password_hasher=password_hasher,
        token_provider=token_provider,
        password_min_length=settings.PASSWORD_MIN_LENGTH,
        password_max_length=settings.PASSWORD_MAX_LENGTH,
        name_max_length=settings.NAME_MAX_LENGTH,
    )

    auth_middleware = AuthMiddleware(token_provider=token_provider)

    logger.info("Auth services initialized")
    return AuthServices(
        user_store=user_store,
        password_hasher=password_hasher,
        token_provider=token_provider,
        auth_service=auth_service,
        auth_middleware=auth_middleware,
    )


def _get_auth_services(request: Request) -> AuthServices:
    services = getattr(request.app.state, "auth", None)
    if services is None:
        raise RuntimeError("Auth services not initialized. Call init_auth_services first.")
    return services


def get_auth_service(request: Request) -> AuthService:
    """Get the auth service for this application."""
    return _get_auth_services(request).auth_service


def get_auth_middleware(request: Request) -> AuthMiddleware:
    """Get the auth middleware for this application."""
    return _get_auth_services(request).auth_middleware


async def require_auth(
    auth_middleware: Annotated[AuthMiddleware, Depends(get_auth_middleware)],
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> AuthContext:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(auth: Annotated[AuthContext, Depends(require_auth)]):
            return {"user_id": auth.user_id}
    """
    return auth_middleware.authenticate(authorization)
