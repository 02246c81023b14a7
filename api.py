"""
FinTrack FastAPI Application

Main entry point for the FinTrack API.
Settings are built here at process entry and handed to `create_app`; all
services are wired from them during the application lifespan.
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from motor.motor_asyncio import AsyncIOMotorDatabase

# Common library imports
from common.database import MongoDB
from common.utils import configure_logging, success_response

# App-specific imports
from app.auth.dependencies import init_auth_services
from app.config import Settings
from app.errors import register_exception_handlers
from app.middleware.compression import ConditionalGZipMiddleware
from app.middleware.request_context import RequestContextMiddleware
from app.routers import auth_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_app(settings: Settings, database: Optional[AsyncIOMotorDatabase] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings, validated here
        database: Pre-connected database to use instead of connecting to
            settings.MONGODB_URI (tests pass an in-memory stand-in)
    """
    settings.validate_required()

    # =========================================================================
    # Application Lifespan
    # =========================================================================
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Handles startup and shutdown tasks like database connections
        and service initialization.
        """
        logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

        mongo: Optional[MongoDB] = None
        db = database
        if db is None:
            mongo = MongoDB()
            await mongo.connect(
                uri=settings.MONGODB_URI,
                database_name=settings.MONGODB_DATABASE,
            )
            db = mongo.db

        app.state.mongo = mongo
        app.state.auth = await init_auth_services(db, settings)
        app.state.started_at = time.monotonic()

        logger.info(f"{settings.APP_NAME} started successfully!")

        yield

        logger.info(f"Shutting down {settings.APP_NAME}...")
        if mongo is not None:
            await mongo.disconnect()
        logger.info(f"{settings.APP_NAME} shut down complete.")

    # =========================================================================
    # FastAPI Application
    # =========================================================================
    docs_enabled = settings.is_development()
    app = FastAPI(
        title=settings.APP_NAME,
        description="FinTrack - smart financial companion platform",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=settings.DOCS_URL if docs_enabled else None,
        openapi_url=settings.OPENAPI_URL if docs_enabled else None,
        redoc_url=None,
    )

    # =========================================================================
    # Middleware (last added runs first)
    # =========================================================================
    app.add_middleware(ConditionalGZipMiddleware, minimum_size=settings.GZIP_MINIMUM_SIZE)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    # =========================================================================
    # Include Routers
    # =========================================================================
    app.include_router(auth_router, prefix=API_PREFIX, tags=["Authentication"])

    # =========================================================================
    # Health Check Endpoint
    # =========================================================================
    @app.get("/health", tags=["Health"])
    async def health():
        """
        Health check endpoint.

        Returns server status, uptime and database connectivity.
        """
        started_at = getattr(app.state, "started_at", None)
        mongo = getattr(app.state, "mongo", None)
        response = success_response(message=f"Server is healthy - {settings.ENVIRONMENT} mode")
        response.update({
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(time.monotonic() - started_at, 3) if started_at else 0.0,
            "database": mongo.is_connected if mongo is not None else database is not None,
        })
        return response

    return app


# =============================================================================
# Run with Uvicorn
# =============================================================================
def main() -> None:
    """Process entry: load settings, configure logging, serve."""
    import uvicorn

    settings = Settings()
    configure_logging(settings.LOG_LEVEL)

    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
