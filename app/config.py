"""
FinTrack application settings.

Extends the base settings with FinTrack-specific configuration.
Settings are built once at process entry and passed into `create_app`.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """FinTrack-specific settings."""

    # ==========================================================================
    # Registration Policy
    # ==========================================================================
    PASSWORD_MIN_LENGTH: int = 8
    PASSWORD_MAX_LENGTH: int = 128
    NAME_MAX_LENGTH: int = 100

    # ==========================================================================
    # Collections
    # ==========================================================================
    USERS_COLLECTION: str = "users"

    # ==========================================================================
    # API Docs
    # ==========================================================================
    DOCS_URL: str = "/api-docs"
    OPENAPI_URL: str = "/api-docs.json"

    # Responses smaller than this are sent uncompressed
    GZIP_MINIMUM_SIZE: int = 1024
