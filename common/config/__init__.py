"""
Configuration module - Base settings loaded from the environment and .env.
"""

from common.config.base_settings import BaseAppSettings

__all__ = ["BaseAppSettings"]
