"""
Auth System

Handles account registration, credential login and bearer-token identity
for the FinTrack API.
"""

from app.auth.store import UserStore, DuplicateEmailError, normalize_email
from app.auth.service import AuthService

__all__ = [
    "UserStore",
    "DuplicateEmailError",
    "normalize_email",
    "AuthService",
]
