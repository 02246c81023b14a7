"""
Pydantic models for Auth request validation.

Field format checks (email syntax, password policy) live in the auth
service so the same rules apply to every caller; these schemas only
enforce presence and type.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request body for user registration."""
    email: str = Field(..., description="Account email, case-insensitive")
    password: str = Field(..., description="At least 8 characters")
    name: str = Field(..., description="Display name")


class LoginRequest(BaseModel):
    """Request body for user login."""
    email: str
    password: str
