"""
User model for FinTrack.

Maps between the `users` MongoDB document and the in-memory account record.
"""

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    Account record as stored by the credential store.

    `password_hash` is only ever read by the auth service; responses go
    through `to_public()`, which drops it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    email: str
    password_hash: str = Field(..., alias="passwordHash", repr=False)
    name: str
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "User":
        """Build a User from a raw `users` document."""
        return cls(
            id=str(doc["_id"]),
            email=doc["email"],
            passwordHash=doc["passwordHash"],
            name=doc.get("name", ""),
            createdAt=doc["createdAt"],
        )

    def to_public(self) -> Dict[str, Any]:
        """Convert to the API response shape (no password hash)."""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "createdAt": self.created_at.isoformat(),
        }
