"""
Credential store backed by the MongoDB `users` collection.

The unique index on `email` is the only uniqueness guarantee; callers must
not rely on a prior `find_by_email` to rule out a duplicate.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from app.models.user import User

logger = logging.getLogger(__name__)

EMAIL_INDEX_NAME = "email_unique"


class DuplicateEmailError(Exception):
    """Raised when an insert collides with an existing normalized email."""

    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookups."""
    return email.strip().lower()


class UserStore:
    """
    Persists user records.

    Only this class writes to the `users` collection.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "users"):
        """
        Initialize UserStore.

        Args:
            db: MongoDB database connection
            collection_name: Name of the users collection
        """
        self._users_collection = db[collection_name]

    async def ensure_indexes(self) -> None:
        """Create the unique email index if it does not exist yet."""
        await self._users_collection.create_index(
            [("email", ASCENDING)],
            unique=True,
            name=EMAIL_INDEX_NAME,
        )
        logger.debug("Ensured unique email index on users collection")

    async def create(self, email: str, password_hash: str, name: str) -> User:
        """
        Insert a new user.

        Args:
            email: Email address (normalized before insert)
            password_hash: Output of the password hasher
            name: Display name

        Returns:
            The created User

        Raises:
            DuplicateEmailError: A user with the same normalized email exists
        """
        now = datetime.now(timezone.utc)
        user_doc = {
            "email": normalize_email(email),
            "passwordHash": password_hash,
            "name": name,
            "createdAt": now,
            "updatedAt": now,
        }

        try:
            result = await self._users_collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            raise DuplicateEmailError(user_doc["email"]) from e

        user_doc["_id"] = result.inserted_id
        logger.info(f"User created: {result.inserted_id}")
        return User.from_document(user_doc)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, matching on the normalized form."""
        doc = await self._users_collection.find_one({"email": normalize_email(email)})
        return User.from_document(doc) if doc else None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by id. Ids that are not valid ObjectIds match nothing."""
        try:
            oid = ObjectId(user_id)
        except (InvalidId, TypeError):
            logger.debug(f"Lookup with invalid user id: {user_id!r}")
            return None

        doc = await self._users_collection.find_one({"_id": oid})
        return User.from_document(doc) if doc else None
