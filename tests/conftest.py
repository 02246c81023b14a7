"""Shared test fixtures for FinTrack backend tests."""

from types import SimpleNamespace
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from api import create_app
from app.config import Settings
from common.auth import JWTAuth, PasswordHasher

TEST_JWT_SECRET = "test-secret-key-for-fintrack"


class FakeUsersCollection:
    """
    In-memory stand-in for the Motor `users` collection.

    Supports the calls UserStore makes and enforces unique indexes the way
    MongoDB does, by rejecting the insert with DuplicateKeyError.
    """

    def __init__(self):
        self.documents: List[Dict[str, Any]] = []
        self.unique_fields: set = set()

    async def create_index(self, keys, unique: bool = False, name: str = None):
        if unique:
            self.unique_fields.update(field for field, _ in keys)
        return name

    async def insert_one(self, doc: Dict[str, Any]):
        for field in self.unique_fields:
            if any(existing.get(field) == doc.get(field) for existing in self.documents):
                raise DuplicateKeyError(f"E11000 duplicate key error index: {field}_unique")
        stored = dict(doc)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"], acknowledged=True)

    async def find_one(self, query: Dict[str, Any]):
        for doc in self.documents:
            if all(doc.get(key) == value for key, value in query.items()):
                return dict(doc)
        return None


@pytest.fixture
def sample_user_id():
    return str(ObjectId())


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        JWT_SECRET=TEST_JWT_SECRET,
        JWT_ACCESS_TOKEN_EXPIRE_MINUTES=60,
        BCRYPT_ROUNDS=4,
        ENVIRONMENT="test",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def password_hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_provider():
    return JWTAuth(secret=TEST_JWT_SECRET, access_token_expire_minutes=60)


@pytest.fixture
def mock_collection():
    return AsyncMock()


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def users_collection():
    return FakeUsersCollection()


@pytest.fixture
def fake_db(users_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=users_collection)
    return db


@pytest.fixture
def client(settings, fake_db):
    app = create_app(settings, database=fake_db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered_user(client):
    """Register the standard test account and return the response data."""
    res = client.post(
        "/api/auth/register",
        json={"email": "test@example.com", "password": "password123", "name": "Test User"},
    )
    assert res.status_code == 201
    return res.json()["data"]
