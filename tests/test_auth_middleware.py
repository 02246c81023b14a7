"""Unit tests for AuthMiddleware (bearer token gate)."""

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from app.middleware.auth import AuthContext, AuthMiddleware
from common.auth import JWTAuth
from common.utils.exceptions import UnauthorizedException


@pytest.fixture
def middleware(token_provider):
    return AuthMiddleware(token_provider=token_provider)


class TestAuthenticate:
    def test_valid_token_yields_context(self, middleware, token_provider, sample_user_id):
        token = token_provider.create_token(sample_user_id)

        context = middleware.authenticate(f"Bearer {token}")

        assert context.user_id == sample_user_id
        assert context.expires_at > context.issued_at
        assert context.expires_at.tzinfo is not None

    def test_scheme_is_case_insensitive(self, middleware, token_provider, sample_user_id):
        token = token_provider.create_token(sample_user_id)

        assert middleware.authenticate(f"bearer {token}").user_id == sample_user_id

    def test_context_is_immutable(self, middleware, token_provider, sample_user_id):
        context = middleware.authenticate(f"Bearer {token_provider.create_token(sample_user_id)}")

        with pytest.raises(dataclasses.FrozenInstanceError):
            context.user_id = "someone-else"

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Token abc", "Basic dXNlcjpwYXNz"])
    def test_missing_or_unusable_header(self, middleware, header):
        with pytest.raises(UnauthorizedException) as exc_info:
            middleware.authenticate(header)

        assert exc_info.value.status_code == 401

    def test_every_token_failure_looks_the_same(self, middleware, sample_user_id):
        past = datetime.now(timezone.utc) - timedelta(hours=3)
        expired = JWTAuth(secret="test-secret-key-for-fintrack", clock=lambda: past).create_token(sample_user_id)
        forged = JWTAuth(secret="other").create_token(sample_user_id)

        details = []
        for header in [None, "Bearer invalid_token", f"Bearer {expired}", f"Bearer {forged}"]:
            with pytest.raises(UnauthorizedException) as exc_info:
                middleware.authenticate(header)
            details.append((exc_info.value.status_code, exc_info.value.detail))

        assert len(set((status, str(detail)) for status, detail in details)) == 1


def test_auth_context_defaults():
    context = AuthContext(user_id="abc")

    assert context.issued_at is None
    assert context.expires_at is None
