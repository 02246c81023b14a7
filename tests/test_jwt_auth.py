"""Unit tests for JWTAuth token issuing and verification."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from common.auth import (
    BadSignatureError,
    ExpiredTokenError,
    JWTAuth,
    MalformedTokenError,
    TokenError,
)


class TestCreateToken:
    def test_token_carries_subject_and_expiry(self, token_provider, sample_user_id):
        token = token_provider.create_token(sample_user_id)

        claims = jwt.get_unverified_claims(token)
        assert claims["sub"] == sample_user_id
        assert claims["type"] == "access"
        assert claims["exp"] - claims["iat"] == 60 * 60

    def test_lifetime_follows_configuration(self, sample_user_id):
        auth = JWTAuth(secret="s3cret", access_token_expire_minutes=5)

        claims = jwt.get_unverified_claims(auth.create_token(sample_user_id))

        assert claims["exp"] - claims["iat"] == 5 * 60

    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError):
            JWTAuth(secret="")

    def test_repr_does_not_expose_secret(self):
        auth = JWTAuth(secret="do-not-print-me")

        assert "do-not-print-me" not in repr(auth)


class TestVerifyToken:
    def test_round_trip(self, token_provider, sample_user_id):
        claims = token_provider.verify_token(token_provider.create_token(sample_user_id))

        assert claims["sub"] == sample_user_id

    @pytest.mark.parametrize("token", ["", "invalid_token", "a.b", "not.a.jwt"])
    def test_garbage_is_malformed(self, token_provider, token):
        with pytest.raises(MalformedTokenError):
            token_provider.verify_token(token)

    def test_other_key_is_bad_signature(self, token_provider, sample_user_id):
        forged = JWTAuth(secret="another-secret").create_token(sample_user_id)

        with pytest.raises(BadSignatureError):
            token_provider.verify_token(forged)

    def test_tampered_payload_is_bad_signature(self, token_provider, sample_user_id):
        token = token_provider.create_token(sample_user_id)
        header, _, signature = token.split(".")
        other_payload = token_provider.create_token("someone-else").split(".")[1]

        with pytest.raises(BadSignatureError):
            token_provider.verify_token(f"{header}.{other_payload}.{signature}")

    def test_expired_token(self, sample_user_id):
        past = datetime.now(timezone.utc) - timedelta(hours=3)
        auth = JWTAuth(secret="s3cret", access_token_expire_minutes=60, clock=lambda: past)

        with pytest.raises(ExpiredTokenError):
            auth.verify_token(auth.create_token(sample_user_id))

    def test_signature_is_checked_before_expiry(self, sample_user_id):
        past = datetime.now(timezone.utc) - timedelta(hours=3)
        expired_and_forged = JWTAuth(secret="wrong", clock=lambda: past).create_token(sample_user_id)

        with pytest.raises(BadSignatureError):
            JWTAuth(secret="s3cret").verify_token(expired_and_forged)

    def test_missing_subject_is_malformed(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode({"exp": now + timedelta(minutes=5)}, "s3cret", algorithm="HS256")

        with pytest.raises(MalformedTokenError):
            JWTAuth(secret="s3cret").verify_token(token)

    def test_other_algorithm_is_rejected(self, sample_user_id):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": sample_user_id, "exp": now + timedelta(minutes=5)},
            "s3cret",
            algorithm="HS512",
        )

        with pytest.raises(TokenError):
            JWTAuth(secret="s3cret").verify_token(token)

    def test_failures_share_a_base_class(self):
        for error in (MalformedTokenError, BadSignatureError, ExpiredTokenError):
            assert issubclass(error, TokenError)
