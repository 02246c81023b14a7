"""Unit tests for PasswordHasher (bcrypt with SHA-256 pre-hash)."""

from unittest.mock import patch

import bcrypt
import pytest

from common.auth import PasswordHasher


class TestHash:
    def test_same_password_gives_different_hashes(self, password_hasher):
        first = password_hasher.hash("password123")
        second = password_hasher.hash("password123")

        assert first != second

    def test_hash_is_bcrypt_with_configured_cost(self, password_hasher):
        hashed = password_hasher.hash("password123")

        assert hashed.startswith("$2b$04$")
        assert "password123" not in hashed

    def test_rejects_out_of_range_rounds(self):
        with pytest.raises(ValueError):
            PasswordHasher(rounds=3)


class TestVerify:
    def test_accepts_matching_password(self, password_hasher):
        for password in ["password123", "ünïcødé pass", "x" * 200]:
            assert password_hasher.verify(password, password_hasher.hash(password)) is True

    def test_rejects_wrong_password(self, password_hasher):
        hashed = password_hasher.hash("password123")

        assert password_hasher.verify("password124", hashed) is False

    def test_long_passwords_differing_after_72_bytes_do_not_collide(self, password_hasher):
        base = "a" * 80
        hashed = password_hasher.hash(base + "1")

        assert password_hasher.verify(base + "2", hashed) is False

    def test_malformed_hash_is_a_mismatch_not_an_error(self, password_hasher):
        assert password_hasher.verify("password123", "not-a-bcrypt-hash") is False
        assert password_hasher.verify("password123", "") is False

    def test_plain_bcrypt_hash_without_prehash_does_not_match(self, password_hasher):
        legacy = bcrypt.hashpw(b"password123", bcrypt.gensalt(rounds=4)).decode("utf-8")

        assert password_hasher.verify("password123", legacy) is False


def test_dummy_verify_runs_without_error(password_hasher):
    password_hasher.dummy_verify("whatever")
    password_hasher.dummy_verify("whatever again")


def test_dummy_verify_costs_a_single_bcrypt_check(password_hasher):
    with patch.object(bcrypt, "hashpw") as hashpw, \
            patch.object(bcrypt, "checkpw", wraps=bcrypt.checkpw) as checkpw:
        password_hasher.dummy_verify("whatever")

    hashpw.assert_not_called()
    checkpw.assert_called_once()
