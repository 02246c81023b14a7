"""
bcrypt password hashing.

Passwords are pre-hashed with SHA-256 before bcrypt. This handles bcrypt's
72-byte input limit and gives consistent behavior across all password
lengths. Every call to `hash` draws a fresh salt, so identical passwords
produce different stored hashes.

Example:
    hasher = PasswordHasher(rounds=12)
    stored = hasher.hash("password123")
    assert hasher.verify("password123", stored)
"""

import base64
import hashlib
import logging

import bcrypt as bcrypt_lib

logger = logging.getLogger(__name__)


class PasswordHasher:
    """One-way password hashing with an adaptive cost factor."""

    def __init__(self, rounds: int = 12):
        """
        Args:
            rounds: bcrypt log2 work factor (4-31)
        """
        if not 4 <= rounds <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")
        self.rounds = rounds
        # dummy_verify must cost exactly one bcrypt check, including the first call
        self._dummy_hash = bcrypt_lib.hashpw(
            self._prehash("dummy-password"), bcrypt_lib.gensalt(rounds=rounds)
        )

    @staticmethod
    def _prehash(password: str) -> bytes:
        sha256_hash = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(sha256_hash)

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt with SHA-256 pre-hashing."""
        salt = bcrypt_lib.gensalt(rounds=self.rounds)
        return bcrypt_lib.hashpw(self._prehash(password), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """
        Verify a password against its stored hash.

        bcrypt compares the full digest regardless of where a mismatch
        occurs. A malformed stored hash is reported as a mismatch.
        """
        if not hashed:
            return False
        try:
            return bcrypt_lib.checkpw(self._prehash(password), hashed.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False

    def dummy_verify(self, password: str) -> None:
        """
        Burn the same bcrypt work as a real verify.

        Used when no user matches a login email so the response time does
        not reveal whether the account exists.
        """
        bcrypt_lib.checkpw(self._prehash(password), self._dummy_hash)
