"""
Auth service.

Orchestrates registration, login and current-user resolution on top of the
credential store, the password hasher and the token provider. Component
failures are translated here into the API exception taxonomy.
"""

import asyncio
import logging
from typing import Any, Dict, List

from email_validator import EmailNotValidError, validate_email
from pymongo.errors import PyMongoError

from common.auth import PasswordHasher, TokenProvider
from common.utils import validate_password
from common.utils.exceptions import (
    EmailAlreadyRegisteredException,
    InternalServerException,
    InvalidCredentialsException,
    NotFoundException,
    ValidationException,
)
from app.auth.store import DuplicateEmailError, UserStore, normalize_email
from app.models.user import User

logger = logging.getLogger(__name__)


def _is_utf8_encodable(value: str) -> bool:
    """False for strings holding lone surrogates, which JSON can carry."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class AuthService:
    """
    Registration, login and identity lookup.

    register and login return the same payload shape:
    ``{"user": <public user>, "authToken": <bearer token>}``.
    """

    def __init__(
        self,
        user_store: UserStore,
        password_hasher: PasswordHasher,
        token_provider: TokenProvider,
        password_min_length: int = 8,
        password_max_length: int = 128,
        name_max_length: int = 100,
    ):
        """
        Initialize AuthService.

        Args:
            user_store: Credential store
            password_hasher: For hashing and verifying passwords
            token_provider: For issuing bearer tokens
            password_min_length: Minimum accepted password length
            password_max_length: Maximum accepted password length
            name_max_length: Maximum display name length
        """
        self._user_store = user_store
        self._password_hasher = password_hasher
        self._token_provider = token_provider
        self._password_min_length = password_min_length
        self._password_max_length = password_max_length
        self._name_max_length = name_max_length

    async def register(self, email: str, password: str, name: str) -> Dict[str, Any]:
        """
        Create an account and sign the new user in.

        Raises:
            ValidationException: Missing or malformed email, password or name
            EmailAlreadyRegisteredException: Normalized email already in use
            InternalServerException: Store failure
        """
        email, name = self._validate_registration(email, password, name)

        password_hash = await asyncio.to_thread(self._password_hasher.hash, password)

        try:
            user = await self._user_store.create(email, password_hash, name)
        except DuplicateEmailError:
            logger.warning("Registration rejected: email already registered")
            raise EmailAlreadyRegisteredException()
        except PyMongoError as e:
            logger.error(f"Store failure during registration: {e}")
            raise InternalServerException()

        logger.info(f"User registered: {user.id}")
        return self._auth_payload(user)

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        Exchange an email/password pair for a token.

        An unknown email and a wrong password raise the same exception and
        cost the same bcrypt work.

        Raises:
            InvalidCredentialsException: Unknown email or wrong password
            InternalServerException: Store failure
        """
        if not email or not password:
            raise InvalidCredentialsException()
        if not _is_utf8_encodable(email) or not _is_utf8_encodable(password):
            logger.info("Login failed: credentials are not valid UTF-8")
            raise InvalidCredentialsException()

        try:
            user = await self._user_store.find_by_email(email)
        except PyMongoError as e:
            logger.error(f"Store failure during login: {e}")
            raise InternalServerException()

        if user is None:
            await asyncio.to_thread(self._password_hasher.dummy_verify, password)
            logger.info("Login failed: invalid credentials")
            raise InvalidCredentialsException()

        matches = await asyncio.to_thread(
            self._password_hasher.verify, password, user.password_hash
        )
        if not matches:
            logger.info("Login failed: invalid credentials")
            raise InvalidCredentialsException()

        logger.info(f"User logged in: {user.id}")
        return self._auth_payload(user)

    async def get_current_user(self, user_id: str, not_found_status: int = 401) -> Dict[str, Any]:
        """
        Resolve a token subject to its public user record.

        Args:
            user_id: Subject of a verified token
            not_found_status: Status to use when the account no longer exists

        Raises:
            NotFoundException: Account deleted after the token was issued
            InternalServerException: Store failure
        """
        try:
            user = await self._user_store.find_by_id(user_id)
        except PyMongoError as e:
            logger.error(f"Store failure during user lookup: {e}")
            raise InternalServerException()

        if user is None:
            logger.warning(f"Token subject has no account: {user_id}")
            raise NotFoundException(
                message="User not found",
                code="USER_NOT_FOUND",
                status_code=not_found_status,
            )

        return user.to_public()

    def _auth_payload(self, user: User) -> Dict[str, Any]:
        return {
            "user": user.to_public(),
            "authToken": self._token_provider.create_token(user.id),
        }

    def _validate_registration(self, email: str, password: str, name: str) -> tuple:
        """Check registration input; returns the cleaned (email, name)."""
        errors: List[Dict[str, str]] = []

        email = normalize_email(email or "")
        if not email:
            errors.append({"field": "email", "message": "Email is required"})
        elif not _is_utf8_encodable(email):
            errors.append({"field": "email", "message": "Email contains invalid characters"})
        else:
            try:
                validate_email(email, check_deliverability=False)
            except EmailNotValidError as e:
                errors.append({"field": "email", "message": str(e)})

        if not password:
            errors.append({"field": "password", "message": "Password is required"})
        elif not _is_utf8_encodable(password):
            errors.append({"field": "password", "message": "Password contains invalid characters"})
        else:
            is_valid, password_errors = validate_password(
                password,
                min_length=self._password_min_length,
                max_length=self._password_max_length,
            )
            if not is_valid:
                errors.extend({"field": "password", "message": msg} for msg in password_errors)

        name = (name or "").strip()
        if not name:
            errors.append({"field": "name", "message": "Name is required"})
        elif not _is_utf8_encodable(name):
            errors.append({"field": "name", "message": "Name contains invalid characters"})
        elif len(name) > self._name_max_length:
            errors.append({
                "field": "name",
                "message": f"Name must be no more than {self._name_max_length} characters",
            })

        if errors:
            raise ValidationException(message=errors[0]["message"], errors=errors)

        return email, name
