"""Credential service: registration, credential checks, token issuance, user deletion."""

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from app.core.exceptions import ApplicationError
from app.core.security import PasswordHasher, TokenIssuer
from app.models.user import User
from app.repositories.users import UserStore
from app.schemas.auth import RegisterRequest
from app.schemas.common import validate_model
from app.services.result import Result

logger = logging.getLogger(__name__)

USERNAME_EXISTS = "Username already exists"
EMAIL_EXISTS = "Email already exists"
USER_NOT_FOUND = "User not found"


class CredentialService:
    """
    Composes the user store, password hasher and token issuer.

    register and delete_user mutate the store; validate_credentials and
    generate_token only read it. The username check in register is not atomic
    with the insert: a concurrent duplicate fails on the unique index and
    surfaces as StoreError.
    """

    def __init__(
        self,
        users: UserStore,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    def register(
        self,
        username: str,
        password: str,
        email: str | None = None,
        roles: Sequence[str] = (),
    ) -> Result[str]:
        """Create a user. Returns the new id as a string, or a failure when the name is taken."""
        request = validate_model(
            RegisterRequest,
            {"username": username, "password": password, "email": email},
        )
        email = request.email
        if self._users.exists_by_username(username):
            logger.info("Registration rejected: username taken", extra={"username": username})
            return Result.failure(USERNAME_EXISTS)
        if email and self._users.exists_by_email(email):
            logger.info("Registration rejected: email taken", extra={"username": username})
            return Result.failure(EMAIL_EXISTS)

        user = User(
            username=username,
            email=email or None,
            password_hash=self._hasher.hash(password),
            roles=list(roles),
            created_at=datetime.now(UTC),
        )
        user_id = self._users.insert(user)
        logger.info("User registered", extra={"user_id": user_id, "username": username})
        return Result.success(str(user_id))

    def validate_credentials(self, username: str, password: str) -> bool:
        user = self._users.find_by_username(username)
        if user is None:
            return False
        return self._hasher.verify(password, user.password_hash)

    def generate_token(self, username: str) -> str:
        """Issue a bearer token for an existing user. Raises ApplicationError if the user is unknown."""
        user = self._users.find_by_username(username)
        if user is None:
            raise ApplicationError(USER_NOT_FOUND)
        token = self._tokens.issue(user)
        logger.info("Access token issued", extra={"user_id": user.id})
        return token

    def record_login(self, username: str) -> None:
        """Stamp last_login on a successful login; unknown users are ignored."""
        user = self._users.find_by_username(username)
        if user is None:
            return
        user.last_login = datetime.now(UTC)
        self._users.save(user)

    def delete_user(self, user_id: str) -> Result[str]:
        try:
            key = int(user_id)
        except (TypeError, ValueError):
            return Result.failure(USER_NOT_FOUND)
        user = self._users.find_by_id(key)
        if user is None:
            return Result.failure(USER_NOT_FOUND)
        self._users.delete(user)
        logger.info("User deleted", extra={"user_id": key})
        return Result.success(user_id)
