"""
Use cases: Manage user accounts.

Operations: create, get_by_id, get_by_email, update, update_password,
update_email, delete.
Side effects: Writes to the user repository.
Failure cases: UserValidationError, DuplicateEmailError, UserNotFoundError,
InternalError.

Storage and hashing failures are logged for operators and replaced by
InternalError, so no low-level detail ever reaches the caller.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from app.application.accounts.dtos import (
    UpdateEmailCommand,
    UpdatePasswordCommand,
    UpdateUserCommand,
)
from app.domain.accounts.entities import User
from app.domain.accounts.errors import (
    EMAIL_REQUIRED,
    INVALID_EMAIL_FORMAT,
    PASSWORD_REQUIRED,
    DuplicateEmailError,
    InternalError,
    UserNotFoundError,
    UserValidationError,
)
from app.domain.accounts.ports import PasswordHasher, UserRepository
from app.domain.accounts.validation import is_valid_email, validate_user

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class UserService:
    """Orchestrates user account operations.

    Wraps a UserRepository port and a PasswordHasher port. The clock and
    logger are injected so that timestamps and error reporting can be
    controlled in tests.
    """

    def __init__(
        self,
        repository: UserRepository,
        password_hasher: PasswordHasher,
        clock: Clock = utc_now,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repository = repository
        self._password_hasher = password_hasher
        self._clock = clock
        self._logger = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, user: User) -> User:
        """Validate, hash and persist a new user.

        Args:
            user: The candidate record with a plaintext password. It is
                updated in place with timestamps, the hash and its new id.

        Returns:
            The persisted user.

        Raises:
            UserValidationError: If a validation rule fails.
            DuplicateEmailError: If the email is already taken.
            InternalError: If hashing or storage fails.
        """
        now = self._clock()
        user.created_at = now
        user.updated_at = now

        validate_user(user)

        user.password = self._hash_password(user.password)

        if self._find_by_email(user.email) is not None:
            raise DuplicateEmailError(user.email)

        try:
            self._repository.create(user)
        except Exception as exc:
            self._logger.error("Failed to create user.", exc_info=True)
            raise InternalError() from exc

        self._logger.info("Created user id=%s.", user.id)
        return user

    def update(self, user_id: str, command: UpdateUserCommand) -> User:
        """Change a user's first and/or last name.

        Only non-empty incoming names are applied. Email and password
        are never touched.

        Raises:
            UserNotFoundError: If no user has this id.
            InternalError: If storage fails.
        """
        user = self._load(user_id)

        if command.first_name:
            user.first_name = command.first_name

        if command.last_name:
            user.last_name = command.last_name

        user.updated_at = self._clock()
        self._save(user)
        return user

    def update_password(self, user_id: str, command: UpdatePasswordCommand) -> User:
        """Replace a user's password with a hash of the new one.

        Raises:
            UserNotFoundError: If no user has this id.
            UserValidationError: If the new password is empty.
            InternalError: If hashing or storage fails.
        """
        user = self._load(user_id)

        if not command.password:
            raise UserValidationError(PASSWORD_REQUIRED)

        user.password = self._hash_password(command.password)
        user.updated_at = self._clock()
        self._save(user)
        return user

    def update_email(self, user_id: str, command: UpdateEmailCommand) -> User:
        """Move a user to a new email address.

        A lookup that finds the same user is not a conflict, so setting
        the current email again succeeds. The new address must also pass
        the creation format rule, which is stricter than a non-empty check.

        Raises:
            UserNotFoundError: If no user has this id.
            UserValidationError: If the email is empty or malformed.
            DuplicateEmailError: If another user holds the email.
            InternalError: If storage fails.
        """
        user = self._load(user_id)

        if not command.email:
            raise UserValidationError(EMAIL_REQUIRED)

        if not is_valid_email(command.email):
            raise UserValidationError(INVALID_EMAIL_FORMAT)

        holder = self._find_by_email(command.email)
        if holder is not None and holder.id != user.id:
            raise DuplicateEmailError(command.email)

        user.email = command.email
        user.updated_at = self._clock()
        self._save(user)
        return user

    def delete(self, user_id: str) -> None:
        """Permanently remove a user.

        Raises:
            UserNotFoundError: If no user has this id.
            InternalError: If storage fails.
        """
        self._load(user_id)

        try:
            self._repository.delete(user_id)
        except Exception as exc:
            self._logger.error("Failed to delete user id=%s.", user_id, exc_info=True)
            raise InternalError() from exc

        self._logger.info("Deleted user id=%s.", user_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, user_id: str) -> User:
        """Return the user with this id.

        Raises:
            UserNotFoundError: If no user has this id.
            InternalError: If storage fails.
        """
        return self._load(user_id)

    def get_by_email(self, email: str) -> User:
        """Return the user holding this email.

        Raises:
            UserNotFoundError: If no user holds this email.
            InternalError: If storage fails.
        """
        user = self._find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load(self, user_id: str) -> User:
        try:
            user = self._repository.get_by_id(user_id)
        except Exception as exc:
            self._logger.error("Failed to get user id=%s.", user_id, exc_info=True)
            raise InternalError() from exc

        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def _find_by_email(self, email: str) -> Optional[User]:
        try:
            return self._repository.get_by_email(email)
        except Exception as exc:
            self._logger.error("Failed to look up user by email.", exc_info=True)
            raise InternalError() from exc

    def _save(self, user: User) -> None:
        try:
            self._repository.update(user)
        except Exception as exc:
            self._logger.error("Failed to update user id=%s.", user.id, exc_info=True)
            raise InternalError() from exc

    def _hash_password(self, password: str) -> str:
        try:
            return self._password_hasher.hash(password)
        except Exception as exc:
            self._logger.error("Failed to hash password.", exc_info=True)
            raise InternalError() from exc
