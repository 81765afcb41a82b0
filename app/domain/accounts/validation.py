"""
Validation rules for user records.

Checks run in a fixed order and the first failing rule is raised.
Pure functions: no IO, no side effects.
"""

import re

from app.domain.accounts.entities import User
from app.domain.accounts.errors import (
    EMAIL_REQUIRED,
    FIRST_NAME_REQUIRED,
    INVALID_EMAIL_FORMAT,
    LAST_NAME_REQUIRED,
    PASSWORD_REQUIRED,
    UserValidationError,
)

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def is_valid_email(email: str) -> bool:
    """Return True if the email has the form local-part@domain.tld."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_user(user: User) -> None:
    """Validate a candidate user record.

    Args:
        user: The record to check. Not modified.

    Raises:
        UserValidationError: With the message of the first violated rule.
    """
    if not user.password:
        raise UserValidationError(PASSWORD_REQUIRED)

    if not user.first_name:
        raise UserValidationError(FIRST_NAME_REQUIRED)

    if not user.last_name:
        raise UserValidationError(LAST_NAME_REQUIRED)

    if not user.email:
        raise UserValidationError(EMAIL_REQUIRED)

    if not is_valid_email(user.email):
        raise UserValidationError(INVALID_EMAIL_FORMAT)
