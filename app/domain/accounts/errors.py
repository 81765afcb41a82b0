"""
Domain-specific errors for the accounts bounded context.

All errors raised from the domain and application layers must be defined
here. Their messages are safe to show to callers as-is.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

PASSWORD_REQUIRED = "password is required"
FIRST_NAME_REQUIRED = "first name is required"
LAST_NAME_REQUIRED = "last name is required"
EMAIL_REQUIRED = "email is required"
INVALID_EMAIL_FORMAT = "invalid email format"
EMAIL_ALREADY_EXISTS = "user with this email already exists"
USER_NOT_FOUND = "user not found"
INTERNAL_ERROR = "an internal error occurred"


class AccountsDomainError(Exception):
    """Base error for all accounts domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserValidationError(AccountsDomainError):
    """Raised when a user record violates a validation rule."""


class DuplicateEmailError(AccountsDomainError):
    """Raised when another user already holds the requested email."""

    def __init__(self, email: str) -> None:
        super().__init__(EMAIL_ALREADY_EXISTS)
        self.email = email


class UserNotFoundError(AccountsDomainError):
    """Raised when no user matches the requested id or email."""

    def __init__(self, lookup: str) -> None:
        super().__init__(USER_NOT_FOUND)
        self.lookup = lookup


class InternalError(AccountsDomainError):
    """Raised in place of any storage or hashing failure.

    The underlying exception is chained as ``__cause__`` and never
    reaches the caller's message.
    """

    def __init__(self) -> None:
        super().__init__(INTERNAL_ERROR)
