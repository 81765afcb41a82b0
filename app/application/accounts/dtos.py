"""
Data Transfer Objects for the accounts application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for changing a user's names.

    Attributes:
        first_name: New first name. Empty or None keeps the current one.
        last_name: New last name. Empty or None keeps the current one.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None


@dataclass(frozen=True)
class UpdatePasswordCommand:
    """Input DTO for replacing a user's password.

    Attributes:
        password: The new plaintext password.
    """

    password: str


@dataclass(frozen=True)
class UpdateEmailCommand:
    """Input DTO for changing a user's email.

    Attributes:
        email: The new email address.
    """

    email: str
