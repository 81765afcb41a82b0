"""
Port interfaces (ABCs) for the accounts bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.accounts.entities import User


class UserRepository(ABC):
    """Port for persisting and retrieving users.

    Lookups return None when no record matches; that is not an error.
    Any other failure is raised as an exception.
    """

    @abstractmethod
    def create(self, user: User) -> None:
        """Persist a new user and assign its ``id`` in place."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Return a user by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user holding an email, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User) -> None:
        """Replace every stored field of an existing user."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """Permanently remove a user."""
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way, salted password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of the plaintext password."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Return True if the plaintext matches the stored hash."""
        raise NotImplementedError
