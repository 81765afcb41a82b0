"""
Adapter: User repository.

Implements UserRepository port.
Persists and retrieves users from the PostgreSQL users table.
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.domain.accounts.entities import User
from app.domain.accounts.ports import UserRepository

logger = logging.getLogger(__name__)

_USER_COLUMNS = "id, first_name, last_name, email, password, created_at, updated_at"


def _row_to_user(row) -> User:
    """Map a users row (in _USER_COLUMNS order) to a User entity."""
    return User(
        id=str(row[0]),
        first_name=row[1],
        last_name=row[2],
        email=row[3],
        password=row[4],
        created_at=row[5],
        updated_at=row[6],
    )


def _is_uuid(value: str) -> bool:
    """Return True if the value parses as a UUID."""
    try:
        UUID(value)
    except (TypeError, ValueError):
        return False
    return True


class UserRepositoryAdapter(UserRepository):
    """Persists users to PostgreSQL.

    Implements the UserRepository port defined in the domain layer.
    Ids are UUIDs generated by the database; an id that is not a UUID
    can never match a row and is treated as absent.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, user: User) -> None:
        """Insert a new user and set its database-assigned id.

        Args:
            user: User entity to persist. Its ``id`` is overwritten.
        """
        query = text(
            """
            INSERT INTO users
                (first_name, last_name, email, password, created_at, updated_at)
            VALUES
                (:first_name, :last_name, :email, :password, :created_at, :updated_at)
            RETURNING id
            """
        )

        with self._engine.begin() as conn:
            new_id = conn.execute(
                query,
                {
                    "first_name": user.first_name,
                    "last_name": user.last_name,
                    "email": user.email,
                    "password": user.password,
                    "created_at": user.created_at,
                    "updated_at": user.updated_at,
                },
            ).scalar_one()

        user.id = str(new_id)
        logger.debug("Inserted user id=%s.", user.id)

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Return a user by its ID, or None if not found."""
        if not _is_uuid(user_id):
            return None

        query = text(f"SELECT {_USER_COLUMNS} FROM users WHERE id = :id")

        with self._engine.connect() as conn:
            row = conn.execute(query, {"id": user_id}).first()

        return _row_to_user(row) if row is not None else None

    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user holding an email, or None if not found."""
        query = text(f"SELECT {_USER_COLUMNS} FROM users WHERE email = :email")

        with self._engine.connect() as conn:
            row = conn.execute(query, {"email": email}).first()

        return _row_to_user(row) if row is not None else None

    def update(self, user: User) -> None:
        """Overwrite the stored names, email, password and updated_at.

        Args:
            user: User entity carrying the full new state.
        """
        query = text(
            """
            UPDATE users
            SET first_name = :first_name,
                last_name = :last_name,
                email = :email,
                password = :password,
                updated_at = :updated_at
            WHERE id = :id
            """
        )

        with self._engine.begin() as conn:
            conn.execute(
                query,
                {
                    "first_name": user.first_name,
                    "last_name": user.last_name,
                    "email": user.email,
                    "password": user.password,
                    "updated_at": user.updated_at,
                    "id": user.id,
                },
            )

        logger.debug("Updated user id=%s.", user.id)

    def delete(self, user_id: str) -> None:
        """Delete a user row. Deleting a missing id is a no-op."""
        if not _is_uuid(user_id):
            return

        with self._engine.begin() as conn:
            conn.execute(text("DELETE FROM users WHERE id = :id"), {"id": user_id})

        logger.debug("Deleted user id=%s.", user_id)
