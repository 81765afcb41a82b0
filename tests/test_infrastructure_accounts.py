"""
Tests for the accounts infrastructure adapters.

Uses unittest.mock to avoid requiring a live PostgreSQL instance.
Validates SQL parameters, row mapping, absence handling and hashing.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from app.domain.accounts.entities import User
from app.infrastructure.accounts.password_hasher import BcryptPasswordHasher
from app.infrastructure.accounts.schema import SCHEMA_STATEMENTS, create_schema
from app.infrastructure.accounts.user_repository import UserRepositoryAdapter

USER_ID = "6f1c0a52-2a0b-4d4e-9f0e-3b1f9b6c2d10"
NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


# ── Helpers ──────────────────────────────────────────────────────────


def _mock_engine() -> tuple[MagicMock, MagicMock]:
    """Return an engine mock whose connect() and begin() yield the same connection."""
    engine = MagicMock()
    conn = MagicMock()
    engine.connect.return_value.__enter__.return_value = conn
    engine.begin.return_value.__enter__.return_value = conn
    return engine, conn


def _row() -> tuple:
    return (USER_ID, "John", "Doe", "john.doe@example.com", "$2b$hash", NOW, NOW)


def _params(conn: MagicMock) -> dict:
    """Return the bind parameters of the last execute call."""
    return conn.execute.call_args.args[1]


def _sql(conn: MagicMock) -> str:
    return str(conn.execute.call_args.args[0])


# ══════════════════════════════════════════════════════════════════════
# UserRepositoryAdapter
# ══════════════════════════════════════════════════════════════════════


class TestUserRepositoryCreate:
    """Tests for UserRepositoryAdapter.create."""

    def test_assigns_returned_id(self) -> None:
        engine, conn = _mock_engine()
        conn.execute.return_value.scalar_one.return_value = USER_ID
        user = User(
            first_name="John",
            last_name="Doe",
            email="john.doe@example.com",
            password="$2b$hash",
            created_at=NOW,
            updated_at=NOW,
        )

        UserRepositoryAdapter(engine).create(user)

        assert user.id == USER_ID
        assert "RETURNING id" in _sql(conn)
        assert _params(conn)["email"] == "john.doe@example.com"
        assert _params(conn)["password"] == "$2b$hash"
        engine.begin.assert_called_once()

    def test_database_error_propagates(self) -> None:
        engine, conn = _mock_engine()
        conn.execute.side_effect = RuntimeError("unique violation")

        with pytest.raises(RuntimeError):
            UserRepositoryAdapter(engine).create(User(email="a@b.co"))


class TestUserRepositoryLookups:
    """Tests for get_by_id and get_by_email."""

    def test_get_by_id_maps_row(self) -> None:
        engine, conn = _mock_engine()
        conn.execute.return_value.first.return_value = _row()

        user = UserRepositoryAdapter(engine).get_by_id(USER_ID)

        assert user == User(
            id=USER_ID,
            first_name="John",
            last_name="Doe",
            email="john.doe@example.com",
            password="$2b$hash",
            created_at=NOW,
            updated_at=NOW,
        )
        assert _params(conn) == {"id": USER_ID}

    def test_get_by_id_no_row_is_none(self) -> None:
        engine, conn = _mock_engine()
        conn.execute.return_value.first.return_value = None

        assert UserRepositoryAdapter(engine).get_by_id(USER_ID) is None

    def test_get_by_id_non_uuid_is_none_without_query(self) -> None:
        engine, conn = _mock_engine()

        assert UserRepositoryAdapter(engine).get_by_id("not-a-uuid") is None
        conn.execute.assert_not_called()

    def test_get_by_email_maps_row(self) -> None:
        engine, conn = _mock_engine()
        conn.execute.return_value.first.return_value = _row()

        user = UserRepositoryAdapter(engine).get_by_email("john.doe@example.com")

        assert user is not None
        assert user.id == USER_ID
        assert _params(conn) == {"email": "john.doe@example.com"}

    def test_get_by_email_no_row_is_none(self) -> None:
        engine, conn = _mock_engine()
        conn.execute.return_value.first.return_value = None

        assert UserRepositoryAdapter(engine).get_by_email("x@y.zz") is None


class TestUserRepositoryWrites:
    """Tests for update and delete."""

    def test_update_writes_full_record(self) -> None:
        engine, conn = _mock_engine()
        user = User(
            id=USER_ID,
            first_name="Jane",
            last_name="Roe",
            email="jane@example.com",
            password="$2b$new",
            created_at=NOW,
            updated_at=NOW,
        )

        UserRepositoryAdapter(engine).update(user)

        assert _params(conn) == {
            "first_name": "Jane",
            "last_name": "Roe",
            "email": "jane@example.com",
            "password": "$2b$new",
            "updated_at": NOW,
            "id": USER_ID,
        }
        assert "UPDATE users" in _sql(conn)

    def test_delete_by_id(self) -> None:
        engine, conn = _mock_engine()

        UserRepositoryAdapter(engine).delete(USER_ID)

        assert "DELETE FROM users" in _sql(conn)
        assert _params(conn) == {"id": USER_ID}

    def test_delete_non_uuid_is_noop(self) -> None:
        engine, conn = _mock_engine()

        UserRepositoryAdapter(engine).delete("nope")

        engine.begin.assert_not_called()


# ══════════════════════════════════════════════════════════════════════
# Schema
# ══════════════════════════════════════════════════════════════════════


class TestSchema:
    """Tests for create_schema."""

    def test_runs_every_statement_in_one_transaction(self) -> None:
        engine, conn = _mock_engine()

        create_schema(engine)

        engine.begin.assert_called_once()
        assert conn.execute.call_count == len(SCHEMA_STATEMENTS)

    def test_declares_all_tables(self) -> None:
        ddl = " ".join(SCHEMA_STATEMENTS)
        for table in ("users", "organizations", "schools"):
            assert f"CREATE TABLE IF NOT EXISTS {table}" in ddl
        assert "email       TEXT NOT NULL UNIQUE" in ddl


# ══════════════════════════════════════════════════════════════════════
# BcryptPasswordHasher
# ══════════════════════════════════════════════════════════════════════


class TestBcryptPasswordHasher:
    """Tests for the bcrypt adapter (low cost factor for speed)."""

    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hasher = BcryptPasswordHasher(rounds=4)
        hashed = hasher.hash("password")

        assert hashed != "password"
        assert hashed.startswith("$2")
        assert hasher.verify("password", hashed)
        assert not hasher.verify("Password", hashed)

    def test_hash_is_salted(self) -> None:
        hasher = BcryptPasswordHasher(rounds=4)
        assert hasher.hash("password") != hasher.hash("password")
