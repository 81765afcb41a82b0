"""
Tests for the accounts API endpoints.

Tests FastAPI routes with the user service wired to an in-memory
repository through dependency overrides. Validates status codes,
response schemas, and error mapping.
"""

from typing import Optional
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from app.application.accounts.user_service import UserService
from app.domain.accounts.entities import User
from app.domain.accounts.ports import PasswordHasher, UserRepository
from app.interfaces.accounts.dependencies import get_user_service
from app.main import app
from app.shared.security.rate_limiting import limiter

client = TestClient(app)

USERS = "/api/v1/users"


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository test double."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}

    def create(self, user: User) -> None:
        user.id = str(uuid4())
        self.users[user.id] = user

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    def update(self, user: User) -> None:
        self.users[user.id] = user

    def delete(self, user_id: str) -> None:
        self.users.pop(user_id, None)


class PrefixHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture
def repo():
    """Wire the app to a fresh in-memory repository for each test."""
    repository = InMemoryUserRepository()
    service = UserService(repository=repository, password_hasher=PrefixHasher())
    app.dependency_overrides[get_user_service] = lambda: service
    limiter.reset()
    yield repository
    app.dependency_overrides.clear()


def _create(email: str = "john.doe@example.com") -> dict:
    response = client.post(
        USERS,
        json={
            "firstName": "John",
            "lastName": "Doe",
            "email": email,
            "password": "password",
        },
    )
    assert response.status_code == 201
    return response.json()


class TestCreateUserEndpoint:
    """Tests for POST /api/v1/users."""

    def test_created_user_has_no_password(self, repo) -> None:
        body = _create()

        assert set(body) == {"id", "firstName", "lastName", "email", "createdAt", "updatedAt"}
        assert body["email"] == "john.doe@example.com"
        assert repo.users[body["id"]].password == "hashed:password"

    def test_missing_password_returns_400(self, repo) -> None:
        response = client.post(USERS, json={"firstName": "John"})

        assert response.status_code == 400
        assert response.json() == {"error": "password is required"}

    def test_invalid_email_returns_400(self, repo) -> None:
        response = client.post(
            USERS,
            json={"firstName": "J", "lastName": "D", "email": "john.doe", "password": "p"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid email format"

    def test_duplicate_email_returns_409(self, repo) -> None:
        _create()
        response = client.post(
            USERS,
            json={"firstName": "J", "lastName": "D", "email": "john.doe@example.com", "password": "p"},
        )

        assert response.status_code == 409
        assert response.json() == {"error": "user with this email already exists"}


class TestReadUserEndpoints:
    """Tests for GET /api/v1/users/{id} and /by-email/{email}."""

    def test_get_by_id(self, repo) -> None:
        created = _create()

        response = client.get(f"{USERS}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_by_email(self, repo) -> None:
        created = _create()

        response = client.get(f"{USERS}/by-email/john.doe@example.com")

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_unknown_id_returns_404(self, repo) -> None:
        response = client.get(f"{USERS}/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "user not found"}


class TestUpdateUserEndpoints:
    """Tests for PATCH, PUT /password and PUT /email."""

    def test_patch_names(self, repo) -> None:
        created = _create()

        response = client.patch(f"{USERS}/{created['id']}", json={"firstName": "Jane"})

        assert response.status_code == 200
        assert response.json()["firstName"] == "Jane"
        assert response.json()["lastName"] == "Doe"

    def test_replace_password(self, repo) -> None:
        created = _create()

        response = client.put(f"{USERS}/{created['id']}/password", json={"password": "n3w"})

        assert response.status_code == 204
        assert repo.users[created["id"]].password == "hashed:n3w"

    def test_empty_password_returns_400(self, repo) -> None:
        created = _create()

        response = client.put(f"{USERS}/{created['id']}/password", json={"password": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "password is required"}

    def test_change_email(self, repo) -> None:
        created = _create()

        response = client.put(f"{USERS}/{created['id']}/email", json={"email": "jd@example.org"})

        assert response.status_code == 200
        assert response.json()["email"] == "jd@example.org"

    def test_change_email_to_taken_returns_409(self, repo) -> None:
        created = _create()
        _create(email="jane@example.com")

        response = client.put(f"{USERS}/{created['id']}/email", json={"email": "jane@example.com"})

        assert response.status_code == 409


class TestDeleteUserEndpoint:
    """Tests for DELETE /api/v1/users/{id}."""

    def test_delete_then_not_found(self, repo) -> None:
        created = _create()

        assert client.delete(f"{USERS}/{created['id']}").status_code == 204
        assert client.get(f"{USERS}/{created['id']}").status_code == 404

    def test_delete_unknown_returns_404(self, repo) -> None:
        assert client.delete(f"{USERS}/missing").status_code == 404


class TestInternalErrorMapping:
    """Storage failures surface only the fixed internal message."""

    def test_store_failure_returns_500_without_details(self) -> None:
        failing = MagicMock(spec=UserRepository)
        failing.get_by_id.side_effect = RuntimeError("password authentication failed for user")
        service = UserService(repository=failing, password_hasher=PrefixHasher())
        app.dependency_overrides[get_user_service] = lambda: service
        limiter.reset()
        try:
            response = client.get(f"{USERS}/1")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "an internal error occurred"}

    def test_unexpected_error_returns_generic_500(self) -> None:
        def broken_service() -> UserService:
            raise RuntimeError("connection pool exhausted")

        app.dependency_overrides[get_user_service] = broken_service
        limiter.reset()
        try:
            response = TestClient(app, raise_server_exceptions=False).get(f"{USERS}/1")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "connection pool" not in response.text
        # Produced outside the middleware stack.
        assert "X-Content-Type-Options" not in response.headers
