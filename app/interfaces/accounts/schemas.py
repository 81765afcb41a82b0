"""
Pydantic schemas for accounts API request/response validation.

These schemas define the API contract. JSON keys are camelCase;
snake_case names are accepted on input as well.
Business validation (required fields, email format) lives in the domain
so that callers receive its exact messages.
No business logic belongs here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.accounts.entities import User


class CamelModel(BaseModel):
    """Base schema serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(CamelModel):
    """Request schema for user creation.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        email: Email address, unique across users.
        password: Plaintext password; stored only as a hash.
    """

    first_name: str = Field(default="", description="Given name")
    last_name: str = Field(default="", description="Family name")
    email: str = Field(default="", description="Email address")
    password: str = Field(default="", description="Plaintext password")


class UpdateUserRequest(CamelModel):
    """Request schema for changing names. Empty values are ignored."""

    first_name: Optional[str] = Field(default=None, description="New given name")
    last_name: Optional[str] = Field(default=None, description="New family name")


class UpdatePasswordRequest(CamelModel):
    """Request schema for replacing a password."""

    password: str = Field(default="", description="New plaintext password")


class UpdateEmailRequest(CamelModel):
    """Request schema for changing an email address."""

    email: str = Field(default="", description="New email address")


class UserResponse(CamelModel):
    """Public view of a user. Never includes the password hash."""

    id: str
    first_name: str
    last_name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        """Build the response from a domain entity."""
        return cls(
            id=user.id or "",
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
