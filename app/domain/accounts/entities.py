"""
Domain entities for the accounts bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """A person holding an account.

    The identifier is assigned by the store on creation and is None
    until then. Once persisted, ``password`` holds a salted hash.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Organization:
    """An organization owned by a single user."""

    id: str
    name: str
    owner_user_id: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class School:
    """A school operated by an organization."""

    id: str
    organization_id: str
    name: str
    address: str
    city: str
    state: str
    zip: str
    phone: str
    created_at: datetime
    updated_at: datetime
