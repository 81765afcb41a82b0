"""
Relational schema for the accounts bounded context.

Tables: users, organizations, schools.
Statements are idempotent so they can be applied on every deploy.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    "CREATE EXTENSION IF NOT EXISTS pgcrypto",
    """
    CREATE TABLE IF NOT EXISTS users (
        id          UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        first_name  TEXT NOT NULL,
        last_name   TEXT NOT NULL,
        email       TEXT NOT NULL UNIQUE,
        password    TEXT NOT NULL,
        created_at  TIMESTAMPTZ NOT NULL,
        updated_at  TIMESTAMPTZ NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS organizations (
        id             UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        name           TEXT NOT NULL,
        owner_user_id  UUID NOT NULL REFERENCES users (id) ON DELETE CASCADE,
        created_at     TIMESTAMPTZ NOT NULL DEFAULT now(),
        updated_at     TIMESTAMPTZ NOT NULL DEFAULT now()
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS schools (
        id               UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        organization_id  UUID NOT NULL REFERENCES organizations (id) ON DELETE CASCADE,
        name             TEXT NOT NULL,
        address          TEXT NOT NULL DEFAULT '',
        city             TEXT NOT NULL DEFAULT '',
        state            TEXT NOT NULL DEFAULT '',
        zip              TEXT NOT NULL DEFAULT '',
        phone            TEXT NOT NULL DEFAULT '',
        created_at       TIMESTAMPTZ NOT NULL DEFAULT now(),
        updated_at       TIMESTAMPTZ NOT NULL DEFAULT now()
    )
    """,
)


def create_schema(engine: Engine) -> None:
    """Create the accounts tables if they do not exist yet.

    Args:
        engine: Engine bound to the target database.
    """
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.execute(text(statement))

    logger.info("Accounts schema is up to date.")
