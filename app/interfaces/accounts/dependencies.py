"""
Dependency injection for the accounts bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into the user service via constructor injection.
These are the composition root for the accounts context.
"""

from functools import lru_cache

from sqlalchemy.engine import Engine

from app.application.accounts.user_service import UserService
from app.core.config import settings
from app.infrastructure.accounts.password_hasher import BcryptPasswordHasher
from app.infrastructure.accounts.user_repository import UserRepositoryAdapter
from app.infrastructure.database import build_engine


@lru_cache(maxsize=1)
def get_db_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return build_engine(settings.get_database_dsn(), echo=settings.database_echo)


def get_user_service() -> UserService:
    """Build UserService with its infrastructure dependencies."""
    return UserService(
        repository=UserRepositoryAdapter(engine=get_db_engine()),
        password_hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
    )
