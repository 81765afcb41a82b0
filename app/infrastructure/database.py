"""
Database engine construction.

A single SQLAlchemy engine (and its connection pool) is shared by
every repository adapter in the process.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def build_engine(dsn: str, echo: bool = False) -> Engine:
    """Build a SQLAlchemy engine for PostgreSQL.

    Args:
        dsn: A ``postgresql://`` connection string.
        echo: Log every SQL statement (development only).

    Returns:
        An engine whose pool checks connections before use.
    """
    engine = create_engine(dsn, pool_pre_ping=True, echo=echo)
    logger.info("Database engine created for host=%s.", engine.url.host)
    return engine
