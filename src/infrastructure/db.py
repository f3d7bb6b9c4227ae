"""SQLAlchemy engine management for the transactions store.

The engine is created lazily from TRANSACTIONS_DB_URL and shared by every
repository in the process. Any SQLAlchemy URL works; the test suite uses
SQLite files while deployments typically point at PostgreSQL.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

POOL_SIZE = 5
MAX_OVERFLOW = 5


def _get_env_var(name: str) -> str:
    """Return a required environment variable, loading .env first.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create an engine with a bounded pool and pre-ping health checks.

    Args:
        db_url: SQLAlchemy URL of the transactions database.

    Returns:
        Engine: Configured SQLAlchemy engine.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=POOL_SIZE,
        max_overflow=MAX_OVERFLOW,
        pool_pre_ping=True,
        future=True,
    )


_transactions_engine: Optional[Engine] = None


def get_transactions_engine() -> Engine:
    """Return the shared transactions engine, creating it on first use."""
    global _transactions_engine
    if _transactions_engine is None:
        db_url = _get_env_var("TRANSACTIONS_DB_URL")
        _transactions_engine = _create_engine(db_url)
    return _transactions_engine


def dispose_transactions_engine() -> None:
    """Close pooled connections and forget the cached engine."""
    global _transactions_engine
    if _transactions_engine is not None:
        _transactions_engine.dispose()
        _transactions_engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the module-level engine."""

    def get_transactions_engine(self) -> Engine:
        return get_transactions_engine()


__all__ = [
    "get_transactions_engine",
    "dispose_transactions_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
