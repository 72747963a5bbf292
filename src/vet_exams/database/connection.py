"""
Database connection utilities for the vet-exams package.

This module provides async SQLAlchemy engine configuration for the local
SQLite exam records database, using the aiosqlite driver.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

logger = logging.getLogger(__name__)

ASYNC_DRIVER = "sqlite+aiosqlite"
MEMORY_DATABASE = ":memory:"


class DatabaseConfig:
    """Configuration class for database connections."""

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        busy_timeout: float = 5.0,
    ):
        """
        Initialize database configuration.

        Args:
            database_url: SQLite connection URL (``sqlite://`` or ``sqlite+aiosqlite://``)
            echo: Whether to echo SQL statements
            busy_timeout: Seconds SQLite waits on a locked database file
        """
        self.database_url = database_url
        self.echo = echo
        self.busy_timeout = busy_timeout

        # Validate URL
        self._validate_database_url()

    @classmethod
    def from_path(
        cls, path: Union[str, Path], echo: bool = False, busy_timeout: float = 5.0
    ) -> "DatabaseConfig":
        """Create a configuration for a database file path or ``:memory:``."""
        return cls(get_database_url(path), echo=echo, busy_timeout=busy_timeout)

    def _validate_database_url(self) -> None:
        """Validate the database URL format."""
        try:
            url = make_url(self.database_url)
        except ArgumentError as e:
            raise ValueError(f"Invalid database URL: {e}")

        if url.drivername not in ("sqlite", ASYNC_DRIVER):
            raise ValueError(
                "Invalid database URL: must use sqlite:// or sqlite+aiosqlite://"
            )
        if not url.database:
            raise ValueError("Invalid database URL: must include a database path")

    @property
    def database(self) -> str:
        """Database file path (or ``:memory:``)."""
        return make_url(self.database_url).database or ""

    @property
    def is_memory(self) -> bool:
        """Whether the URL points at a private in-memory database."""
        return self.database == MEMORY_DATABASE

    def get_async_url(self) -> str:
        """Convert database URL to async format if needed."""
        if self.database_url.startswith("sqlite://"):
            return self.database_url.replace("sqlite://", f"{ASYNC_DRIVER}://", 1)
        return self.database_url


def get_database_url(path: Union[str, Path]) -> str:
    """
    Construct an async SQLite database URL.

    Args:
        path: Database file path, or ``:memory:``

    Returns:
        Formatted database URL
    """
    return f"{ASYNC_DRIVER}:///{path}"


def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """Turn on foreign key enforcement for every new DBAPI connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(
    database_url: str,
    echo: bool = False,
    busy_timeout: float = 5.0,
    connect_args: Optional[dict] = None,
) -> AsyncEngine:
    """
    Create an async SQLAlchemy engine for SQLite.

    In-memory databases use a ``StaticPool`` so every checkout sees the same
    database; file databases use a ``NullPool`` because the facade keeps its
    own long-lived connection.

    Args:
        database_url: SQLite connection URL
        echo: Whether to echo SQL statements
        busy_timeout: Seconds SQLite waits on a locked database file
        connect_args: Additional connection arguments

    Returns:
        Configured async SQLAlchemy engine

    Raises:
        ValueError: If database URL is invalid
    """
    config = DatabaseConfig(database_url, echo=echo, busy_timeout=busy_timeout)

    async_url = config.get_async_url()

    engine_kwargs: Dict[str, Any] = {
        "echo": config.echo,
        "connect_args": {"timeout": config.busy_timeout, **(connect_args or {})},
    }

    if config.is_memory:
        engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["poolclass"] = NullPool

    try:
        engine = create_async_engine(async_url, **engine_kwargs)
    except Exception as e:
        logger.error(f"Failed to create database engine: {e}")
        raise

    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    logger.info(f"Created async database engine for {config.database}")
    return engine


async def check_connection(engine: AsyncEngine) -> bool:
    """
    Check that the database can be opened and queried.

    Args:
        engine: SQLAlchemy async engine

    Returns:
        True if connection is healthy, False otherwise
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connection check successful")
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False


async def close_engine(engine: AsyncEngine) -> None:
    """
    Properly close the database engine and all connections.

    Args:
        engine: SQLAlchemy async engine to close
    """
    try:
        await engine.dispose()
        logger.info("Database engine closed successfully")
    except Exception as e:
        logger.error(f"Error closing database engine: {e}")
