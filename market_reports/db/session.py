"""Async database engine utilities.

This module centralizes database connectivity primitives to enforce the db-layer
boundary for all SQLAlchemy usage.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def db_create_engine(
    database_url: str,
    pool_size: int = 20,
    max_overflow: int = 0,
    pool_timeout_seconds: float = 120.0,
    statement_timeout_ms: int | None = None,
) -> AsyncEngine:
    """Create the async SQLAlchemy engine for read-only report queries.

    Args:
        database_url: Async SQLAlchemy database URL.
        pool_size: Number of pooled connections.
        max_overflow: Connections allowed beyond `pool_size`.
        pool_timeout_seconds: Max wait for a pooled connection.
        statement_timeout_ms: Optional PostgreSQL statement timeout.

    Returns:
        AsyncEngine: Configured async engine.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    if not database_url.strip():
        raise ValueError("database_url must not be blank")

    connect_args: dict[str, object] = {}
    if statement_timeout_ms:
        connect_args["options"] = f"-c statement_timeout={int(statement_timeout_ms)}"

    return create_async_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout_seconds,
        connect_args=connect_args,
    )
