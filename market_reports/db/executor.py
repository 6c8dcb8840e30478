"""Read-only statement executor backed by the async SQLAlchemy pool."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from market_reports.domain import QueryExecutionError

from .interfaces import QueryExecutorPort, RowMapping

logger = logging.getLogger(__name__)


class SQLAlchemyQueryExecutor(QueryExecutorPort):
    """Query executor that checks out one pooled connection per statement."""

    def __init__(self, engine: AsyncEngine):
        """Initialize query executor.

        Args:
            engine: Async SQLAlchemy engine owning the connection pool.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    async def db_fetch_rows(
        self,
        query_name: str,
        statement: str,
        parameters: dict[str, Any] | None = None,
    ) -> list[RowMapping]:
        """Execute one read statement and return its rows in query order.

        Args:
            query_name: Human-readable query name used in error messages.
            statement: SQL text with named bind parameters.
            parameters: Optional bind parameter values.

        Returns:
            list[RowMapping]: Result rows as plain dictionaries.

        Raises:
            QueryExecutionError: Raised when the statement fails.
        """

        logger.debug("executing query %s", query_name)
        try:
            async with self._engine.connect() as connection:
                result = await connection.execute(text(statement), parameters or {})
                rows = result.mappings().all()
        except SQLAlchemyError as error:
            raise QueryExecutionError(f"error fetching {query_name}: {error}", query_name=query_name) from error

        return [dict(row) for row in rows]

    async def db_fetch_scalar(
        self,
        query_name: str,
        statement: str,
        parameters: dict[str, Any] | None = None,
    ) -> Any:
        """Execute one read statement returning exactly one value.

        Args:
            query_name: Human-readable query name used in error messages.
            statement: SQL text with named bind parameters.
            parameters: Optional bind parameter values.

        Returns:
            Any: First column of the single result row.

        Raises:
            QueryExecutionError: Raised when the statement fails or returns no single row.
        """

        logger.debug("executing scalar query %s", query_name)
        try:
            async with self._engine.connect() as connection:
                result = await connection.execute(text(statement), parameters or {})
                return result.scalar_one()
        except SQLAlchemyError as error:
            raise QueryExecutionError(f"error fetching {query_name}: {error}", query_name=query_name) from error
