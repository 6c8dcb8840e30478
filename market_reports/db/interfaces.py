"""Typed interfaces for database-layer services.

All SQL execution must remain in the db package and its submodules.
"""

from typing import Any, Protocol

from market_reports.domain import ConnectionProbeResult

RowMapping = dict[str, Any]


class QueryExecutorPort(Protocol):
    """Port definition for read-only statement execution."""

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
            list[RowMapping]: Result rows as column-name mappings.

        Raises:
            QueryExecutionError: Raised when the statement fails.
        """

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
            Any: Single scalar result.

        Raises:
            QueryExecutionError: Raised when the statement fails.
        """


class ConnectionProbePort(Protocol):
    """Port definition for database liveness checks."""

    def db_connection_label(self) -> str:
        """Return a password-free label for the probed database target."""

    async def db_test_connection(self) -> ConnectionProbeResult:
        """Probe the database and report success or failure without raising.

        Returns:
            ConnectionProbeResult: Structured probe outcome.
        """
