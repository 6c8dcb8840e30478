"""Database connection probe used as the pre-flight gate of every sweep."""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from market_reports.domain import CONNECTION_FAILURE_MESSAGE, CONNECTION_SUCCESS_MESSAGE, ConnectionProbeResult

from .interfaces import ConnectionProbePort


class SQLAlchemyConnectionProbeService(ConnectionProbePort):
    """Connection probe backed by async SQLAlchemy engine connectivity checks."""

    def __init__(self, engine: AsyncEngine):
        """Initialize connection probe.

        Args:
            engine: Async SQLAlchemy engine used for liveness checks.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_connection_label(self) -> str:
        """Return the target database URL for diagnostics.

        Returns:
            str: Rendered engine URL string without password.
        """

        return self._engine.url.render_as_string(hide_password=True)

    async def db_test_connection(self) -> ConnectionProbeResult:
        """Run `SELECT NOW()` and report the server time or the failure text.

        Returns:
            ConnectionProbeResult: Success payload with server time, or failure payload with error text.
        """

        try:
            async with self._engine.connect() as connection:
                result = await connection.execute(text("SELECT NOW() AS now"))
                server_time = result.scalar_one()
        except (SQLAlchemyError, OSError) as error:
            return ConnectionProbeResult(
                success=False,
                error=str(error),
                message=CONNECTION_FAILURE_MESSAGE,
            )

        return ConnectionProbeResult(
            success=True,
            timestamp=server_time,
            message=CONNECTION_SUCCESS_MESSAGE,
        )
