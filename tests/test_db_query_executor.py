"""Regression tests for the pooled read-only query executor."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import ProgrammingError

from market_reports.db import SQLAlchemyQueryExecutor, db_create_engine
from market_reports.domain import QueryExecutionError


class _ResultStub:
    """Result stub exposing mappings and scalar access."""

    def __init__(self, rows: list[dict[str, object]]):
        self._rows = rows

    def mappings(self) -> "_ResultStub":
        return self

    def all(self) -> list[dict[str, object]]:
        return list(self._rows)

    def scalar_one(self) -> object:
        """Return the first column of the single row.

        Raises:
            ValueError: Raised when the stub holds no rows.
        """

        if len(self._rows) != 1:
            raise ValueError("expected exactly one row")
        return next(iter(self._rows[0].values()))


class _ConnectionStub:
    """Async connection stub tracking checkout and release."""

    def __init__(self, engine: "_EngineStub"):
        self._engine = engine

    async def __aenter__(self) -> "_ConnectionStub":
        self._engine.checkouts += 1
        self._engine.open_connections += 1
        return self

    async def __aexit__(self, exc_type, exc, traceback) -> None:
        self._engine.open_connections -= 1

    async def execute(self, statement, parameters=None) -> _ResultStub:
        """Capture statement and parameters, then return scripted rows.

        Raises:
            ProgrammingError: Raised when the engine stub is configured to fail.
        """

        self._engine.executed.append((str(statement), parameters))
        if self._engine.failure is not None:
            raise self._engine.failure
        return _ResultStub(self._engine.rows)


class _EngineStub:
    """Async engine stub handing out one connection per `connect` call."""

    def __init__(self, rows=None, failure: Exception | None = None):
        self.rows = rows or []
        self.failure = failure
        self.checkouts = 0
        self.open_connections = 0
        self.executed: list[tuple[str, object]] = []

    def connect(self) -> _ConnectionStub:
        return _ConnectionStub(self)


@pytest.mark.asyncio
async def test_db_fetch_rows_returns_plain_dicts_in_query_order() -> None:
    """Return rows as dictionaries and bind the given parameters.

    Returns:
        None: Assertions validate row conversion and parameter binding.

    Raises:
        AssertionError: Raised when rows or parameters are altered.
    """

    engine = _EngineStub(rows=[{"name": "Lekki Gardens", "tier": "platinum"}, {"name": "Ajah Court", "tier": "gold"}])
    executor = SQLAlchemyQueryExecutor(engine=engine)

    rows = await executor.db_fetch_rows(
        "top estates by property value",
        "SELECT name, tier FROM estates LIMIT :limit",
        {"limit": 2},
    )

    assert rows == [{"name": "Lekki Gardens", "tier": "platinum"}, {"name": "Ajah Court", "tier": "gold"}]
    assert all(isinstance(row, dict) for row in rows)
    assert engine.executed[0][1] == {"limit": 2}
    assert engine.open_connections == 0


@pytest.mark.asyncio
async def test_db_fetch_rows_checks_out_one_connection_per_statement() -> None:
    """Acquire a fresh pooled connection for every statement."""

    engine = _EngineStub(rows=[{"count": 1}])
    executor = SQLAlchemyQueryExecutor(engine=engine)

    await executor.db_fetch_rows("first", "SELECT 1 AS count")
    await executor.db_fetch_rows("second", "SELECT 1 AS count")

    assert engine.checkouts == 2
    assert engine.executed[0][1] == {}


@pytest.mark.asyncio
async def test_db_fetch_rows_wraps_driver_errors_and_releases_connection() -> None:
    """Raise QueryExecutionError naming the query and release the connection.

    Returns:
        None: Assertions validate error wrapping and connection release.

    Raises:
        AssertionError: Raised when the failure is not wrapped or the connection leaks.
    """

    failure = ProgrammingError("SELECT * FROM missing", {}, Exception('relation "missing" does not exist'))
    engine = _EngineStub(failure=failure)
    executor = SQLAlchemyQueryExecutor(engine=engine)

    with pytest.raises(QueryExecutionError, match="error fetching missing rows") as error_info:
        await executor.db_fetch_rows("missing rows", "SELECT * FROM missing")

    assert error_info.value.query_name == "missing rows"
    assert error_info.value.__cause__ is failure
    assert engine.open_connections == 0


@pytest.mark.asyncio
async def test_db_fetch_scalar_returns_single_value() -> None:
    """Return the first column of the single result row."""

    executor = SQLAlchemyQueryExecutor(engine=_EngineStub(rows=[{"count": 10}]))

    count = await executor.db_fetch_scalar("estates count", "SELECT COUNT(*) FROM estates")

    assert count == 10


def test_db_create_engine_rejects_blank_url() -> None:
    """Reject a blank database URL before touching the driver."""

    with pytest.raises(ValueError, match="database_url"):
        db_create_engine(database_url="   ")
