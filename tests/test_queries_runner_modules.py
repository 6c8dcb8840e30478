"""Regression tests for runner module execution and rendering order."""

from __future__ import annotations

import pytest

from market_reports.domain import QueryExecutionError, RunnerModuleError
from market_reports.queries import (
    AGGREGATED_VIEW_STATEMENTS,
    AREA_STATEMENTS,
    ESTATE_STATEMENTS,
    ESTATE_UNIT_STATEMENTS,
    PRICE_TREND_STATEMENTS,
    PRODUCT_STATEMENTS,
    RunnerQueryModule,
    RunnerStatement,
    query_build_aggregated_view_runner,
    query_build_product_runner,
)


class _ExecutorStub:
    """Executor stub returning one row per statement or failing by name."""

    def __init__(self, failing_query_name: str | None = None):
        self.failing_query_name = failing_query_name
        self.query_names: list[str] = []

    async def db_fetch_rows(self, query_name, statement, parameters=None):
        """Return one row tagged with the query name.

        Raises:
            QueryExecutionError: Raised for the configured failing query.
        """

        _ = (statement, parameters)
        self.query_names.append(query_name)
        if query_name == self.failing_query_name:
            raise QueryExecutionError(f"error fetching {query_name}: syntax error", query_name=query_name)
        return [{"query": query_name}]

    async def db_fetch_scalar(self, query_name, statement, parameters=None):
        raise AssertionError("runner modules never fetch scalars")


class _RendererStub:
    """Renderer stub recording calls in order."""

    def __init__(self):
        self.events: list[tuple[str, object]] = []

    def render_banner(self, title: str) -> None:
        self.events.append(("banner", title))

    def render_heading(self, position: int, title: str) -> None:
        self.events.append(("heading", (position, title)))

    def render_rows(self, rows) -> None:
        self.events.append(("rows", rows))

    def render_completion(self, message: str) -> None:
        self.events.append(("completion", message))


def _build_module(executor: _ExecutorStub, renderer: _RendererStub) -> RunnerQueryModule:
    return RunnerQueryModule(
        name="widgets",
        banner="WIDGET QUERIES",
        statements=(
            RunnerStatement(title="First", sql="SELECT 1"),
            RunnerStatement(title="Second", sql="SELECT 2"),
            RunnerStatement(title="Third", sql="SELECT 3"),
        ),
        executor=executor,
        renderer=renderer,
    )


@pytest.mark.asyncio
async def test_queries_runner_renders_every_statement_in_order() -> None:
    """Render banner, numbered headings, rows and completion for a healthy module.

    Returns:
        None: Assertions validate rendering order.

    Raises:
        AssertionError: Raised when rendering order differs.
    """

    executor = _ExecutorStub()
    renderer = _RendererStub()

    await _build_module(executor, renderer).run()

    assert executor.query_names == ["widgets / First", "widgets / Second", "widgets / Third"]
    assert renderer.events == [
        ("banner", "WIDGET QUERIES"),
        ("heading", (1, "First")),
        ("rows", [{"query": "widgets / First"}]),
        ("heading", (2, "Second")),
        ("rows", [{"query": "widgets / Second"}]),
        ("heading", (3, "Third")),
        ("rows", [{"query": "widgets / Third"}]),
        ("completion", "WIDGET QUERIES completed successfully"),
    ]


@pytest.mark.asyncio
async def test_queries_runner_stops_on_first_failure_and_keeps_earlier_output() -> None:
    """Stop at the failing statement, keep earlier tables and raise RunnerModuleError.

    Returns:
        None: Assertions validate stop-on-failure semantics.

    Raises:
        AssertionError: Raised when later statements run or the error is not chained.
    """

    executor = _ExecutorStub(failing_query_name="widgets / Second")
    renderer = _RendererStub()

    with pytest.raises(RunnerModuleError, match="error running widgets queries") as error_info:
        await _build_module(executor, renderer).run()

    assert error_info.value.module_name == "widgets"
    assert isinstance(error_info.value.__cause__, QueryExecutionError)
    assert executor.query_names == ["widgets / First", "widgets / Second"]
    assert ("rows", [{"query": "widgets / First"}]) in renderer.events
    assert all(event[0] != "completion" for event in renderer.events)


def test_queries_runner_rejects_empty_statement_list() -> None:
    """Reject a runner module without statements."""

    with pytest.raises(ValueError, match="statements must not be empty"):
        RunnerQueryModule(
            name="empty",
            banner="EMPTY",
            statements=(),
            executor=_ExecutorStub(),
            renderer=_RendererStub(),
        )


def test_queries_runner_statement_catalogue_sizes() -> None:
    """Keep the fixed statement catalogue per runner domain."""

    assert len(PRODUCT_STATEMENTS) == 4
    assert len(AREA_STATEMENTS) == 5
    assert len(ESTATE_STATEMENTS) == 6
    assert len(ESTATE_UNIT_STATEMENTS) == 6
    assert len(PRICE_TREND_STATEMENTS) == 6
    assert len(AGGREGATED_VIEW_STATEMENTS) == 7


@pytest.mark.asyncio
async def test_queries_product_runner_uses_registry_name_and_banner() -> None:
    """Build the product runner with its registry name and banner."""

    executor = _ExecutorStub()
    renderer = _RendererStub()
    module = query_build_product_runner(executor, renderer)

    await module.run()

    assert module.name == "products"
    assert renderer.events[0] == ("banner", "PRODUCT QUERIES")
    assert executor.query_names[0] == "products / All Products"


def test_queries_aggregated_view_runner_reads_reporting_views() -> None:
    """Read every aggregated view statement from a reporting view."""

    module = query_build_aggregated_view_runner(_ExecutorStub(), _RendererStub())
    view_names = (
        "estate_summary_by_area",
        "price_trends_summary",
        "market_performance_by_product",
        "monthly_price_trends",
        "occupancy_analysis",
    )

    assert module.name == "aggregated_views"
    for statement in module.statements:
        assert any(view_name in statement.sql for view_name in view_names)
