"""Regression tests for capability module method registries and bind handling."""

from __future__ import annotations

import pytest

from market_reports.domain import QueryParameterError
from market_reports.queries import (
    BusinessQueries,
    CapabilityMethod,
    CapabilityQueryModule,
    CompetitiveQueries,
    CustomerIntelligenceQueries,
    CustomerQueries,
    EstateAnalyticsQueries,
    FinancialIntelligenceQueries,
    InfrastructureIntelligenceQueries,
    MarketIntelligenceQueries,
    query_resolve_period_unit,
    query_validate_months,
)


class _ExecutorStub:
    """Executor stub capturing statements and returning one fixed row."""

    def __init__(self, scalar: object = 7):
        self.scalar = scalar
        self.calls: list[tuple[str, str, dict[str, object] | None]] = []

    async def db_fetch_rows(self, query_name, statement, parameters=None):
        self.calls.append((query_name, statement, parameters))
        return [{"query": query_name}]

    async def db_fetch_scalar(self, query_name, statement, parameters=None):
        self.calls.append((query_name, statement, parameters))
        return self.scalar


_CAPABILITY_MODULE_TYPES = (
    EstateAnalyticsQueries,
    CustomerIntelligenceQueries,
    MarketIntelligenceQueries,
    FinancialIntelligenceQueries,
    InfrastructureIntelligenceQueries,
    CustomerQueries,
    CompetitiveQueries,
    BusinessQueries,
)


@pytest.mark.asyncio
@pytest.mark.parametrize("module_type", _CAPABILITY_MODULE_TYPES)
async def test_queries_zero_argument_methods_return_rows_or_counts(module_type) -> None:
    """Invoke every method without required parameters and check result shapes.

    Args:
        module_type: Capability module class under test.

    Returns:
        None: Assertions validate zero-argument invocation.

    Raises:
        AssertionError: Raised when a method returns an unexpected shape.
    """

    executor = _ExecutorStub()
    module = module_type(executor)

    for method in module.query_methods():
        if method.required_parameters:
            continue
        result = await method.invoke()
        if method.name.endswith("_count"):
            assert result == 7
        else:
            assert isinstance(result, list)
            assert result and isinstance(result[0], dict)


@pytest.mark.parametrize("module_type", _CAPABILITY_MODULE_TYPES)
def test_queries_method_names_are_unique_per_module(module_type) -> None:
    """Declare each method name once per module."""

    names = module_type(_ExecutorStub()).query_method_names()

    assert len(names) == len(set(names))


def test_queries_declared_method_counts() -> None:
    """Keep the declared method catalogue per capability module."""

    executor = _ExecutorStub()

    assert len(EstateAnalyticsQueries(executor).query_methods()) == 7
    assert len(CustomerIntelligenceQueries(executor).query_methods()) == 5
    assert len(MarketIntelligenceQueries(executor).query_methods()) == 5
    assert len(FinancialIntelligenceQueries(executor).query_methods()) == 9
    assert len(InfrastructureIntelligenceQueries(executor).query_methods()) == 8
    assert len(CustomerQueries(executor).query_methods()) == 5
    assert len(CompetitiveQueries(executor).query_methods()) == 4
    assert len(BusinessQueries(executor).query_methods()) == 3


@pytest.mark.asyncio
async def test_queries_revenue_trends_requires_estate_id() -> None:
    """Fail without an estate id and before any statement runs.

    Returns:
        None: Assertions validate the required-parameter failure.

    Raises:
        AssertionError: Raised when the method runs without its parameter.
    """

    executor = _ExecutorStub()
    method = FinancialIntelligenceQueries(executor).query_get_method("get_revenue_trends_by_estate")

    with pytest.raises(QueryParameterError, match="requires parameters: estate_id"):
        await method.invoke()

    assert executor.calls == []


@pytest.mark.asyncio
async def test_queries_infrastructure_estate_methods_require_estate_id() -> None:
    """Declare estate_id as required for estate-scoped infrastructure methods."""

    module = InfrastructureIntelligenceQueries(_ExecutorStub())
    required = {method.name: method.required_parameters for method in module.query_methods() if method.required_parameters}

    assert required == {
        "get_network_performance_by_estate": ("estate_id",),
        "get_infrastructure_performance_trends": ("estate_id",),
    }
    with pytest.raises(TypeError, match="requires parameters"):
        await module.query_get_method("get_network_performance_by_estate").invoke()


@pytest.mark.asyncio
async def test_queries_revenue_trends_binds_estate_id_and_months() -> None:
    """Bind estate id and lookback months instead of interpolating them."""

    executor = _ExecutorStub()
    method = FinancialIntelligenceQueries(executor).query_get_method("get_revenue_trends_by_estate")

    await method.invoke("estate-42", 6)

    query_name, statement, parameters = executor.calls[0]
    assert query_name == "revenue trends for estate estate-42"
    assert parameters == {"estate_id": "estate-42", "months": 6}
    assert ":estate_id" in statement
    assert "estate-42" not in statement


@pytest.mark.asyncio
@pytest.mark.parametrize("months", [0, -3, "12", True])
async def test_queries_revenue_trends_rejects_invalid_months(months) -> None:
    """Reject lookback windows that are not positive integers.

    Args:
        months: Invalid lookback value.
    """

    executor = _ExecutorStub()

    with pytest.raises(ValueError, match="months must be a positive integer"):
        await FinancialIntelligenceQueries(executor).get_revenue_trends_by_estate("estate-42", months)

    assert executor.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("period", "expected_unit"),
    [("monthly", "month"), ("quarterly", "quarter"), ("weekly'; DROP TABLE estates; --", "quarter")],
)
async def test_queries_period_flag_selects_fixed_template(period: str, expected_unit: str) -> None:
    """Pick month or quarter buckets from fixed templates, never from input text.

    Args:
        period: Period flag passed by the caller.
        expected_unit: Expected truncation unit.
    """

    executor = _ExecutorStub()
    module = FinancialIntelligenceQueries(executor)

    await module.get_revenue_analysis_by_tier(period)
    await module.get_cash_flow_analysis(period)

    assert query_resolve_period_unit(period) == expected_unit
    for _, statement, _ in executor.calls:
        assert f"DATE_TRUNC('{expected_unit}'" in statement
        assert "DROP TABLE" not in statement


@pytest.mark.asyncio
async def test_queries_tier_distribution_orders_by_tier_rank() -> None:
    """Order tier rows platinum, gold, silver, bronze in SQL."""

    executor = _ExecutorStub()

    await EstateAnalyticsQueries(executor).get_tier_distribution()

    statement = executor.calls[0][1]
    assert "WHEN 'platinum' THEN 1" in statement
    assert "WHEN 'bronze' THEN 4" in statement
    assert "tier_classification AS tier" in statement


@pytest.mark.asyncio
async def test_queries_top_estates_binds_limit() -> None:
    """Bind the top-estates limit and reject non-positive values."""

    executor = _ExecutorStub()
    module = EstateAnalyticsQueries(executor)

    await module.get_top_estates_by_property_value()
    with pytest.raises(ValueError, match="limit must be a positive integer"):
        await module.get_top_estates_by_property_value(0)

    assert executor.calls[0][2] == {"limit": 5}


@pytest.mark.asyncio
async def test_queries_capability_method_forwards_arguments() -> None:
    """Forward positional arguments once required parameters are satisfied."""

    received: list[tuple[object, ...]] = []

    async def _handler(*arguments):
        received.append(arguments)
        return []

    method = CapabilityMethod("get_thing", _handler, required_parameters=("first", "second"))

    with pytest.raises(QueryParameterError, match="requires parameters: second"):
        await method.invoke("a")
    await method.invoke("a", "b")

    assert method.arity == 2
    assert received == [("a", "b")]


def test_queries_get_method_rejects_unknown_name() -> None:
    """Raise LookupError for undeclared method names."""

    with pytest.raises(LookupError, match="has no method"):
        MarketIntelligenceQueries(_ExecutorStub()).query_get_method("get_everything")


def test_queries_validate_months_returns_value() -> None:
    """Return valid lookback windows unchanged."""

    assert query_validate_months(24) == 24


def test_queries_capability_module_without_method_list_cannot_be_built() -> None:
    """Reject construction of a capability module that declares no methods."""

    class _UndeclaredQueries(CapabilityQueryModule):
        """Capability module missing its method declaration."""

        name = "undeclared"

    with pytest.raises(TypeError, match="abstract"):
        _UndeclaredQueries(_ExecutorStub())


@pytest.mark.asyncio
async def test_queries_business_and_competitive_modules_rank_and_bind() -> None:
    """Rank businesses by tier in SQL and bind competitive row limits."""

    executor = _ExecutorStub()

    await BusinessQueries(executor).get_businesses_by_tier()
    await CompetitiveQueries(executor).get_market_share_by_provider()
    await CompetitiveQueries(executor).get_competitive_benchmarks()

    assert "WHEN 'platinum' THEN 1" in executor.calls[0][1]
    assert executor.calls[1][2] == {"limit": 10}
    assert executor.calls[2][2] == {"limit": 6}
