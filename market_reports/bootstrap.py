"""Application bootstrap wiring for the reporting sweep."""

from sqlalchemy.ext.asyncio import AsyncEngine

from market_reports.config import AppSettings
from market_reports.db import (
    QueryExecutorPort,
    SQLAlchemyConnectionProbeService,
    SQLAlchemyQueryExecutor,
    db_create_engine,
)
from market_reports.jobs import QueryRegistryConfig, QueryReportOrchestrator, SystemOverviewAggregator
from market_reports.queries import (
    BusinessQueries,
    CompetitiveQueries,
    CustomerIntelligenceQueries,
    CustomerQueries,
    EstateAnalyticsQueries,
    FinancialIntelligenceQueries,
    InfrastructureIntelligenceQueries,
    MarketIntelligenceQueries,
    ResultRendererPort,
    query_build_aggregated_view_runner,
    query_build_area_runner,
    query_build_estate_runner,
    query_build_estate_unit_runner,
    query_build_price_trend_runner,
    query_build_product_runner,
)


def bootstrap_create_engine(settings: AppSettings) -> AsyncEngine:
    """Create the async engine from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        AsyncEngine: Pooled async engine.
    """

    return db_create_engine(
        database_url=settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout_seconds=settings.database_pool_timeout_seconds,
        statement_timeout_ms=settings.database_statement_timeout_ms,
    )


def bootstrap_create_query_registry(
    executor: QueryExecutorPort,
    renderer: ResultRendererPort,
    estate_analytics: EstateAnalyticsQueries | None = None,
) -> QueryRegistryConfig:
    """Assemble the fixed runner and capability module registry.

    Args:
        executor: DB-layer query executor shared by all modules.
        renderer: Console renderer for runner output.
        estate_analytics: Optional pre-built estate analytics module to register.

    Returns:
        QueryRegistryConfig: Registry in sweep order.
    """

    return QueryRegistryConfig(
        runner_modules=(
            query_build_product_runner(executor, renderer),
            query_build_area_runner(executor, renderer),
            query_build_estate_runner(executor, renderer),
            query_build_estate_unit_runner(executor, renderer),
            query_build_price_trend_runner(executor, renderer),
            query_build_aggregated_view_runner(executor, renderer),
        ),
        capability_modules=(
            estate_analytics or EstateAnalyticsQueries(executor),
            CustomerIntelligenceQueries(executor),
            MarketIntelligenceQueries(executor),
            FinancialIntelligenceQueries(executor),
            InfrastructureIntelligenceQueries(executor),
            CustomerQueries(executor),
            CompetitiveQueries(executor),
            BusinessQueries(executor),
        ),
    )


def bootstrap_create_orchestrator(engine: AsyncEngine, renderer: ResultRendererPort) -> QueryReportOrchestrator:
    """Build the fully wired reporting orchestrator.

    Args:
        engine: Async engine owning the connection pool.
        renderer: Console renderer for runner output.

    Returns:
        QueryReportOrchestrator: Orchestrator ready for `report_run_all`.
    """

    executor = SQLAlchemyQueryExecutor(engine=engine)
    connection_probe = SQLAlchemyConnectionProbeService(engine=engine)
    estate_analytics = EstateAnalyticsQueries(executor)
    return QueryReportOrchestrator(
        config=bootstrap_create_query_registry(executor, renderer, estate_analytics=estate_analytics),
        connection_probe=connection_probe,
        overview_aggregator=SystemOverviewAggregator(
            estate_analytics=estate_analytics,
            connection_probe=connection_probe,
        ),
    )
