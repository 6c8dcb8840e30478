"""Aggregated view runner module statements over the reporting views."""

from __future__ import annotations

from market_reports.db import QueryExecutorPort

from .interfaces import ResultRendererPort, RunnerStatement
from .runner import RunnerQueryModule

AGGREGATED_VIEW_STATEMENTS: tuple[RunnerStatement, ...] = (
    RunnerStatement(
        title="Estate Summary by Area",
        sql="SELECT * FROM estate_summary_by_area ORDER BY total_estates DESC LIMIT 10",
    ),
    RunnerStatement(
        title="Price Trends Summary",
        sql="SELECT * FROM price_trends_summary WHERE price_type = 'rent' ORDER BY avg_price DESC LIMIT 10",
    ),
    RunnerStatement(
        title="Market Performance by Product",
        sql="SELECT * FROM market_performance_by_product ORDER BY estates_count DESC",
    ),
    RunnerStatement(
        title="Monthly Price Trends",
        sql=(
            "SELECT month, price_type, unit_type, area_name, avg_price, price_change_percent "
            "FROM monthly_price_trends "
            "WHERE price_change_percent IS NOT NULL "
            "ORDER BY month DESC, price_change_percent DESC "
            "LIMIT 15"
        ),
    ),
    RunnerStatement(
        title="Occupancy Analysis",
        sql="SELECT * FROM occupancy_analysis ORDER BY occupancy_rate_percent DESC",
    ),
    RunnerStatement(
        title="Top Performing Areas",
        sql=(
            "SELECT area_name, total_estates, total_units, luxury_estates, gated_estates, "
            "ROUND(luxury_estates::DECIMAL / total_estates * 100, 2) AS luxury_percentage "
            "FROM estate_summary_by_area "
            "WHERE total_estates > 0 "
            "ORDER BY luxury_percentage DESC, total_estates DESC "
            "LIMIT 10"
        ),
    ),
    RunnerStatement(
        title="Price Trend Insights",
        sql=(
            "SELECT unit_type, price_type, area_name, avg_price, data_points, "
            "ROUND((max_price - min_price) / NULLIF(avg_price, 0) * 100, 2) AS price_volatility_percent "
            "FROM price_trends_summary "
            "WHERE data_points >= 2 "
            "ORDER BY price_volatility_percent DESC NULLS LAST "
            "LIMIT 10"
        ),
    ),
)


def query_build_aggregated_view_runner(
    executor: QueryExecutorPort,
    renderer: ResultRendererPort,
) -> RunnerQueryModule:
    """Build the aggregated view runner module."""

    return RunnerQueryModule(
        name="aggregated_views",
        banner="AGGREGATED VIEW QUERIES",
        statements=AGGREGATED_VIEW_STATEMENTS,
        executor=executor,
        renderer=renderer,
    )
