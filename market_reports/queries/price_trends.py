"""Price trend runner module statements."""

from __future__ import annotations

from market_reports.db import QueryExecutorPort

from .interfaces import ResultRendererPort, RunnerStatement
from .runner import RunnerQueryModule

PRICE_TREND_STATEMENTS: tuple[RunnerStatement, ...] = (
    RunnerStatement(
        title="All Price Trends",
        sql=(
            "SELECT pt.id, pt.unit_type, pt.price_type, pt.price, pt.currency, pt.period, "
            "p.name AS product_name, a.name AS area_name "
            "FROM price_trends pt "
            "JOIN products p ON pt.product_id = p.id "
            "JOIN areas a ON pt.area_id = a.id "
            "ORDER BY pt.period DESC, pt.price DESC"
        ),
    ),
    RunnerStatement(
        title="Price Trends by Type",
        sql=(
            "SELECT price_type, COUNT(*) AS count, "
            "AVG(price) AS avg_price, MIN(price) AS min_price, MAX(price) AS max_price "
            "FROM price_trends "
            "GROUP BY price_type "
            "ORDER BY avg_price DESC"
        ),
    ),
    RunnerStatement(
        title="Price Trends by Unit Type",
        sql=(
            "SELECT unit_type, price_type, COUNT(*) AS count, "
            "AVG(price) AS avg_price, MIN(price) AS min_price, MAX(price) AS max_price "
            "FROM price_trends "
            "GROUP BY unit_type, price_type "
            "ORDER BY unit_type, price_type"
        ),
    ),
    RunnerStatement(
        title="Price Trends by Area",
        sql=(
            "SELECT a.name AS area_name, pt.price_type, COUNT(pt.id) AS price_records, "
            "AVG(pt.price) AS avg_price, MIN(pt.price) AS min_price, MAX(pt.price) AS max_price "
            "FROM price_trends pt "
            "JOIN areas a ON pt.area_id = a.id "
            "GROUP BY a.id, a.name, pt.price_type "
            "ORDER BY avg_price DESC"
        ),
    ),
    RunnerStatement(
        title="Monthly Price Trends",
        sql=(
            "SELECT DATE_TRUNC('month', period) AS month, price_type, unit_type, "
            "COUNT(*) AS data_points, "
            "AVG(price) AS avg_price, MIN(price) AS min_price, MAX(price) AS max_price "
            "FROM price_trends "
            "GROUP BY DATE_TRUNC('month', period), price_type, unit_type "
            "ORDER BY month DESC, avg_price DESC"
        ),
    ),
    RunnerStatement(
        title="Price Comparison (Rent vs Sale)",
        sql=(
            "SELECT a.name AS area_name, pt.unit_type, "
            "AVG(CASE WHEN pt.price_type = 'rent' THEN pt.price END) AS avg_rent_price, "
            "AVG(CASE WHEN pt.price_type = 'sale' THEN pt.price END) AS avg_sale_price, "
            "COUNT(CASE WHEN pt.price_type = 'rent' THEN 1 END) AS rent_records, "
            "COUNT(CASE WHEN pt.price_type = 'sale' THEN 1 END) AS sale_records "
            "FROM price_trends pt "
            "JOIN areas a ON pt.area_id = a.id "
            "GROUP BY a.id, a.name, pt.unit_type "
            "ORDER BY avg_rent_price DESC"
        ),
    ),
)


def query_build_price_trend_runner(executor: QueryExecutorPort, renderer: ResultRendererPort) -> RunnerQueryModule:
    """Build the price trend runner module."""

    return RunnerQueryModule(
        name="price_trends",
        banner="PRICE TREND QUERIES",
        statements=PRICE_TREND_STATEMENTS,
        executor=executor,
        renderer=renderer,
    )
