"""Product runner module statements."""

from __future__ import annotations

from market_reports.db import QueryExecutorPort

from .interfaces import ResultRendererPort, RunnerStatement
from .runner import RunnerQueryModule

PRODUCT_STATEMENTS: tuple[RunnerStatement, ...] = (
    RunnerStatement(
        title="All Products",
        sql=(
            "SELECT id, name, slug, status, created_at "
            "FROM products "
            "ORDER BY name"
        ),
    ),
    RunnerStatement(
        title="Products by Status",
        sql=(
            "SELECT status, COUNT(*) AS count "
            "FROM products "
            "GROUP BY status "
            "ORDER BY count DESC"
        ),
    ),
    RunnerStatement(
        title="Products with Estate Count",
        sql=(
            "SELECT p.name AS product_name, p.status, "
            "COUNT(e.id) AS estate_count, SUM(e.unit_count) AS total_units "
            "FROM products p "
            "LEFT JOIN estates e ON p.id = e.product_id "
            "GROUP BY p.id, p.name, p.status "
            "ORDER BY estate_count DESC"
        ),
    ),
    RunnerStatement(
        title="Products with Average Rent Prices",
        sql=(
            "SELECT p.name AS product_name, "
            "COUNT(DISTINCT pt.id) AS price_records, "
            "AVG(pt.price) AS avg_rent_price, "
            "MIN(pt.price) AS min_rent_price, "
            "MAX(pt.price) AS max_rent_price "
            "FROM products p "
            "LEFT JOIN price_trends pt ON p.id = pt.product_id AND pt.price_type = 'rent' "
            "GROUP BY p.id, p.name "
            "ORDER BY avg_rent_price DESC"
        ),
    ),
)


def query_build_product_runner(executor: QueryExecutorPort, renderer: ResultRendererPort) -> RunnerQueryModule:
    """Build the product runner module."""

    return RunnerQueryModule(
        name="products",
        banner="PRODUCT QUERIES",
        statements=PRODUCT_STATEMENTS,
        executor=executor,
        renderer=renderer,
    )
