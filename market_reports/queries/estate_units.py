"""Estate unit runner module statements."""

from __future__ import annotations

from market_reports.db import QueryExecutorPort

from .interfaces import ResultRendererPort, RunnerStatement
from .runner import RunnerQueryModule

# rent_price bands in minor currency units
_AFFORDABLE_RENT_CEILING = 5000000
_MID_RANGE_RENT_CEILING = 10000000

ESTATE_UNIT_STATEMENTS: tuple[RunnerStatement, ...] = (
    RunnerStatement(
        title="All Estate Units",
        sql=(
            "SELECT eu.id, eu.unit_type, eu.floor_level, eu.status, eu.rent_price, eu.sale_price, "
            "e.name AS estate_name, a.name AS area_name "
            "FROM estate_units eu "
            "JOIN estates e ON eu.estate_id = e.id "
            "JOIN areas a ON e.area_id = a.id "
            "ORDER BY eu.unit_type, eu.rent_price DESC"
        ),
    ),
    RunnerStatement(
        title="Units by Type",
        sql=(
            "SELECT unit_type, COUNT(*) AS count, "
            "AVG(rent_price) AS avg_rent_price, AVG(sale_price) AS avg_sale_price, "
            "MIN(rent_price) AS min_rent_price, MAX(rent_price) AS max_rent_price "
            "FROM estate_units "
            "GROUP BY unit_type "
            "ORDER BY count DESC"
        ),
    ),
    RunnerStatement(
        title="Units by Status",
        sql=(
            "SELECT status, COUNT(*) AS count, "
            "AVG(rent_price) AS avg_rent_price, AVG(sale_price) AS avg_sale_price "
            "FROM estate_units "
            "GROUP BY status "
            "ORDER BY count DESC"
        ),
    ),
    RunnerStatement(
        title="Vacant Units with Prices",
        sql=(
            "SELECT eu.unit_type, eu.floor_level, eu.rent_price, eu.sale_price, "
            "e.name AS estate_name, e.classification, a.name AS area_name "
            "FROM estate_units eu "
            "JOIN estates e ON eu.estate_id = e.id "
            "JOIN areas a ON e.area_id = a.id "
            "WHERE eu.status = 'vacant' "
            "ORDER BY eu.rent_price ASC"
        ),
    ),
    RunnerStatement(
        title="Units by Floor Level",
        sql=(
            "SELECT floor_level, COUNT(*) AS count, "
            "AVG(rent_price) AS avg_rent_price, AVG(sale_price) AS avg_sale_price "
            "FROM estate_units "
            "GROUP BY floor_level "
            "ORDER BY floor_level"
        ),
    ),
    RunnerStatement(
        title="Price Range Analysis",
        sql=(
            "SELECT unit_type, COUNT(*) AS total_units, "
            f"COUNT(CASE WHEN rent_price <= {_AFFORDABLE_RENT_CEILING} THEN 1 END) AS affordable_units, "
            f"COUNT(CASE WHEN rent_price > {_AFFORDABLE_RENT_CEILING} "
            f"AND rent_price <= {_MID_RANGE_RENT_CEILING} THEN 1 END) AS mid_range_units, "
            f"COUNT(CASE WHEN rent_price > {_MID_RANGE_RENT_CEILING} THEN 1 END) AS luxury_units, "
            "ROUND(AVG(rent_price), 2) AS avg_rent_price "
            "FROM estate_units "
            "GROUP BY unit_type "
            "ORDER BY avg_rent_price DESC"
        ),
    ),
)


def query_build_estate_unit_runner(executor: QueryExecutorPort, renderer: ResultRendererPort) -> RunnerQueryModule:
    """Build the estate unit runner module."""

    return RunnerQueryModule(
        name="estate_units",
        banner="ESTATE UNIT QUERIES",
        statements=ESTATE_UNIT_STATEMENTS,
        executor=executor,
        renderer=renderer,
    )
