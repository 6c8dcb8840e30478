"""Area runner module statements."""

from __future__ import annotations

from market_reports.db import QueryExecutorPort

from .interfaces import ResultRendererPort, RunnerStatement
from .runner import RunnerQueryModule

AREA_STATEMENTS: tuple[RunnerStatement, ...] = (
    RunnerStatement(
        title="All Areas",
        sql=(
            "SELECT id, name, state, geo_code, created_at "
            "FROM areas "
            "ORDER BY state, name"
        ),
    ),
    RunnerStatement(
        title="Areas by State",
        sql=(
            "SELECT state, COUNT(*) AS area_count "
            "FROM areas "
            "GROUP BY state "
            "ORDER BY area_count DESC"
        ),
    ),
    RunnerStatement(
        title="Areas with Estate Count",
        sql=(
            "SELECT a.name AS area_name, a.state, "
            "COUNT(e.id) AS estate_count, "
            "SUM(e.unit_count) AS total_units, "
            "AVG(e.unit_count) AS avg_units_per_estate "
            "FROM areas a "
            "LEFT JOIN estates e ON a.id = e.area_id "
            "GROUP BY a.id, a.name, a.state "
            "ORDER BY estate_count DESC"
        ),
    ),
    RunnerStatement(
        title="Areas with Price Statistics",
        sql=(
            "SELECT a.name AS area_name, a.state, "
            "COUNT(pt.id) AS price_records, "
            "AVG(pt.price) AS avg_price, MIN(pt.price) AS min_price, MAX(pt.price) AS max_price, "
            "COUNT(DISTINCT pt.unit_type) AS unit_types_available "
            "FROM areas a "
            "LEFT JOIN price_trends pt ON a.id = pt.area_id "
            "GROUP BY a.id, a.name, a.state "
            "ORDER BY avg_price DESC"
        ),
    ),
    RunnerStatement(
        title="Areas with Occupancy Analysis",
        sql=(
            "SELECT a.name AS area_name, a.state, "
            "COUNT(e.id) AS total_estates, "
            "COUNT(CASE WHEN e.occupancy_status = 'fully_occupied' THEN 1 END) AS occupied_estates, "
            "COUNT(CASE WHEN e.occupancy_status = 'vacant' THEN 1 END) AS vacant_estates, "
            "ROUND(COUNT(CASE WHEN e.occupancy_status = 'fully_occupied' THEN 1 END)::DECIMAL "
            "/ NULLIF(COUNT(e.id), 0) * 100, 2) AS occupancy_rate_percent "
            "FROM areas a "
            "LEFT JOIN estates e ON a.id = e.area_id "
            "GROUP BY a.id, a.name, a.state "
            "ORDER BY occupancy_rate_percent DESC NULLS LAST"
        ),
    ),
)


def query_build_area_runner(executor: QueryExecutorPort, renderer: ResultRendererPort) -> RunnerQueryModule:
    """Build the area runner module."""

    return RunnerQueryModule(
        name="areas",
        banner="AREA QUERIES",
        statements=AREA_STATEMENTS,
        executor=executor,
        renderer=renderer,
    )
