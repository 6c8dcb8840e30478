"""Estate runner module statements."""

from __future__ import annotations

from market_reports.db import QueryExecutorPort

from .interfaces import ResultRendererPort, RunnerStatement
from .runner import RunnerQueryModule

_ESTATE_JOIN_COLUMNS = (
    "e.name AS estate_name, e.classification, e.estate_type, e.unit_count, "
    "e.gated, e.has_security, a.name AS area_name, p.name AS product_name "
)

ESTATE_STATEMENTS: tuple[RunnerStatement, ...] = (
    RunnerStatement(
        title="All Estates",
        sql=(
            "SELECT e.id, e.name, e.estate_type, e.unit_count, e.occupancy_status, "
            "e.classification, e.gated, e.has_security, "
            "p.name AS product_name, a.name AS area_name "
            "FROM estates e "
            "JOIN products p ON e.product_id = p.id "
            "JOIN areas a ON e.area_id = a.id "
            "ORDER BY e.name"
        ),
    ),
    RunnerStatement(
        title="Estates by Type",
        sql=(
            "SELECT estate_type, COUNT(*) AS count, "
            "AVG(unit_count) AS avg_units, SUM(unit_count) AS total_units "
            "FROM estates "
            "GROUP BY estate_type "
            "ORDER BY count DESC"
        ),
    ),
    RunnerStatement(
        title="Estates by Classification",
        sql=(
            "SELECT classification, COUNT(*) AS count, AVG(unit_count) AS avg_units, "
            "COUNT(CASE WHEN gated = true THEN 1 END) AS gated_count, "
            "COUNT(CASE WHEN has_security = true THEN 1 END) AS security_count "
            "FROM estates "
            "GROUP BY classification "
            "ORDER BY count DESC"
        ),
    ),
    RunnerStatement(
        title="Estates by Occupancy Status",
        sql=(
            "SELECT occupancy_status, COUNT(*) AS count, "
            "AVG(unit_count) AS avg_units, SUM(unit_count) AS total_units "
            "FROM estates "
            "GROUP BY occupancy_status "
            "ORDER BY count DESC"
        ),
    ),
    RunnerStatement(
        title="Estates with Security Features",
        sql=(
            "SELECT "
            + _ESTATE_JOIN_COLUMNS
            + "FROM estates e "
            "JOIN areas a ON e.area_id = a.id "
            "JOIN products p ON e.product_id = p.id "
            "WHERE e.gated = true OR e.has_security = true "
            "ORDER BY e.gated DESC, e.has_security DESC"
        ),
    ),
    RunnerStatement(
        title="Luxury Estates Analysis",
        sql=(
            "SELECT e.occupancy_status, "
            + _ESTATE_JOIN_COLUMNS
            + "FROM estates e "
            "JOIN areas a ON e.area_id = a.id "
            "JOIN products p ON e.product_id = p.id "
            "WHERE e.classification = 'luxury' "
            "ORDER BY e.unit_count DESC"
        ),
    ),
)


def query_build_estate_runner(executor: QueryExecutorPort, renderer: ResultRendererPort) -> RunnerQueryModule:
    """Build the estate runner module."""

    return RunnerQueryModule(
        name="estates",
        banner="ESTATE QUERIES",
        statements=ESTATE_STATEMENTS,
        executor=executor,
        renderer=renderer,
    )
