"""Regression tests for console rendering."""

from __future__ import annotations

import io
from datetime import datetime, timezone

from market_reports.domain import ConnectionProbeResult, OverviewReport, TierCount
from market_reports.jobs import QueryOutcome, SweepReport
from market_reports.reporting import ConsoleResultRenderer, render_format_table


def test_reporting_table_aligns_columns_and_formats_nulls() -> None:
    """Pad columns to the widest cell and print NULL for missing values."""

    lines = render_format_table([{"name": "Lekki Gardens", "tier": "platinum"}, {"name": "Ajah", "tier": None}])

    assert lines[0] == "name          | tier"
    assert lines[1] == "---------------+----------"
    assert lines[2] == "Lekki Gardens | platinum"
    assert lines[3] == "Ajah          | NULL"


def test_reporting_empty_result_renders_placeholder() -> None:
    """Render a placeholder line for empty result sets."""

    assert render_format_table([]) == ["(no rows)"]


def test_reporting_runner_output_sequence() -> None:
    """Write banner, numbered heading, table and completion line."""

    stream = io.StringIO()
    renderer = ConsoleResultRenderer(stream=stream)

    renderer.render_banner("PRODUCT QUERIES")
    renderer.render_heading(1, "All Products")
    renderer.render_rows([{"name": "Fibre"}])
    renderer.render_completion("PRODUCT QUERIES completed successfully")

    assert stream.getvalue().splitlines() == [
        "",
        "PRODUCT QUERIES",
        "=" * 50,
        "",
        "1. All Products:",
        "name",
        "-------",
        "Fibre",
        "PRODUCT QUERIES completed successfully",
    ]


def test_reporting_sweep_report_lists_outcomes_and_overview() -> None:
    """Render probe, outcome lines, tallies and overview sections."""

    probe = ConnectionProbeResult(
        success=True,
        message="Database connection successful",
        timestamp=datetime(2026, 3, 1, tzinfo=timezone.utc),
    )
    report = SweepReport(
        connection_probe=probe,
        module_outcomes=(
            QueryOutcome.ok("products"),
            QueryOutcome.soft_fail("areas", reason="error running areas queries: boom"),
        ),
        method_outcomes=(
            QueryOutcome.ok("estate_analytics", "get_tier_distribution", row_count=3),
            QueryOutcome.ok("estate_analytics", "get_estates_count"),
            QueryOutcome.soft_fail(
                "financial_intelligence",
                reason="get_revenue_trends_by_estate requires parameters: estate_id",
                method_name="get_revenue_trends_by_estate",
            ),
        ),
        overview=OverviewReport(
            total_estates=10,
            total_areas=2,
            total_products=3,
            tier_distribution=(TierCount("platinum", 3), TierCount("gold", 4), TierCount("silver", 3)),
            market_intelligence_summary={"total_estates": 10},
            connection_status=probe,
        ),
    )
    stream = io.StringIO()

    ConsoleResultRenderer(stream=stream).render_sweep_report(report)

    output = stream.getvalue()
    assert "  [ok] products" in output
    assert "  [soft_fail] areas: error running areas queries: boom" in output
    assert "  [ok] estate_analytics.get_tier_distribution: 3 rows" in output
    assert "  [ok] estate_analytics.get_estates_count: n/a rows" in output
    assert "requires parameters: estate_id" in output
    assert "Failed runner modules: 1, soft-failed capability methods: 1" in output
    assert "Total estates: 10" in output
    assert output.index("platinum") < output.index("gold") < output.index("silver")
