"""Console rendering for runner output and sweep reports."""

from __future__ import annotations

from typing import Any, TextIO

from market_reports.db import RowMapping
from market_reports.domain import OverviewReport
from market_reports.jobs import QueryOutcome, SweepReport
from market_reports.queries import ResultRendererPort

_BANNER_RULE_WIDTH = 50


def render_format_cell(value: Any) -> str:
    """Format one cell value for table output."""

    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_format_table(rows: list[RowMapping]) -> list[str]:
    """Format row mappings as aligned text table lines.

    Columns follow first-seen key order across all rows.

    Args:
        rows: Result rows.

    Returns:
        list[str]: Table lines, or a single `(no rows)` line for an empty result.
    """

    if not rows:
        return ["(no rows)"]

    columns: list[str] = []
    for row in rows:
        for column in row:
            if column not in columns:
                columns.append(column)

    body = [[render_format_cell(row.get(column)) for column in columns] for row in rows]
    widths = [
        max(len(column), *(len(cells[index]) for cells in body))
        for index, column in enumerate(columns)
    ]
    separator = "+".join("-" * (width + 2) for width in widths)
    lines = [
        " | ".join(column.ljust(width) for column, width in zip(columns, widths)).rstrip(),
        separator,
    ]
    lines.extend(" | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip() for cells in body)
    return lines


class ConsoleResultRenderer(ResultRendererPort):
    """Renderer writing plain-text tables to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def render_banner(self, title: str) -> None:
        self._write("")
        self._write(title)
        self._write("=" * _BANNER_RULE_WIDTH)

    def render_heading(self, position: int, title: str) -> None:
        self._write("")
        self._write(f"{position}. {title}:")

    def render_rows(self, rows: list[RowMapping]) -> None:
        for line in render_format_table(rows):
            self._write(line)

    def render_completion(self, message: str) -> None:
        self._write(message)

    def render_sweep_report(self, report: SweepReport) -> None:
        """Render the probe, per-module and per-method outcomes and the overview."""

        self.render_banner("SWEEP SUMMARY")
        self._write(f"Connection: {report.connection_probe.message} at {report.connection_probe.timestamp}")
        self._write("")
        self._write("Runner modules:")
        for outcome in report.module_outcomes:
            self._write(f"  {self._render_outcome_line(outcome)}")
        self._write("")
        self._write("Capability methods:")
        for outcome in report.method_outcomes:
            self._write(f"  {self._render_outcome_line(outcome)}")
        self._write("")
        self._write(
            f"Failed runner modules: {report.sweep_failed_module_count()}, "
            f"soft-failed capability methods: {report.sweep_soft_failed_method_count()}"
        )
        self.render_overview(report.overview)

    def render_overview(self, overview: OverviewReport) -> None:
        self.render_banner("SYSTEM OVERVIEW")
        self._write(f"Total estates: {overview.total_estates}")
        self._write(f"Total areas: {overview.total_areas}")
        self._write(f"Total products: {overview.total_products}")
        self._write("")
        self._write("Tier distribution:")
        self.render_rows([{"tier": item.tier, "count": item.count} for item in overview.tier_distribution])
        self._write("")
        self._write("Market intelligence summary:")
        self.render_rows([overview.market_intelligence_summary] if overview.market_intelligence_summary else [])
        if overview.connection_status is not None:
            self._write("")
            self._write(f"Connection status: {overview.connection_status.message}")

    def _render_outcome_line(self, outcome: QueryOutcome) -> str:
        if outcome.outcome_is_ok():
            rows_label = "n/a" if outcome.row_count is None else str(outcome.row_count)
            if outcome.method_name is None:
                return f"[ok] {outcome.subject}"
            return f"[ok] {outcome.subject}: {rows_label} rows"
        return f"[{outcome.kind.value}] {outcome.subject}: {outcome.reason}"

    def _write(self, line: str) -> None:
        print(line, file=self._stream)
