"""Fixed SQL template helpers for parameterised capability queries."""

from __future__ import annotations

from typing import Final

PERIOD_TRUNCATION_UNITS: Final[tuple[str, ...]] = ("month", "quarter")


def query_resolve_period_unit(period: str) -> str:
    """Map a period granularity flag to a `DATE_TRUNC` unit.

    `monthly` selects month buckets; any other flag selects quarter buckets.

    Args:
        period: Period granularity flag.

    Returns:
        str: Truncation unit from `PERIOD_TRUNCATION_UNITS`.
    """

    return "month" if period == "monthly" else "quarter"


def query_build_templates_by_unit(template: str) -> dict[str, str]:
    """Render one SQL template for every allowed truncation unit.

    Args:
        template: SQL text containing a `{unit}` placeholder.

    Returns:
        dict[str, str]: Rendered SQL keyed by truncation unit.
    """

    return {unit: template.format(unit=unit) for unit in PERIOD_TRUNCATION_UNITS}


def query_validate_months(months: int) -> int:
    """Validate a lookback window in months.

    Args:
        months: Lookback window.

    Returns:
        int: Validated month count.

    Raises:
        ValueError: Raised when months is not a positive integer.
    """

    if isinstance(months, bool) or not isinstance(months, int) or months <= 0:
        raise ValueError(f"months must be a positive integer, got {months!r}")
    return months


def query_validate_estate_id(estate_id: object) -> object:
    """Validate an estate identifier bind value.

    Args:
        estate_id: Estate primary key value.

    Returns:
        object: The unchanged identifier.

    Raises:
        ValueError: Raised when estate_id is None or blank.
    """

    if estate_id is None or (isinstance(estate_id, str) and not estate_id.strip()):
        raise ValueError("estate_id must not be blank")
    return estate_id


def query_tier_rank_case(column: str) -> str:
    """Return a SQL `CASE` ranking tiers platinum 1 through bronze 4, other values 5.

    Args:
        column: Trusted column expression holding the tier label.

    Returns:
        str: SQL expression for `ORDER BY`.
    """

    return (
        f"CASE {column} "
        "WHEN 'platinum' THEN 1 WHEN 'gold' THEN 2 WHEN 'silver' THEN 3 WHEN 'bronze' THEN 4 "
        "ELSE 5 END"
    )
