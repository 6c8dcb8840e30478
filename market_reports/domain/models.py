"""Typed domain models shared across reporting layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Final

TIER_RANK_ORDER: Final[tuple[str, ...]] = ("platinum", "gold", "silver", "bronze")
UNCLASSIFIED_TIER_LABEL: Final[str] = "unclassified"

CONNECTION_SUCCESS_MESSAGE: Final[str] = "Database connection successful"
CONNECTION_FAILURE_MESSAGE: Final[str] = "Database connection failed"


@dataclass(frozen=True)
class ConnectionProbeResult:
    """Outcome of one database liveness probe.

    Attributes:
        success: Whether the liveness query completed.
        message: Fixed human-readable summary.
        timestamp: Database server time when the probe succeeded.
        error: Error text when the probe failed.
    """

    success: bool
    message: str
    timestamp: datetime | None = None
    error: str | None = None


@dataclass(frozen=True)
class TierCount:
    """Estate count for one tier classification.

    Attributes:
        tier: Tier classification label.
        count: Number of estates in the tier.
    """

    tier: str
    count: int


@dataclass(frozen=True)
class OverviewReport:
    """System overview aggregate built fresh for every request.

    Attributes:
        total_estates: Number of estates.
        total_areas: Number of areas.
        total_products: Number of products.
        tier_distribution: Tier counts ordered by tier rank.
        market_intelligence_summary: Single aggregate market intelligence row.
        connection_status: Connection probe taken while building the overview.
    """

    total_estates: int
    total_areas: int
    total_products: int
    tier_distribution: tuple[TierCount, ...]
    market_intelligence_summary: dict[str, Any] = field(default_factory=dict)
    connection_status: ConnectionProbeResult | None = None


def domain_tier_label(tier: object) -> str:
    """Return the display label for a tier value; NULL or blank maps to `unclassified`."""

    if tier is None or not str(tier).strip():
        return UNCLASSIFIED_TIER_LABEL
    return str(tier)


def domain_tier_rank(tier: str | None) -> int:
    """Return sort rank for a tier label; unknown tiers sort after bronze.

    Args:
        tier: Tier classification label.

    Returns:
        int: Zero-based rank.
    """

    normalized_tier = (tier or "").strip().lower()
    if normalized_tier in TIER_RANK_ORDER:
        return TIER_RANK_ORDER.index(normalized_tier)
    return len(TIER_RANK_ORDER)


def domain_order_tier_counts(tier_counts: list[TierCount]) -> tuple[TierCount, ...]:
    """Order tier counts platinum, gold, silver, bronze, keeping row order on ties.

    Args:
        tier_counts: Tier counts in query row order.

    Returns:
        tuple[TierCount, ...]: Rank-ordered tier counts. Absent tiers are not zero-filled.
    """

    return tuple(sorted(tier_counts, key=lambda tier_count: domain_tier_rank(tier_count.tier)))
