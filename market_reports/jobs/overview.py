"""System overview aggregation over estate analytics queries."""

from __future__ import annotations

import logging

from market_reports.db import ConnectionProbePort
from market_reports.domain import (
    OverviewAggregateError,
    OverviewReport,
    TierCount,
    domain_order_tier_counts,
    domain_tier_label,
)
from market_reports.queries import EstateAnalyticsQueries, query_first_row

logger = logging.getLogger(__name__)


class SystemOverviewAggregator:
    """Builds `OverviewReport` values from sequential sub-queries."""

    def __init__(self, estate_analytics: EstateAnalyticsQueries, connection_probe: ConnectionProbePort):
        """Initialize overview aggregator.

        Args:
            estate_analytics: Capability module providing counts and tier rows.
            connection_probe: Probe re-run for every overview.

        Raises:
            ValueError: Raised when a dependency is None.
        """

        if estate_analytics is None:
            raise ValueError("estate_analytics must not be None")
        if connection_probe is None:
            raise ValueError("connection_probe must not be None")
        self._estate_analytics = estate_analytics
        self._connection_probe = connection_probe

    async def overview_get_tier_distribution(self) -> tuple[TierCount, ...]:
        """Return tier counts ordered platinum, gold, silver, bronze.

        Returns:
            tuple[TierCount, ...]: Rank-ordered counts; absent tiers are omitted and NULL tiers
            are labelled `unclassified`.

        Raises:
            QueryExecutionError: Raised when the tier query fails.
            KeyError: Raised when a row lacks `tier` or `count`.
        """

        rows = await self._estate_analytics.get_tier_distribution()
        return domain_order_tier_counts(
            [TierCount(tier=domain_tier_label(row["tier"]), count=int(row["count"])) for row in rows]
        )

    async def overview_build(self) -> OverviewReport:
        """Compute the overview one sub-query at a time.

        The first failing sub-query aborts the whole overview.

        Returns:
            OverviewReport: Freshly computed overview, never cached.

        Raises:
            OverviewAggregateError: Raised when any sub-query fails.
        """

        try:
            total_estates = await self._estate_analytics.get_estates_count()
            total_areas = await self._estate_analytics.get_areas_count()
            total_products = await self._estate_analytics.get_products_count()
            tier_distribution = await self.overview_get_tier_distribution()
            market_summary_rows = await self._estate_analytics.get_market_intelligence_overview()
        except (ValueError, TypeError, LookupError, RuntimeError) as error:
            logger.error("system overview aborted: %s", error)
            raise OverviewAggregateError(f"error getting system overview: {error}") from error

        connection_status = await self._connection_probe.db_test_connection()
        return OverviewReport(
            total_estates=total_estates,
            total_areas=total_areas,
            total_products=total_products,
            tier_distribution=tier_distribution,
            market_intelligence_summary=query_first_row(market_summary_rows),
            connection_status=connection_status,
        )
