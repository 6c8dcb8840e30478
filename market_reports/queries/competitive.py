"""Competitive landscape capability module.

Provider market share, service quality and benchmarking queries read the
latest reporting period of each metrics table.
"""

from __future__ import annotations

from market_reports.db import RowMapping

from .capability import CapabilityQueryModule
from .interfaces import CapabilityMethod

_TOP_PROVIDER_LIMIT = 10
_BENCHMARK_PERIOD_LIMIT = 6


class CompetitiveQueries(CapabilityQueryModule):
    """Service provider market share, quality and benchmark queries."""

    name = "competitive"

    def query_methods(self) -> tuple[CapabilityMethod, ...]:
        return (
            CapabilityMethod("get_providers_count", self.get_providers_count),
            CapabilityMethod("get_market_share_by_provider", self.get_market_share_by_provider),
            CapabilityMethod("get_service_quality_comparison", self.get_service_quality_comparison),
            CapabilityMethod("get_competitive_benchmarks", self.get_competitive_benchmarks),
        )

    async def get_providers_count(self) -> int:
        count = await self._executor.db_fetch_scalar("providers count", "SELECT COUNT(*) FROM service_providers")
        return int(count)

    async def get_market_share_by_provider(self) -> list[RowMapping]:
        """Return the top providers by average market share in the latest period.

        Returns:
            list[RowMapping]: Provider rows with market share, customers and revenue.

        Raises:
            QueryExecutionError: Raised when the query fails.
        """

        return await self._executor.db_fetch_rows(
            "market share by provider",
            "SELECT sp.name AS provider, "
            "AVG(ms.market_share_percentage) AS avg_market_share, "
            "SUM(ms.total_customers) AS total_customers, "
            "SUM(ms.revenue) AS total_revenue "
            "FROM market_share_data ms "
            "JOIN service_providers sp ON ms.provider_id = sp.id "
            "WHERE ms.period = (SELECT MAX(period) FROM market_share_data) "
            "GROUP BY sp.name "
            "ORDER BY avg_market_share DESC "
            "LIMIT :limit",
            {"limit": _TOP_PROVIDER_LIMIT},
        )

    async def get_service_quality_comparison(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "service quality comparison",
            "SELECT sqm.service_type, "
            "AVG(sqm.uptime_percentage) AS avg_uptime, "
            "AVG(sqm.avg_response_time) AS avg_response_time, "
            "AVG(sqm.customer_satisfaction_score) AS avg_satisfaction "
            "FROM service_quality_metrics sqm "
            "WHERE sqm.period = (SELECT MAX(period) FROM service_quality_metrics) "
            "GROUP BY sqm.service_type "
            "ORDER BY avg_uptime DESC",
        )

    async def get_competitive_benchmarks(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "competitive benchmarks",
            "SELECT cb.comparison_date, "
            "AVG(cb.price_difference) AS avg_price_difference, "
            "AVG(cb.market_positioning_score) AS avg_positioning_score "
            "FROM competitive_benchmarking cb "
            "GROUP BY cb.comparison_date "
            "ORDER BY cb.comparison_date DESC "
            "LIMIT :limit",
            {"limit": _BENCHMARK_PERIOD_LIMIT},
        )
