"""Local business capability module."""

from __future__ import annotations

from market_reports.db import RowMapping

from .capability import CapabilityQueryModule
from .interfaces import CapabilityMethod
from .templates import query_tier_rank_case


class BusinessQueries(CapabilityQueryModule):
    """Local business counts and revenue by business type and estate tier."""

    name = "business"

    def query_methods(self) -> tuple[CapabilityMethod, ...]:
        return (
            CapabilityMethod("get_businesses_count", self.get_businesses_count),
            CapabilityMethod("get_businesses_by_type", self.get_businesses_by_type),
            CapabilityMethod("get_businesses_by_tier", self.get_businesses_by_tier),
        )

    async def get_businesses_count(self) -> int:
        count = await self._executor.db_fetch_scalar("businesses count", "SELECT COUNT(*) FROM local_businesses")
        return int(count)

    async def get_businesses_by_type(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "businesses by type",
            "SELECT business_type, "
            "COUNT(*) AS count, "
            "AVG((business_metrics->>'monthly_revenue')::numeric) AS avg_revenue "
            "FROM local_businesses "
            "GROUP BY business_type "
            "ORDER BY count DESC",
        )

    async def get_businesses_by_tier(self) -> list[RowMapping]:
        """Return business count and average monthly revenue per estate tier, platinum first."""

        return await self._executor.db_fetch_rows(
            "businesses by tier",
            "SELECT e.tier_classification AS tier, "
            "COUNT(lb.id) AS business_count, "
            "AVG((lb.business_metrics->>'monthly_revenue')::numeric) AS avg_revenue "
            "FROM local_businesses lb "
            "JOIN estates e ON lb.estate_id = e.id "
            "GROUP BY e.tier_classification "
            f"ORDER BY {query_tier_rank_case('e.tier_classification')}",
        )
