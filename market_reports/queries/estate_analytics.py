"""Estate analytics capability module used by the system overview."""

from __future__ import annotations

from typing import Any

from market_reports.db import RowMapping

from .capability import CapabilityQueryModule
from .interfaces import CapabilityMethod
from .templates import query_tier_rank_case


class EstateAnalyticsQueries(CapabilityQueryModule):
    """Counts, tier distribution and tier-level estate analytics."""

    name = "estate_analytics"

    def query_methods(self) -> tuple[CapabilityMethod, ...]:
        return (
            CapabilityMethod("get_estates_count", self.get_estates_count),
            CapabilityMethod("get_areas_count", self.get_areas_count),
            CapabilityMethod("get_products_count", self.get_products_count),
            CapabilityMethod("get_tier_distribution", self.get_tier_distribution),
            CapabilityMethod("get_top_estates_by_property_value", self.get_top_estates_by_property_value),
            CapabilityMethod("get_tier_demographics", self.get_tier_demographics),
            CapabilityMethod("get_market_intelligence_overview", self.get_market_intelligence_overview),
        )

    async def get_estates_count(self) -> int:
        count = await self._executor.db_fetch_scalar("estates count", "SELECT COUNT(*) FROM estates")
        return int(count)

    async def get_areas_count(self) -> int:
        count = await self._executor.db_fetch_scalar("areas count", "SELECT COUNT(*) FROM areas")
        return int(count)

    async def get_products_count(self) -> int:
        count = await self._executor.db_fetch_scalar("products count", "SELECT COUNT(*) FROM products")
        return int(count)

    async def get_tier_distribution(self) -> list[RowMapping]:
        """Return `{tier, count}` rows ordered platinum, gold, silver, bronze.

        Tiers without estates produce no row.
        """

        return await self._executor.db_fetch_rows(
            "tier distribution",
            "SELECT tier_classification AS tier, COUNT(*) AS count "
            "FROM estates "
            "GROUP BY tier_classification "
            f"ORDER BY {query_tier_rank_case('tier_classification')}",
        )

    async def get_top_estates_by_property_value(self, limit: int = 5) -> list[RowMapping]:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")
        return await self._executor.db_fetch_rows(
            "top estates by property value",
            "SELECT name, tier_classification AS tier, unit_count, "
            "(economic_indicators->>'property_value')::numeric AS property_value "
            "FROM estates "
            "ORDER BY (economic_indicators->>'property_value')::numeric DESC NULLS LAST "
            "LIMIT :limit",
            {"limit": limit},
        )

    async def get_tier_demographics(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "tier demographics",
            "SELECT e.tier_classification AS tier, "
            "AVG(d.population) AS avg_population, "
            "AVG(d.employment_rate) AS avg_employment_rate, "
            "COUNT(e.id) AS estate_count "
            "FROM estates e "
            "JOIN demographics d ON e.id = d.estate_id "
            "GROUP BY e.tier_classification "
            f"ORDER BY {query_tier_rank_case('e.tier_classification')}",
        )

    async def get_market_intelligence_overview(self) -> list[RowMapping]:
        """Return one aggregate row of estate, provider and business counts."""

        return await self._executor.db_fetch_rows(
            "market intelligence overview",
            "SELECT "
            "(SELECT COUNT(*) FROM estates) AS total_estates, "
            "(SELECT COUNT(*) FROM service_providers) AS total_providers, "
            "(SELECT COUNT(*) FROM local_businesses) AS total_businesses, "
            "(SELECT AVG(market_potential_score) FROM estates) AS avg_market_potential_score",
        )


def query_first_row(rows: list[RowMapping]) -> dict[str, Any]:
    """Return the first row as a plain dict, or an empty dict for no rows."""

    return dict(rows[0]) if rows else {}
