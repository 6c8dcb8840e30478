"""Market intelligence capability module."""

from __future__ import annotations

from market_reports.db import RowMapping

from .capability import CapabilityQueryModule
from .interfaces import CapabilityMethod


class MarketIntelligenceQueries(CapabilityQueryModule):
    """Market potential, competition, provider and demographic queries."""

    name = "market_intelligence"

    def query_methods(self) -> tuple[CapabilityMethod, ...]:
        return (
            CapabilityMethod("get_market_intelligence_summary", self.get_market_intelligence_summary),
            CapabilityMethod("get_competitive_landscape_analysis", self.get_competitive_landscape_analysis),
            CapabilityMethod("get_service_provider_performance", self.get_service_provider_performance),
            CapabilityMethod("get_market_opportunities_by_tier", self.get_market_opportunities_by_tier),
            CapabilityMethod("get_demographic_analysis", self.get_demographic_analysis),
        )

    async def get_market_intelligence_summary(self) -> list[RowMapping]:
        """Return one row per estate with competition, business and demographic figures."""

        return await self._executor.db_fetch_rows(
            "market intelligence summary",
            "SELECT e.id AS estate_id, e.name AS estate_name, e.tier_classification, "
            "e.market_potential_score, e.competitive_intensity, "
            "a.name AS area_name, a.population_density, a.economic_activity_score, "
            "COUNT(DISTINCT sp.id) AS competitor_count, "
            "AVG(msd.market_share) AS avg_market_share, "
            "COUNT(lb.id) AS business_count, "
            "d.population, d.employment_rate "
            "FROM estates e "
            "LEFT JOIN areas a ON e.area_id = a.id "
            "LEFT JOIN market_share_data msd ON e.id = msd.estate_id "
            "LEFT JOIN service_providers sp ON msd.provider_id = sp.id "
            "LEFT JOIN local_businesses lb ON e.id = lb.estate_id "
            "LEFT JOIN demographics d ON e.id = d.estate_id "
            "GROUP BY e.id, e.name, e.tier_classification, e.market_potential_score, "
            "e.competitive_intensity, a.name, a.population_density, a.economic_activity_score, "
            "d.population, d.employment_rate "
            "ORDER BY e.market_potential_score DESC",
        )

    async def get_competitive_landscape_analysis(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "competitive landscape analysis",
            "SELECT a.name AS area_name, a.population_density, a.economic_activity_score, "
            "COUNT(DISTINCT sp.id) AS total_providers, "
            "COUNT(DISTINCT e.id) AS total_estates, "
            "AVG(e.market_potential_score) AS avg_market_potential, "
            "SUM(msd.market_share) AS total_market_share, "
            "AVG(e.competitive_intensity) AS avg_competitive_intensity "
            "FROM areas a "
            "JOIN estates e ON a.id = e.area_id "
            "LEFT JOIN market_share_data msd ON e.id = msd.estate_id "
            "LEFT JOIN service_providers sp ON msd.provider_id = sp.id "
            "GROUP BY a.id, a.name, a.population_density, a.economic_activity_score "
            "ORDER BY a.economic_activity_score DESC",
        )

    async def get_service_provider_performance(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "service provider performance",
            "SELECT sp.name AS provider_name, sp.service_type, sp.technology_stack, sp.network_capacity, "
            "COUNT(pc.estate_id) AS estates_covered, "
            "AVG((pc.quality_metrics->>'signal_strength')::numeric) AS avg_signal_strength, "
            "AVG((pc.quality_metrics->>'uptime_percentage')::numeric) AS avg_uptime, "
            "AVG(msd.market_share) AS avg_market_share, "
            "SUM(msd.revenue_share) AS total_revenue_share "
            "FROM service_providers sp "
            "LEFT JOIN provider_coverage pc ON sp.id = pc.provider_id "
            "LEFT JOIN market_share_data msd ON sp.id = msd.provider_id "
            "GROUP BY sp.id, sp.name, sp.service_type, sp.technology_stack, sp.network_capacity "
            "ORDER BY avg_market_share DESC NULLS LAST",
        )

    async def get_market_opportunities_by_tier(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "market opportunities by tier",
            "SELECT e.tier_classification, "
            "COUNT(mo.id) AS opportunity_count, "
            "AVG(mo.potential_value) AS avg_potential_value, "
            "SUM(mo.potential_value) AS total_potential_value, "
            "AVG(mo.risk_assessment::numeric) AS avg_risk_score, "
            "STRING_AGG(DISTINCT mo.opportunity_type, ', ') AS opportunity_types "
            "FROM estates e "
            "LEFT JOIN market_opportunities mo ON e.id = mo.estate_id "
            "GROUP BY e.tier_classification "
            "ORDER BY avg_potential_value DESC NULLS LAST",
        )

    async def get_demographic_analysis(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "demographic analysis",
            "SELECT e.name AS estate_name, e.tier_classification, "
            "d.population, d.age_groups, d.income_levels, d.education_levels, "
            "d.household_size, d.employment_rate, "
            "a.name AS area_name, a.population_density "
            "FROM estates e "
            "JOIN demographics d ON e.id = d.estate_id "
            "JOIN areas a ON e.area_id = a.id "
            "ORDER BY d.population DESC",
        )
