"""Infrastructure intelligence capability module."""

from __future__ import annotations

from typing import Any

from market_reports.db import RowMapping

from .capability import CapabilityQueryModule
from .interfaces import CapabilityMethod
from .templates import query_validate_estate_id, query_validate_months

# capacity_metrics.utilization_rate thresholds, percent
_HIGH_UTILIZATION_PERCENT = 80
_MEDIUM_UTILIZATION_PERCENT = 60
_PLANNING_FLOOR_PERCENT = 50


class InfrastructureIntelligenceQueries(CapabilityQueryModule):
    """Network infrastructure, capacity planning and investment queries."""

    name = "infrastructure_intelligence"

    def query_methods(self) -> tuple[CapabilityMethod, ...]:
        return (
            CapabilityMethod("get_infrastructure_overview", self.get_infrastructure_overview),
            CapabilityMethod("get_capacity_utilization_by_tier", self.get_capacity_utilization_by_tier),
            CapabilityMethod(
                "get_network_performance_by_estate",
                self.get_network_performance_by_estate,
                required_parameters=("estate_id",),
            ),
            CapabilityMethod("get_investment_roi_analysis", self.get_investment_roi_analysis),
            CapabilityMethod("get_capacity_planning_recommendations", self.get_capacity_planning_recommendations),
            CapabilityMethod("get_coverage_gaps_analysis", self.get_coverage_gaps_analysis),
            CapabilityMethod(
                "get_infrastructure_performance_trends",
                self.get_infrastructure_performance_trends,
                required_parameters=("estate_id",),
            ),
            CapabilityMethod("get_infrastructure_investment_by_area", self.get_infrastructure_investment_by_area),
        )

    async def get_infrastructure_overview(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "infrastructure overview",
            "SELECT e.name AS estate_name, e.tier_classification, "
            "ni.infrastructure_type, ni.coverage_quality, ni.capacity, ni.status, "
            "cm.utilization_rate, cm.performance_metrics, ni.created_at "
            "FROM network_infrastructure ni "
            "JOIN estates e ON ni.estate_id = e.id "
            "LEFT JOIN capacity_metrics cm ON ni.id = cm.infrastructure_id "
            "ORDER BY e.tier_classification, e.name",
        )

    async def get_capacity_utilization_by_tier(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "capacity utilization by tier",
            "SELECT e.tier_classification, "
            "COUNT(ni.id) AS infrastructure_count, "
            "AVG(cm.utilization_rate) AS avg_utilization_rate, "
            "MAX(cm.utilization_rate) AS max_utilization_rate, "
            "MIN(cm.utilization_rate) AS min_utilization_rate, "
            "AVG(ni.capacity) AS avg_capacity, "
            "SUM(ni.capacity) AS total_capacity "
            "FROM estates e "
            "JOIN network_infrastructure ni ON e.id = ni.estate_id "
            "LEFT JOIN capacity_metrics cm ON ni.id = cm.infrastructure_id "
            "GROUP BY e.tier_classification "
            "ORDER BY e.tier_classification",
        )

    async def get_network_performance_by_estate(self, estate_id: Any) -> list[RowMapping]:
        """Return per-infrastructure capacity metrics and satisfaction for one estate.

        Args:
            estate_id: Estate primary key.

        Returns:
            list[RowMapping]: One row per infrastructure element.

        Raises:
            ValueError: Raised when estate_id is blank.
            QueryExecutionError: Raised when the query fails.
        """

        return await self._executor.db_fetch_rows(
            f"network performance for estate {estate_id}",
            "SELECT ni.infrastructure_type, ni.coverage_quality, ni.capacity, "
            "cm.utilization_rate, cm.performance_metrics, cm.last_updated, "
            "AVG(cf.rating) AS customer_satisfaction_rating "
            "FROM network_infrastructure ni "
            "LEFT JOIN capacity_metrics cm ON ni.id = cm.infrastructure_id "
            "LEFT JOIN customer_feedback cf ON ni.estate_id = cf.estate_id "
            "WHERE ni.estate_id = :estate_id "
            "GROUP BY ni.id, ni.infrastructure_type, ni.coverage_quality, ni.capacity, "
            "cm.utilization_rate, cm.performance_metrics, cm.last_updated",
            {"estate_id": query_validate_estate_id(estate_id)},
        )

    async def get_investment_roi_analysis(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "infrastructure investment ROI analysis",
            "SELECT e.name AS estate_name, e.tier_classification, "
            "ii.investment_type, ii.amount, ii.expected_roi, ii.actual_roi, ii.investment_date, "
            "ra.amount AS revenue_generated, "
            "(ra.amount - ii.amount) AS net_profit, "
            "CASE WHEN ra.amount > 0 AND ii.amount <> 0 "
            "THEN ((ra.amount - ii.amount) / ii.amount * 100) "
            "ELSE 0 END AS roi_percentage "
            "FROM infrastructure_investments ii "
            "JOIN estates e ON ii.estate_id = e.id "
            "LEFT JOIN revenue_analytics ra ON e.id = ra.estate_id AND ra.period >= ii.investment_date "
            "ORDER BY ii.investment_date DESC",
        )

    async def get_capacity_planning_recommendations(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "capacity planning recommendations",
            "SELECT e.name AS estate_name, e.tier_classification, "
            "ni.infrastructure_type, ni.capacity, cm.utilization_rate, "
            "CASE "
            f"WHEN cm.utilization_rate > {_HIGH_UTILIZATION_PERCENT} THEN 'High - Consider expansion' "
            f"WHEN cm.utilization_rate > {_MEDIUM_UTILIZATION_PERCENT} THEN 'Medium - Monitor closely' "
            "ELSE 'Low - Adequate capacity' "
            "END AS capacity_status, "
            "CASE "
            f"WHEN cm.utilization_rate > {_HIGH_UTILIZATION_PERCENT} THEN ni.capacity * 1.5 "
            f"WHEN cm.utilization_rate > {_MEDIUM_UTILIZATION_PERCENT} THEN ni.capacity * 1.2 "
            "ELSE ni.capacity "
            "END AS recommended_capacity "
            "FROM estates e "
            "JOIN network_infrastructure ni ON e.id = ni.estate_id "
            "LEFT JOIN capacity_metrics cm ON ni.id = cm.infrastructure_id "
            f"WHERE cm.utilization_rate > {_PLANNING_FLOOR_PERCENT} "
            "ORDER BY cm.utilization_rate DESC",
        )

    async def get_coverage_gaps_analysis(self) -> list[RowMapping]:
        """Return areas where some estates have no network infrastructure."""

        return await self._executor.db_fetch_rows(
            "coverage gaps analysis",
            "SELECT a.name AS area_name, "
            "COUNT(e.id) AS total_estates, "
            "COUNT(ni.id) AS estates_with_infrastructure, "
            "(COUNT(e.id) - COUNT(ni.id)) AS estates_without_infrastructure, "
            "ROUND(COUNT(ni.id)::DECIMAL / COUNT(e.id) * 100, 2) AS coverage_percentage, "
            "AVG(e.market_potential_score) AS avg_market_potential "
            "FROM areas a "
            "JOIN estates e ON a.id = e.area_id "
            "LEFT JOIN network_infrastructure ni ON e.id = ni.estate_id "
            "GROUP BY a.id, a.name "
            "HAVING COUNT(ni.id) < COUNT(e.id) "
            "ORDER BY coverage_percentage ASC, avg_market_potential DESC",
        )

    async def get_infrastructure_performance_trends(self, estate_id: Any, months: int = 12) -> list[RowMapping]:
        """Return monthly utilization, latency and throughput for one estate.

        Args:
            estate_id: Estate primary key.
            months: Trailing window in months.

        Returns:
            list[RowMapping]: Monthly trend rows, latest month first.

        Raises:
            ValueError: Raised when estate_id is blank or months is not positive.
            QueryExecutionError: Raised when the query fails.
        """

        return await self._executor.db_fetch_rows(
            f"infrastructure performance trends for estate {estate_id}",
            "SELECT DATE_TRUNC('month', cm.last_updated) AS month, "
            "AVG(cm.utilization_rate) AS avg_utilization, "
            "AVG(CAST(cm.performance_metrics->>'latency' AS DECIMAL)) AS avg_latency, "
            "AVG(CAST(cm.performance_metrics->>'throughput' AS DECIMAL)) AS avg_throughput, "
            "COUNT(DISTINCT ni.id) AS infrastructure_count "
            "FROM capacity_metrics cm "
            "JOIN network_infrastructure ni ON cm.infrastructure_id = ni.id "
            "WHERE ni.estate_id = :estate_id "
            "AND cm.last_updated >= CURRENT_DATE - make_interval(months => CAST(:months AS integer)) "
            "GROUP BY DATE_TRUNC('month', cm.last_updated) "
            "ORDER BY month DESC",
            {"estate_id": query_validate_estate_id(estate_id), "months": query_validate_months(months)},
        )

    async def get_infrastructure_investment_by_area(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "infrastructure investment by area",
            "SELECT a.name AS area_name, a.state, "
            "COUNT(DISTINCT e.id) AS estate_count, "
            "COUNT(DISTINCT ii.id) AS investment_count, "
            "SUM(ii.amount) AS total_investment, "
            "AVG(ii.expected_roi) AS avg_expected_roi, "
            "AVG(ii.actual_roi) AS avg_actual_roi, "
            "AVG(e.market_potential_score) AS avg_market_potential "
            "FROM areas a "
            "JOIN estates e ON a.id = e.area_id "
            "LEFT JOIN infrastructure_investments ii ON e.id = ii.estate_id "
            "GROUP BY a.id, a.name, a.state "
            "ORDER BY total_investment DESC NULLS LAST",
        )
