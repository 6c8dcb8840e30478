"""Customer base capability module."""

from __future__ import annotations

from market_reports.db import RowMapping

from .capability import CapabilityQueryModule
from .interfaces import CapabilityMethod


class CustomerQueries(CapabilityQueryModule):
    """Customer counts, demographics, recent usage, feedback and churn risk bands."""

    name = "customer"

    def query_methods(self) -> tuple[CapabilityMethod, ...]:
        return (
            CapabilityMethod("get_customers_count", self.get_customers_count),
            CapabilityMethod("get_customer_demographics", self.get_customer_demographics),
            CapabilityMethod("get_usage_patterns", self.get_usage_patterns),
            CapabilityMethod("get_customer_satisfaction", self.get_customer_satisfaction),
            CapabilityMethod("get_churn_risk_analysis", self.get_churn_risk_analysis),
        )

    async def get_customers_count(self) -> int:
        count = await self._executor.db_fetch_scalar("customers count", "SELECT COUNT(*) FROM customer_profiles")
        return int(count)

    async def get_customer_demographics(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "customer demographics",
            "SELECT age_bracket, income_bracket, COUNT(*) AS count "
            "FROM customer_profiles "
            "GROUP BY age_bracket, income_bracket "
            "ORDER BY count DESC "
            "LIMIT 10",
        )

    async def get_usage_patterns(self) -> list[RowMapping]:
        """Return per-service usage over the last 30 days."""

        return await self._executor.db_fetch_rows(
            "usage patterns",
            "SELECT service_type, "
            "AVG(data_consumed) AS avg_data_consumed, "
            "AVG(usage_duration) AS avg_usage_duration, "
            "COUNT(DISTINCT customer_id) AS active_users "
            "FROM usage_patterns "
            "WHERE usage_date >= CURRENT_DATE - INTERVAL '30 days' "
            "GROUP BY service_type "
            "ORDER BY avg_data_consumed DESC",
        )

    async def get_customer_satisfaction(self) -> list[RowMapping]:
        """Return 90-day feedback counts from very satisfied to very dissatisfied."""

        return await self._executor.db_fetch_rows(
            "customer satisfaction",
            "SELECT satisfaction_level, "
            "COUNT(*) AS feedback_count, "
            "AVG(priority) AS avg_priority "
            "FROM customer_feedback "
            "WHERE feedback_date >= CURRENT_DATE - INTERVAL '90 days' "
            "GROUP BY satisfaction_level "
            "ORDER BY CASE satisfaction_level "
            "WHEN 'very_satisfied' THEN 1 WHEN 'satisfied' THEN 2 WHEN 'neutral' THEN 3 "
            "WHEN 'dissatisfied' THEN 4 WHEN 'very_dissatisfied' THEN 5 ELSE 6 END",
        )

    async def get_churn_risk_analysis(self) -> list[RowMapping]:
        # Bands: below 20 low, below 50 medium, otherwise high.
        return await self._executor.db_fetch_rows(
            "churn risk analysis",
            "SELECT CASE "
            "WHEN churn_probability < 20 THEN 'Low Risk' "
            "WHEN churn_probability < 50 THEN 'Medium Risk' "
            "ELSE 'High Risk' END AS risk_level, "
            "COUNT(*) AS customer_count, "
            "AVG(churn_probability) AS avg_probability "
            "FROM churn_risk_indicators "
            "WHERE assessment_date = (SELECT MAX(assessment_date) FROM churn_risk_indicators) "
            "GROUP BY risk_level "
            "ORDER BY avg_probability DESC",
        )
