"""Customer intelligence capability module."""

from __future__ import annotations

from market_reports.db import RowMapping

from .capability import CapabilityQueryModule
from .interfaces import CapabilityMethod


class CustomerIntelligenceQueries(CapabilityQueryModule):
    """Customer segmentation, satisfaction, usage, lifetime value and churn queries."""

    name = "customer_intelligence"

    def query_methods(self) -> tuple[CapabilityMethod, ...]:
        return (
            CapabilityMethod("get_customer_segmentation_analysis", self.get_customer_segmentation_analysis),
            CapabilityMethod("get_customer_satisfaction_analysis", self.get_customer_satisfaction_analysis),
            CapabilityMethod("get_usage_pattern_analysis", self.get_usage_pattern_analysis),
            CapabilityMethod("get_customer_lifetime_value_analysis", self.get_customer_lifetime_value_analysis),
            CapabilityMethod("get_customer_churn_risk_analysis", self.get_customer_churn_risk_analysis),
        )

    async def get_customer_segmentation_analysis(self) -> list[RowMapping]:
        """Return customer counts, satisfaction and usage per estate tier."""

        return await self._executor.db_fetch_rows(
            "customer segmentation analysis",
            "SELECT e.tier_classification, "
            "COUNT(DISTINCT cp.id) AS customer_count, "
            "AVG(cp.satisfaction_score) AS avg_satisfaction_rating, "
            "AVG(cp.tenure_months) AS avg_tenure_months, "
            "AVG((up.usage_metrics->>'data_consumption_gb')::numeric) AS avg_data_usage, "
            "COUNT(DISTINCT up.service_type) AS services_used, "
            "STRING_AGG(DISTINCT cp.lifestyle_indicators->>'internet_usage', ', ') AS usage_patterns "
            "FROM estates e "
            "LEFT JOIN customer_profiles cp ON e.id = cp.estate_id "
            "LEFT JOIN usage_patterns up ON cp.id = up.customer_id "
            "GROUP BY e.tier_classification "
            "ORDER BY avg_satisfaction_rating DESC NULLS LAST",
        )

    async def get_customer_satisfaction_analysis(self) -> list[RowMapping]:
        """Return satisfaction and feedback breakdown per estate."""

        return await self._executor.db_fetch_rows(
            "customer satisfaction analysis",
            "SELECT e.name AS estate_name, e.tier_classification, "
            "COUNT(cp.id) AS total_customers, "
            "AVG(cp.satisfaction_score) AS avg_satisfaction, "
            "COUNT(cf.id) AS feedback_count, "
            "AVG(cf.rating) AS avg_feedback_rating, "
            "COUNT(CASE WHEN cf.feedback_type = 'positive' THEN 1 END) AS positive_feedback, "
            "COUNT(CASE WHEN cf.feedback_type = 'negative' THEN 1 END) AS negative_feedback, "
            "STRING_AGG(DISTINCT cf.feedback_text, ' | ') AS recent_feedback "
            "FROM estates e "
            "LEFT JOIN customer_profiles cp ON e.id = cp.estate_id "
            "LEFT JOIN customer_feedback cf ON cp.id = cf.customer_id "
            "GROUP BY e.id, e.name, e.tier_classification "
            "ORDER BY avg_satisfaction DESC NULLS LAST",
        )

    async def get_usage_pattern_analysis(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "usage pattern analysis",
            "SELECT cp.lifestyle_indicators->>'internet_usage' AS usage_level, "
            "cp.demographics->>'age_group' AS age_group, "
            "cp.demographics->>'income_level' AS income_level, "
            "COUNT(*) AS customer_count, "
            "AVG((up.usage_metrics->>'data_consumption_gb')::numeric) AS avg_data_consumption, "
            "AVG(up.service_quality_rating) AS avg_service_quality, "
            "STRING_AGG(DISTINCT up.service_type, ', ') AS services_used, "
            "AVG((up.usage_metrics->>'average_session_duration')::numeric) AS avg_session_duration "
            "FROM customer_profiles cp "
            "JOIN usage_patterns up ON cp.id = up.customer_id "
            "GROUP BY cp.lifestyle_indicators->>'internet_usage', "
            "cp.demographics->>'age_group', cp.demographics->>'income_level' "
            "ORDER BY avg_data_consumption DESC NULLS LAST",
        )

    async def get_customer_lifetime_value_analysis(self) -> list[RowMapping]:
        # subscription revenue only
        return await self._executor.db_fetch_rows(
            "customer lifetime value analysis",
            "SELECT e.tier_classification, "
            "AVG(cp.tenure_months) AS avg_tenure_months, "
            "AVG(ra.average_revenue_per_customer) AS avg_revenue_per_customer, "
            "AVG(cp.tenure_months * ra.average_revenue_per_customer) AS estimated_lifetime_value, "
            "COUNT(DISTINCT cp.id) AS customer_count, "
            "SUM(ra.amount) AS total_revenue "
            "FROM estates e "
            "LEFT JOIN customer_profiles cp ON e.id = cp.estate_id "
            "LEFT JOIN revenue_analytics ra ON e.id = ra.estate_id "
            "WHERE ra.revenue_type = 'subscription' "
            "GROUP BY e.tier_classification "
            "ORDER BY estimated_lifetime_value DESC NULLS LAST",
        )

    async def get_customer_churn_risk_analysis(self) -> list[RowMapping]:
        """Classify customers into high, medium and low churn risk."""

        return await self._executor.db_fetch_rows(
            "customer churn risk analysis",
            "SELECT e.name AS estate_name, cp.id AS customer_id, "
            "cp.satisfaction_score, cp.tenure_months, "
            "up.service_quality_rating, cf.rating AS feedback_rating, "
            "CASE "
            "WHEN cp.satisfaction_score < 3 OR up.service_quality_rating < 3 THEN 'High Risk' "
            "WHEN cp.satisfaction_score < 4 OR up.service_quality_rating < 4 THEN 'Medium Risk' "
            "ELSE 'Low Risk' "
            "END AS churn_risk, "
            "STRING_AGG(DISTINCT cf.feedback_text, ' | ') AS recent_feedback "
            "FROM estates e "
            "JOIN customer_profiles cp ON e.id = cp.estate_id "
            "LEFT JOIN usage_patterns up ON cp.id = up.customer_id "
            "LEFT JOIN customer_feedback cf ON cp.id = cf.customer_id "
            "GROUP BY e.name, cp.id, cp.satisfaction_score, cp.tenure_months, "
            "up.service_quality_rating, cf.rating "
            "ORDER BY churn_risk, cp.satisfaction_score ASC",
        )
