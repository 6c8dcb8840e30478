"""Financial intelligence capability module.

Revenue analysis, investment tracking and financial performance metrics per
estate, tier and area. Period-bucketed queries select their SQL from fixed
templates keyed by truncation unit.
"""

from __future__ import annotations

from typing import Any

from market_reports.db import RowMapping

from .capability import CapabilityQueryModule
from .interfaces import CapabilityMethod
from .templates import (
    query_build_templates_by_unit,
    query_resolve_period_unit,
    query_validate_estate_id,
    query_validate_months,
)


class FinancialIntelligenceQueries(CapabilityQueryModule):
    """Revenue, investment, ROI and cash flow queries."""

    name = "financial_intelligence"

    _REVENUE_BY_TIER_QUERY_BY_UNIT = query_build_templates_by_unit(
        "SELECT e.tier_classification, "
        "DATE_TRUNC('{unit}', ra.period) AS period, "
        "SUM(ra.amount) AS total_revenue, "
        "COUNT(DISTINCT ra.id) AS transaction_count, "
        "AVG(ra.amount) AS avg_transaction_value, "
        "ra.revenue_type "
        "FROM estates e "
        "JOIN revenue_analytics ra ON e.id = ra.estate_id "
        "WHERE ra.period >= CURRENT_DATE - INTERVAL '1 year' "
        "GROUP BY e.tier_classification, DATE_TRUNC('{unit}', ra.period), ra.revenue_type "
        "ORDER BY period DESC, total_revenue DESC"
    )

    _CASH_FLOW_QUERY_BY_UNIT = query_build_templates_by_unit(
        "SELECT DATE_TRUNC('{unit}', combined.period) AS period, "
        "COALESCE(SUM(combined.amount) FILTER (WHERE combined.flow = 'inflow'), 0) AS cash_inflow, "
        "COALESCE(SUM(combined.amount) FILTER (WHERE combined.flow = 'outflow'), 0) AS cash_outflow, "
        "COALESCE(SUM(combined.amount) FILTER (WHERE combined.flow = 'inflow'), 0) "
        "- COALESCE(SUM(combined.amount) FILTER (WHERE combined.flow = 'outflow'), 0) AS net_cash_flow, "
        "COUNT(DISTINCT combined.estate_id) FILTER (WHERE combined.flow = 'inflow') AS revenue_estates, "
        "COUNT(DISTINCT combined.estate_id) FILTER (WHERE combined.flow = 'outflow') AS investment_estates "
        "FROM ("
        "SELECT estate_id, period, amount, 'inflow' AS flow FROM revenue_analytics "
        "UNION ALL "
        "SELECT estate_id, investment_date AS period, amount, 'outflow' AS flow FROM investment_tracking"
        ") combined "
        "WHERE combined.period >= CURRENT_DATE - INTERVAL '1 year' "
        "GROUP BY DATE_TRUNC('{unit}', combined.period) "
        "ORDER BY period DESC"
    )

    def query_methods(self) -> tuple[CapabilityMethod, ...]:
        return (
            CapabilityMethod("get_financial_performance_dashboard", self.get_financial_performance_dashboard),
            CapabilityMethod("get_revenue_analysis_by_tier", self.get_revenue_analysis_by_tier),
            CapabilityMethod("get_investment_tracking_analysis", self.get_investment_tracking_analysis),
            CapabilityMethod("get_market_opportunities_analysis", self.get_market_opportunities_analysis),
            CapabilityMethod("get_financial_performance_by_area", self.get_financial_performance_by_area),
            CapabilityMethod(
                "get_revenue_trends_by_estate",
                self.get_revenue_trends_by_estate,
                required_parameters=("estate_id",),
            ),
            CapabilityMethod("get_investment_roi_by_type", self.get_investment_roi_by_type),
            CapabilityMethod("get_estate_financial_health_score", self.get_estate_financial_health_score),
            CapabilityMethod("get_cash_flow_analysis", self.get_cash_flow_analysis),
        )

    async def get_financial_performance_dashboard(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "financial performance dashboard",
            "SELECT e.tier_classification, "
            "COUNT(DISTINCT e.id) AS estate_count, "
            "SUM(ra.amount) AS total_revenue, "
            "SUM(it.amount) AS total_investment, "
            "(SUM(ra.amount) - SUM(it.amount)) AS net_profit, "
            "AVG(it.expected_roi) AS avg_expected_roi, "
            "AVG(it.actual_roi) AS avg_actual_roi, "
            "COUNT(mo.id) AS opportunity_count, "
            "SUM(mo.potential_value) AS total_opportunity_value "
            "FROM estates e "
            "LEFT JOIN revenue_analytics ra ON e.id = ra.estate_id "
            "LEFT JOIN investment_tracking it ON e.id = it.estate_id "
            "LEFT JOIN market_opportunities mo ON e.id = mo.estate_id "
            "GROUP BY e.tier_classification "
            "ORDER BY total_revenue DESC NULLS LAST",
        )

    async def get_revenue_analysis_by_tier(self, period: str = "monthly") -> list[RowMapping]:
        """Return trailing-year revenue per tier bucketed by month or quarter.

        Args:
            period: `monthly` for month buckets; anything else buckets by quarter.

        Returns:
            list[RowMapping]: Revenue rows, latest period first.

        Raises:
            QueryExecutionError: Raised when the query fails.
        """

        unit = query_resolve_period_unit(period)
        return await self._executor.db_fetch_rows(
            "revenue analysis by tier",
            self._REVENUE_BY_TIER_QUERY_BY_UNIT[unit],
        )

    async def get_investment_tracking_analysis(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "investment tracking analysis",
            "SELECT e.name AS estate_name, e.tier_classification, "
            "it.investment_type, it.amount, it.investment_date, it.expected_roi, it.actual_roi, it.status, "
            "CASE WHEN it.actual_roi > 0 AND it.expected_roi <> 0 "
            "THEN ((it.actual_roi - it.expected_roi) / it.expected_roi * 100) "
            "ELSE 0 END AS roi_variance_percentage, "
            "ra.amount AS revenue_generated, "
            "(ra.amount - it.amount) AS net_return "
            "FROM investment_tracking it "
            "JOIN estates e ON it.estate_id = e.id "
            "LEFT JOIN revenue_analytics ra ON e.id = ra.estate_id AND ra.period >= it.investment_date "
            "ORDER BY it.investment_date DESC",
        )

    async def get_market_opportunities_analysis(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "market opportunities analysis",
            "SELECT e.name AS estate_name, e.tier_classification, e.market_potential_score, "
            "mo.opportunity_type, mo.potential_value, mo.risk_assessment, "
            "mo.implementation_timeline, mo.priority_level, "
            "COUNT(lb.id) AS business_count, "
            "AVG(d.population) AS population, "
            "AVG((d.income_levels->>'high')::numeric) AS high_income_percentage "
            "FROM market_opportunities mo "
            "JOIN estates e ON mo.estate_id = e.id "
            "LEFT JOIN local_businesses lb ON e.id = lb.estate_id "
            "LEFT JOIN demographics d ON e.id = d.estate_id "
            "GROUP BY e.id, e.name, e.tier_classification, e.market_potential_score, "
            "mo.opportunity_type, mo.potential_value, mo.risk_assessment, "
            "mo.implementation_timeline, mo.priority_level "
            "ORDER BY mo.priority_level DESC, mo.potential_value DESC",
        )

    async def get_financial_performance_by_area(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "financial performance by area",
            "SELECT a.name AS area_name, a.state, "
            "COUNT(DISTINCT e.id) AS estate_count, "
            "SUM(ra.amount) AS total_revenue, "
            "SUM(it.amount) AS total_investment, "
            "(SUM(ra.amount) - SUM(it.amount)) AS net_profit, "
            "AVG(e.market_potential_score) AS avg_market_potential, "
            "COUNT(mo.id) AS opportunity_count, "
            "SUM(mo.potential_value) AS total_opportunity_value, "
            "ROUND(SUM(ra.amount) / COUNT(DISTINCT e.id), 2) AS revenue_per_estate "
            "FROM areas a "
            "JOIN estates e ON a.id = e.area_id "
            "LEFT JOIN revenue_analytics ra ON e.id = ra.estate_id "
            "LEFT JOIN investment_tracking it ON e.id = it.estate_id "
            "LEFT JOIN market_opportunities mo ON e.id = mo.estate_id "
            "GROUP BY a.id, a.name, a.state "
            "ORDER BY total_revenue DESC NULLS LAST",
        )

    async def get_revenue_trends_by_estate(self, estate_id: Any, months: int = 12) -> list[RowMapping]:
        """Return monthly revenue for one estate over a trailing window.

        Args:
            estate_id: Estate primary key.
            months: Trailing window in months.

        Returns:
            list[RowMapping]: Monthly revenue rows per revenue type, latest month first.

        Raises:
            ValueError: Raised when estate_id is blank or months is not positive.
            QueryExecutionError: Raised when the query fails.
        """

        return await self._executor.db_fetch_rows(
            f"revenue trends for estate {estate_id}",
            "SELECT DATE_TRUNC('month', ra.period) AS month, ra.revenue_type, "
            "SUM(ra.amount) AS total_revenue, "
            "COUNT(ra.id) AS transaction_count, "
            "AVG(ra.amount) AS avg_transaction_value "
            "FROM revenue_analytics ra "
            "WHERE ra.estate_id = :estate_id "
            "AND ra.period >= CURRENT_DATE - make_interval(months => CAST(:months AS integer)) "
            "GROUP BY DATE_TRUNC('month', ra.period), ra.revenue_type "
            "ORDER BY month DESC, total_revenue DESC",
            {"estate_id": query_validate_estate_id(estate_id), "months": query_validate_months(months)},
        )

    async def get_investment_roi_by_type(self) -> list[RowMapping]:
        return await self._executor.db_fetch_rows(
            "investment ROI by type",
            "SELECT it.investment_type, "
            "COUNT(it.id) AS investment_count, "
            "SUM(it.amount) AS total_invested, "
            "AVG(it.expected_roi) AS avg_expected_roi, "
            "AVG(it.actual_roi) AS avg_actual_roi, "
            "SUM(ra.amount) AS total_revenue_generated, "
            "CASE WHEN SUM(it.amount) > 0 "
            "THEN (SUM(ra.amount) - SUM(it.amount)) / SUM(it.amount) * 100 "
            "ELSE 0 END AS overall_roi_percentage, "
            "COUNT(CASE WHEN it.actual_roi >= it.expected_roi THEN 1 END) AS successful_investments, "
            "ROUND(COUNT(CASE WHEN it.actual_roi >= it.expected_roi THEN 1 END)::DECIMAL "
            "/ COUNT(it.id) * 100, 2) AS success_rate "
            "FROM investment_tracking it "
            "LEFT JOIN revenue_analytics ra ON it.estate_id = ra.estate_id AND ra.period >= it.investment_date "
            "GROUP BY it.investment_type "
            "ORDER BY overall_roi_percentage DESC NULLS LAST",
        )

    async def get_estate_financial_health_score(self) -> list[RowMapping]:
        """Return a 0-100 financial health score per estate.

        The score adds 25 points each for revenue, profit and open
        opportunities, plus up to 25 points from market potential.
        """

        return await self._executor.db_fetch_rows(
            "estate financial health scores",
            "SELECT e.id, e.name AS estate_name, e.tier_classification, e.market_potential_score, "
            "COALESCE(SUM(ra.amount), 0) AS total_revenue, "
            "COALESCE(SUM(it.amount), 0) AS total_investment, "
            "COALESCE(SUM(ra.amount), 0) - COALESCE(SUM(it.amount), 0) AS net_profit, "
            "CASE WHEN COALESCE(SUM(it.amount), 0) > 0 "
            "THEN (COALESCE(SUM(ra.amount), 0) - COALESCE(SUM(it.amount), 0)) / SUM(it.amount) * 100 "
            "ELSE 0 END AS roi_percentage, "
            "COUNT(mo.id) AS opportunity_count, "
            "COALESCE(SUM(mo.potential_value), 0) AS opportunity_value, "
            "("
            "CASE WHEN COALESCE(SUM(ra.amount), 0) > 0 THEN 25 ELSE 0 END "
            "+ CASE WHEN COALESCE(SUM(ra.amount), 0) - COALESCE(SUM(it.amount), 0) > 0 THEN 25 ELSE 0 END "
            "+ CASE WHEN e.market_potential_score > 7 THEN 25 ELSE e.market_potential_score * 3.57 END "
            "+ CASE WHEN COUNT(mo.id) > 0 THEN 25 ELSE 0 END"
            ") AS financial_health_score "
            "FROM estates e "
            "LEFT JOIN revenue_analytics ra ON e.id = ra.estate_id "
            "LEFT JOIN investment_tracking it ON e.id = it.estate_id "
            "LEFT JOIN market_opportunities mo ON e.id = mo.estate_id "
            "GROUP BY e.id, e.name, e.tier_classification, e.market_potential_score "
            "ORDER BY financial_health_score DESC NULLS LAST",
        )

    async def get_cash_flow_analysis(self, period: str = "monthly") -> list[RowMapping]:
        """Return trailing-year revenue inflow against investment outflow per period.

        Args:
            period: `monthly` for month buckets; anything else buckets by quarter.

        Returns:
            list[RowMapping]: Cash flow rows, latest period first.
        """

        unit = query_resolve_period_unit(period)
        return await self._executor.db_fetch_rows("cash flow analysis", self._CASH_FLOW_QUERY_BY_UNIT[unit])
