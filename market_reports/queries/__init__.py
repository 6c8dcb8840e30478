"""Query module package for runner and capability reporting modules."""

from .aggregated_views import AGGREGATED_VIEW_STATEMENTS, query_build_aggregated_view_runner
from .areas import AREA_STATEMENTS, query_build_area_runner
from .business import BusinessQueries
from .capability import CapabilityQueryModule
from .competitive import CompetitiveQueries
from .customer_intelligence import CustomerIntelligenceQueries
from .customers import CustomerQueries
from .estate_analytics import EstateAnalyticsQueries, query_first_row
from .estate_units import ESTATE_UNIT_STATEMENTS, query_build_estate_unit_runner
from .estates import ESTATE_STATEMENTS, query_build_estate_runner
from .financial_intelligence import FinancialIntelligenceQueries
from .infrastructure_intelligence import InfrastructureIntelligenceQueries
from .interfaces import (
	CapabilityMethod,
	CapabilityModulePort,
	ResultRendererPort,
	RunnerModulePort,
	RunnerStatement,
)
from .market_intelligence import MarketIntelligenceQueries
from .price_trends import PRICE_TREND_STATEMENTS, query_build_price_trend_runner
from .products import PRODUCT_STATEMENTS, query_build_product_runner
from .runner import RunnerQueryModule
from .templates import (
	query_resolve_period_unit,
	query_tier_rank_case,
	query_validate_estate_id,
	query_validate_months,
)

__all__ = [
	"CapabilityMethod",
	"CapabilityModulePort",
	"ResultRendererPort",
	"RunnerModulePort",
	"RunnerStatement",
	"RunnerQueryModule",
	"CapabilityQueryModule",
	"PRODUCT_STATEMENTS",
	"AREA_STATEMENTS",
	"ESTATE_STATEMENTS",
	"ESTATE_UNIT_STATEMENTS",
	"PRICE_TREND_STATEMENTS",
	"AGGREGATED_VIEW_STATEMENTS",
	"query_build_product_runner",
	"query_build_area_runner",
	"query_build_estate_runner",
	"query_build_estate_unit_runner",
	"query_build_price_trend_runner",
	"query_build_aggregated_view_runner",
	"EstateAnalyticsQueries",
	"CustomerIntelligenceQueries",
	"MarketIntelligenceQueries",
	"FinancialIntelligenceQueries",
	"InfrastructureIntelligenceQueries",
	"BusinessQueries",
	"CompetitiveQueries",
	"CustomerQueries",
	"query_first_row",
	"query_resolve_period_unit",
	"query_tier_rank_case",
	"query_validate_estate_id",
	"query_validate_months",
]
