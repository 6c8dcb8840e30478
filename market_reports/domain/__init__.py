"""Domain models and errors used across reporting layer boundaries."""

from .errors import (
	ConnectionProbeFailedError,
	MarketReportError,
	OverviewAggregateError,
	QueryExecutionError,
	QueryParameterError,
	RunnerModuleError,
)
from .models import (
	CONNECTION_FAILURE_MESSAGE,
	CONNECTION_SUCCESS_MESSAGE,
	TIER_RANK_ORDER,
	UNCLASSIFIED_TIER_LABEL,
	ConnectionProbeResult,
	OverviewReport,
	TierCount,
	domain_order_tier_counts,
	domain_tier_label,
	domain_tier_rank,
)
from .timeline import domain_build_sweep_event

__all__ = [
	"MarketReportError",
	"QueryExecutionError",
	"QueryParameterError",
	"RunnerModuleError",
	"ConnectionProbeFailedError",
	"OverviewAggregateError",
	"CONNECTION_SUCCESS_MESSAGE",
	"CONNECTION_FAILURE_MESSAGE",
	"TIER_RANK_ORDER",
	"UNCLASSIFIED_TIER_LABEL",
	"ConnectionProbeResult",
	"OverviewReport",
	"TierCount",
	"domain_tier_label",
	"domain_tier_rank",
	"domain_order_tier_counts",
	"domain_build_sweep_event",
]
