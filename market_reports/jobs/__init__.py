"""Job layer package for sweep orchestration boundaries."""

from .interfaces import OutcomeKind, QueryOutcome, QueryRegistryConfig, SweepReport
from .overview import SystemOverviewAggregator
from .report_orchestrator import QueryReportOrchestrator
from .sweep import (
	CONNECTION_PROBE_SUBJECT,
	job_build_probe_outcome,
	job_describe_failure,
	job_invoke_capability_method,
	job_invoke_runner_module,
	job_list_capability_methods,
)

__all__ = [
	"OutcomeKind",
	"QueryOutcome",
	"QueryRegistryConfig",
	"SweepReport",
	"SystemOverviewAggregator",
	"QueryReportOrchestrator",
	"CONNECTION_PROBE_SUBJECT",
	"job_build_probe_outcome",
	"job_describe_failure",
	"job_invoke_capability_method",
	"job_invoke_runner_module",
	"job_list_capability_methods",
]
