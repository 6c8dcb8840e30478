"""Reporting orchestrator driving the probe gate, the module sweep and the overview."""

from __future__ import annotations

import logging

from market_reports.db import ConnectionProbePort
from market_reports.domain import (
    ConnectionProbeFailedError,
    ConnectionProbeResult,
    OverviewReport,
    domain_build_sweep_event,
)
from market_reports.queries import CapabilityModulePort, RunnerModulePort

from .interfaces import OutcomeKind, QueryOutcome, QueryRegistryConfig, SweepReport
from .overview import SystemOverviewAggregator
from .sweep import (
    job_build_probe_outcome,
    job_invoke_capability_method,
    job_invoke_runner_module,
    job_list_capability_methods,
)

logger = logging.getLogger(__name__)


class QueryReportOrchestrator:
    """Orchestrator over an injected registry of runner and capability modules."""

    def __init__(
        self,
        config: QueryRegistryConfig,
        connection_probe: ConnectionProbePort,
        overview_aggregator: SystemOverviewAggregator,
    ):
        """Initialize orchestrator dependencies.

        Args:
            config: Runner and capability module registry.
            connection_probe: Pre-flight database probe.
            overview_aggregator: System overview builder.

        Raises:
            ValueError: Raised when dependencies are missing or module names repeat.
        """

        if config is None:
            raise ValueError("config must not be None")
        if connection_probe is None:
            raise ValueError("connection_probe must not be None")
        if overview_aggregator is None:
            raise ValueError("overview_aggregator must not be None")
        self._report_validate_unique_names("runner", [module.name for module in config.runner_modules])
        self._report_validate_unique_names("capability", [module.name for module in config.capability_modules])

        self._config = config
        self._connection_probe = connection_probe
        self._overview_aggregator = overview_aggregator

    def report_supported_module_names(self) -> tuple[str, ...]:
        """Return runner then capability module names in registration order."""

        return tuple(module.name for module in self._config.runner_modules) + tuple(
            module.name for module in self._config.capability_modules
        )

    def report_get_module(self, module_name: str) -> RunnerModulePort | CapabilityModulePort:
        """Return one registered module by name.

        Args:
            module_name: Registry name.

        Returns:
            RunnerModulePort | CapabilityModulePort: Matching module.

        Raises:
            LookupError: Raised when no module has that name.
        """

        normalized_module_name = module_name.strip()
        for runner_module in self._config.runner_modules:
            if runner_module.name == normalized_module_name:
                return runner_module
        for capability_module in self._config.capability_modules:
            if capability_module.name == normalized_module_name:
                return capability_module
        raise LookupError(f"unknown module_name={normalized_module_name}")

    async def report_test_connection(self) -> ConnectionProbeResult:
        """Probe the database without raising."""

        return await self._connection_probe.db_test_connection()

    async def report_get_system_overview(self) -> OverviewReport:
        """Build a fresh system overview.

        Raises:
            OverviewAggregateError: Raised when any overview sub-query fails.
        """

        return await self._overview_aggregator.overview_build()

    async def report_run_all(self) -> SweepReport:
        """Run the probe gate, every runner module, every capability method and the overview.

        Runner modules and capability methods run one at a time in registration
        and declaration order. Their failures are recorded as soft outcomes and
        never stop the sweep.

        Returns:
            SweepReport: Consolidated sweep result.

        Raises:
            ConnectionProbeFailedError: Raised when the pre-flight probe fails; nothing else runs.
            OverviewAggregateError: Raised when the overview cannot be built.
        """

        timeline: list[dict[str, object]] = [domain_build_sweep_event(stage="run", status="started")]

        probe_result = await self._connection_probe.db_test_connection()
        probe_outcome = job_build_probe_outcome(probe_result)
        if probe_outcome.kind is OutcomeKind.FATAL:
            logger.error("%s: %s", probe_result.message, probe_outcome.reason)
            raise ConnectionProbeFailedError(f"{probe_result.message}: {probe_outcome.reason}")
        logger.info("%s at %s", probe_result.message, probe_result.timestamp)
        timeline.append(
            domain_build_sweep_event(
                stage="probe",
                status="completed",
                details={"timestamp": str(probe_result.timestamp)},
            )
        )

        module_outcomes: list[QueryOutcome] = []
        for runner_module in self._config.runner_modules:
            outcome = await job_invoke_runner_module(runner_module)
            module_outcomes.append(outcome)
            timeline.append(self._report_outcome_event(stage="runner", outcome=outcome))

        method_outcomes: list[QueryOutcome] = []
        for capability_module in self._config.capability_modules:
            logger.info("sweeping %s methods", capability_module.name)
            methods, listing_outcome = job_list_capability_methods(capability_module)
            if listing_outcome is not None:
                method_outcomes.append(listing_outcome)
                timeline.append(self._report_outcome_event(stage="capability", outcome=listing_outcome))
            for method in methods:
                outcome = await job_invoke_capability_method(capability_module.name, method)
                method_outcomes.append(outcome)
                timeline.append(self._report_outcome_event(stage="capability", outcome=outcome))

        overview = await self._overview_aggregator.overview_build()
        timeline.append(domain_build_sweep_event(stage="overview", status="completed"))

        failed_module_count = sum(1 for outcome in module_outcomes if not outcome.outcome_is_ok())
        soft_failed_method_count = sum(1 for outcome in method_outcomes if not outcome.outcome_is_ok())
        timeline.append(
            domain_build_sweep_event(
                stage="run",
                status="completed",
                details={
                    "failed_modules": failed_module_count,
                    "soft_failed_methods": soft_failed_method_count,
                },
            )
        )
        logger.info(
            "sweep completed: %d/%d runner modules failed, %d/%d capability methods failed softly",
            failed_module_count,
            len(module_outcomes),
            soft_failed_method_count,
            len(method_outcomes),
        )
        return SweepReport(
            connection_probe=probe_result,
            module_outcomes=tuple(module_outcomes),
            method_outcomes=tuple(method_outcomes),
            overview=overview,
            timeline=tuple(timeline),
        )

    def _report_outcome_event(self, stage: str, outcome: QueryOutcome) -> dict[str, object]:
        details: dict[str, object] = {}
        if outcome.row_count is not None:
            details["row_count"] = outcome.row_count
        if outcome.reason is not None:
            details["reason"] = outcome.reason
        return domain_build_sweep_event(
            stage=stage,
            status=outcome.kind.value,
            subject=outcome.subject,
            details=details or None,
        )

    @staticmethod
    def _report_validate_unique_names(registry_label: str, module_names: list[str]) -> None:
        seen_names: set[str] = set()
        for module_name in module_names:
            if not module_name or not module_name.strip():
                raise ValueError(f"{registry_label} module name must not be blank")
            if module_name in seen_names:
                raise ValueError(f"duplicate {registry_label} module name={module_name}")
            seen_names.add(module_name)
