"""Typed contracts for sweep orchestration responsibilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from market_reports.domain import ConnectionProbeResult, OverviewReport
from market_reports.queries import CapabilityModulePort, RunnerModulePort


class OutcomeKind(str, Enum):
    """Tagged outcome kinds for one sweep step."""

    OK = "ok"
    SOFT_FAIL = "soft_fail"
    FATAL = "fatal"


@dataclass(frozen=True)
class QueryOutcome:
    """Outcome of one probe, runner module or capability method invocation.

    Attributes:
        kind: Outcome kind.
        module_name: Module (or probe) the outcome belongs to.
        method_name: Capability method name; None for runner modules and the probe.
        row_count: Returned row count; None when the result is not a row list.
        reason: Failure text for soft and fatal outcomes.
    """

    kind: OutcomeKind
    module_name: str
    method_name: str | None = None
    row_count: int | None = None
    reason: str | None = None

    @classmethod
    def ok(cls, module_name: str, method_name: str | None = None, row_count: int | None = None) -> QueryOutcome:
        return cls(kind=OutcomeKind.OK, module_name=module_name, method_name=method_name, row_count=row_count)

    @classmethod
    def soft_fail(cls, module_name: str, reason: str, method_name: str | None = None) -> QueryOutcome:
        return cls(kind=OutcomeKind.SOFT_FAIL, module_name=module_name, method_name=method_name, reason=reason)

    @classmethod
    def fatal(cls, module_name: str, reason: str) -> QueryOutcome:
        return cls(kind=OutcomeKind.FATAL, module_name=module_name, reason=reason)

    @property
    def subject(self) -> str:
        """Return `module` or `module.method` for log and report lines."""

        if self.method_name is None:
            return self.module_name
        return f"{self.module_name}.{self.method_name}"

    def outcome_is_ok(self) -> bool:
        """Return whether the step completed."""

        return self.kind is OutcomeKind.OK


@dataclass(frozen=True)
class QueryRegistryConfig:
    """Module registry injected into the orchestrator.

    Attributes:
        runner_modules: Runner modules in registration order.
        capability_modules: Capability modules in registration order.
    """

    runner_modules: tuple[RunnerModulePort, ...] = ()
    capability_modules: tuple[CapabilityModulePort, ...] = ()


@dataclass(frozen=True)
class SweepReport:
    """Consolidated result of one `run_all` sweep.

    Attributes:
        connection_probe: Pre-flight probe result.
        module_outcomes: One outcome per runner module, registration order.
        method_outcomes: One outcome per capability method, sweep order.
        overview: System overview built at the end of the sweep.
        timeline: Structured sweep timeline events.
    """

    connection_probe: ConnectionProbeResult
    module_outcomes: tuple[QueryOutcome, ...]
    method_outcomes: tuple[QueryOutcome, ...]
    overview: OverviewReport
    timeline: tuple[dict[str, object], ...] = field(default_factory=tuple)

    def sweep_failed_module_count(self) -> int:
        """Return the number of runner modules that failed."""

        return sum(1 for outcome in self.module_outcomes if not outcome.outcome_is_ok())

    def sweep_soft_failed_method_count(self) -> int:
        """Return the number of capability methods that failed softly."""

        return sum(1 for outcome in self.method_outcomes if not outcome.outcome_is_ok())
