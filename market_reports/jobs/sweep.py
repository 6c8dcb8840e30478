"""Per-step invocation helpers for the reporting sweep.

Each helper converts one step into a tagged `QueryOutcome`. Runner and method
failures become soft outcomes; only a failed probe becomes fatal.
"""

from __future__ import annotations

import logging

from market_reports.domain import ConnectionProbeResult
from market_reports.queries import CapabilityMethod, CapabilityModulePort, RunnerModulePort

from .interfaces import QueryOutcome

logger = logging.getLogger(__name__)

CONNECTION_PROBE_SUBJECT = "connection_probe"


def job_describe_failure(error: Exception) -> str:
    """Return the failure text recorded on a soft outcome.

    Errors without a message are described by their type name.
    """

    message = str(error)
    if not message:
        return type(error).__name__
    return message


def job_build_probe_outcome(probe_result: ConnectionProbeResult) -> QueryOutcome:
    """Map a connection probe result to an ok or fatal outcome.

    Args:
        probe_result: Pre-flight probe result.

    Returns:
        QueryOutcome: `ok` when the probe succeeded, otherwise `fatal`.
    """

    if probe_result.success:
        return QueryOutcome.ok(module_name=CONNECTION_PROBE_SUBJECT)
    return QueryOutcome.fatal(
        module_name=CONNECTION_PROBE_SUBJECT,
        reason=probe_result.error or probe_result.message,
    )


async def job_invoke_runner_module(module: RunnerModulePort) -> QueryOutcome:
    """Run one runner module to completion and capture its outcome.

    Args:
        module: Runner module to execute.

    Returns:
        QueryOutcome: `ok`, or `soft_fail` with the failure text.
    """

    logger.info("running %s queries", module.name)
    try:
        await module.run()
    except Exception as error:
        logger.error("runner module %s failed: %s", module.name, error)
        return QueryOutcome.soft_fail(module_name=module.name, reason=job_describe_failure(error))
    return QueryOutcome.ok(module_name=module.name)


async def job_invoke_capability_method(module_name: str, method: CapabilityMethod) -> QueryOutcome:
    """Invoke one capability method without arguments and capture its outcome.

    Methods declaring required parameters fail with `QueryParameterError`,
    which is recorded as a soft outcome like any other method failure.

    Args:
        module_name: Owning capability module name.
        method: Declared capability method.

    Returns:
        QueryOutcome: `ok` with the row count, or `soft_fail` with the failure text.
    """

    try:
        result = await method.invoke()
    except Exception as error:
        logger.warning("%s.%s failed: %s", module_name, method.name, error)
        return QueryOutcome.soft_fail(
            module_name=module_name,
            method_name=method.name,
            reason=job_describe_failure(error),
        )

    row_count = len(result) if isinstance(result, list) else None
    logger.info("%s.%s returned %s rows", module_name, method.name, "n/a" if row_count is None else row_count)
    return QueryOutcome.ok(module_name=module_name, method_name=method.name, row_count=row_count)


def job_list_capability_methods(
    module: CapabilityModulePort,
) -> tuple[tuple[CapabilityMethod, ...], QueryOutcome | None]:
    """Enumerate the declared methods of one capability module.

    Args:
        module: Capability module to enumerate.

    Returns:
        tuple[tuple[CapabilityMethod, ...], QueryOutcome | None]: Declared methods and no outcome,
        or no methods and a module-level `soft_fail` when the enumeration raises.
    """

    try:
        return tuple(module.query_methods()), None
    except Exception as error:
        logger.warning("%s methods could not be listed: %s", module.name, error)
        return (), QueryOutcome.soft_fail(module_name=module.name, reason=job_describe_failure(error))
