"""Project-native typed exceptions for reporting failures."""

from __future__ import annotations


class MarketReportError(RuntimeError):
    """Base exception for reporting-layer failures."""


class QueryExecutionError(MarketReportError):
    """Statement execution failure raised by the db layer.

    Attributes:
        query_name: Human-readable name of the failed query.
    """

    def __init__(self, message: str, query_name: str):
        super().__init__(message)
        self.query_name = query_name


class QueryParameterError(MarketReportError, TypeError):
    """Capability method invoked without its required positional parameters."""


class RunnerModuleError(MarketReportError):
    """Runner module stopped on a failing statement.

    Attributes:
        module_name: Registry name of the failed runner module.
    """

    def __init__(self, message: str, module_name: str):
        super().__init__(message)
        self.module_name = module_name


class ConnectionProbeFailedError(MarketReportError, ConnectionError):
    """Pre-flight connection probe reported an unreachable database."""


class OverviewAggregateError(MarketReportError):
    """One of the system overview sub-queries failed."""
