"""Base class for capability query modules with explicit method registries."""

from __future__ import annotations

from abc import ABC, abstractmethod

from market_reports.db import QueryExecutorPort

from .interfaces import CapabilityMethod, CapabilityModulePort


class CapabilityQueryModule(CapabilityModulePort, ABC):
    """Capability module exposing independently invocable query methods.

    Subclasses set `name` and declare their methods in `query_methods`.
    Every method runs one statement through the executor, which checks out
    its own pooled connection per call.
    """

    name: str = ""

    def __init__(self, executor: QueryExecutorPort):
        """Initialize capability module.

        Args:
            executor: DB-layer query executor.

        Raises:
            ValueError: Raised when executor is None or the module has no name.
        """

        if executor is None:
            raise ValueError("executor must not be None")
        if not self.name.strip():
            raise ValueError("capability module name must not be blank")
        self._executor = executor

    @abstractmethod
    def query_methods(self) -> tuple[CapabilityMethod, ...]:
        """Return declared methods in sweep order."""

    def query_method_names(self) -> tuple[str, ...]:
        """Return declared method names in sweep order."""

        return tuple(method.name for method in self.query_methods())

    def query_get_method(self, method_name: str) -> CapabilityMethod:
        """Return one declared method by name.

        Args:
            method_name: Declared method name.

        Returns:
            CapabilityMethod: Matching descriptor.

        Raises:
            LookupError: Raised when the module declares no such method.
        """

        for method in self.query_methods():
            if method.name == method_name:
                return method
        raise LookupError(f"{self.name} has no method {method_name}")
