"""Typed interfaces for runner and capability query modules."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Protocol

from market_reports.db import RowMapping
from market_reports.domain import QueryParameterError


@dataclass(frozen=True)
class RunnerStatement:
    """One titled read statement executed by a runner module.

    Attributes:
        title: Heading rendered above the result table.
        sql: Read-only SQL text.
    """

    title: str
    sql: str


@dataclass(frozen=True)
class CapabilityMethod:
    """Declared, independently invocable method of a capability module.

    Attributes:
        name: Method name reported by the sweep.
        handler: Bound async query method.
        required_parameters: Names of positional parameters without defaults.
    """

    name: str
    handler: Callable[..., Awaitable[Any]]
    required_parameters: tuple[str, ...] = ()

    @property
    def arity(self) -> int:
        """Return the number of required positional parameters."""

        return len(self.required_parameters)

    async def invoke(self, *arguments: Any) -> Any:
        """Invoke the handler after checking required positional parameters.

        Args:
            *arguments: Positional arguments forwarded to the handler.

        Returns:
            Any: Handler result, usually a list of row mappings.

        Raises:
            QueryParameterError: Raised when fewer arguments than required parameters are given.
        """

        if len(arguments) < self.arity:
            missing_parameters = self.required_parameters[len(arguments):]
            raise QueryParameterError(f"{self.name} requires parameters: {', '.join(missing_parameters)}")
        return await self.handler(*arguments)


class ResultRendererPort(Protocol):
    """Port definition for console rendering of runner output."""

    def render_banner(self, title: str) -> None:
        """Render a module banner."""

    def render_heading(self, position: int, title: str) -> None:
        """Render a numbered statement heading."""

    def render_rows(self, rows: list[RowMapping]) -> None:
        """Render one result set as a table."""

    def render_completion(self, message: str) -> None:
        """Render a module completion line."""


class RunnerModulePort(Protocol):
    """Port definition for runner modules driven by the sweep."""

    name: str

    async def run(self) -> None:
        """Execute every statement in order, rendering each result.

        Raises:
            RunnerModuleError: Raised when any statement fails.
        """


class CapabilityModulePort(Protocol):
    """Port definition for capability modules driven by the sweep."""

    name: str

    def query_methods(self) -> tuple[CapabilityMethod, ...]:
        """Return declared methods in sweep order."""
