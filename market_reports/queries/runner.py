"""Generic runner module executing titled statements and rendering each result."""

from __future__ import annotations

import logging

from market_reports.db import QueryExecutorPort
from market_reports.domain import QueryExecutionError, RunnerModuleError

from .interfaces import ResultRendererPort, RunnerModulePort, RunnerStatement

logger = logging.getLogger(__name__)


class RunnerQueryModule(RunnerModulePort):
    """Runner module for one reporting domain."""

    def __init__(
        self,
        name: str,
        banner: str,
        statements: tuple[RunnerStatement, ...],
        executor: QueryExecutorPort,
        renderer: ResultRendererPort,
    ):
        """Initialize runner module.

        Args:
            name: Registry name of the module.
            banner: Title rendered before the first statement.
            statements: Ordered statements to execute.
            executor: DB-layer query executor.
            renderer: Console renderer for banners and tables.

        Raises:
            ValueError: Raised when name is blank or no statements are given.
        """

        if not name.strip():
            raise ValueError("name must not be blank")
        if not statements:
            raise ValueError("statements must not be empty")
        if executor is None:
            raise ValueError("executor must not be None")
        if renderer is None:
            raise ValueError("renderer must not be None")

        self.name = name.strip()
        self._banner = banner
        self._statements = statements
        self._executor = executor
        self._renderer = renderer

    @property
    def statements(self) -> tuple[RunnerStatement, ...]:
        """Return the ordered statements of this module."""

        return self._statements

    async def run(self) -> None:
        """Execute statements in order and render each result set immediately.

        Rendering happens per statement, so tables rendered before a failing
        statement stay visible.

        Raises:
            RunnerModuleError: Raised on the first failing statement.
        """

        self._renderer.render_banner(self._banner)
        for position, statement in enumerate(self._statements, start=1):
            self._renderer.render_heading(position, statement.title)
            try:
                rows = await self._executor.db_fetch_rows(
                    query_name=f"{self.name} / {statement.title}",
                    statement=statement.sql,
                )
            except QueryExecutionError as error:
                logger.error("error running %s queries at %r: %s", self.name, statement.title, error)
                raise RunnerModuleError(
                    f"error running {self.name} queries: {error}",
                    module_name=self.name,
                ) from error
            self._renderer.render_rows(rows)

        self._renderer.render_completion(f"{self._banner} completed successfully")
