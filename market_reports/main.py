"""Main module entrypoint for one reporting sweep.

This module validates startup configuration, runs the sweep once and exits.
"""

import asyncio
import logging

from market_reports.bootstrap import bootstrap_create_engine, bootstrap_create_orchestrator
from market_reports.config import AppSettings, SettingsLoadError, config_load_settings
from market_reports.domain import ConnectionProbeFailedError, OverviewAggregateError
from market_reports.jobs import SweepReport
from market_reports.reporting import ConsoleResultRenderer

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


async def main_run_sweep(settings: AppSettings) -> SweepReport:
    """Run one sweep against the configured database and render the result.

    Args:
        settings: Validated runtime settings.

    Returns:
        SweepReport: Consolidated sweep result.

    Raises:
        ConnectionProbeFailedError: Raised when the database is unreachable.
        OverviewAggregateError: Raised when the overview cannot be built.
    """

    renderer = ConsoleResultRenderer()
    engine = bootstrap_create_engine(settings)
    try:
        orchestrator = bootstrap_create_orchestrator(engine=engine, renderer=renderer)
        report = await orchestrator.report_run_all()
        renderer.render_sweep_report(report)
        return report
    finally:
        await engine.dispose()


def main() -> None:
    """Run exactly one reporting sweep.

    Exits with status 1 when settings are invalid, the connection probe fails
    or the overview cannot be built. Module and method failures do not change
    the exit status.

    Raises:
        SystemExit: Raised with status 1 on fatal failures.
    """

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        logging.basicConfig(level=logging.ERROR, format=_LOG_FORMAT)
        logger.error("%s", error)
        raise SystemExit(1) from error

    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)
    logger.info("market reports sweep started (environment=%s)", settings.environment_name)
    try:
        asyncio.run(main_run_sweep(settings))
    except (ConnectionProbeFailedError, OverviewAggregateError) as error:
        logger.error("sweep aborted: %s", error)
        raise SystemExit(1) from error


if __name__ == "__main__":
    main()
