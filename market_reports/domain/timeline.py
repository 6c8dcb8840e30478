"""Sweep timeline events recorded by the orchestrator."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def domain_build_sweep_event(
    stage: str,
    status: str,
    subject: str | None = None,
    details: dict[str, Any] | None = None,
) -> dict[str, object]:
    """Build one sweep timeline event.

    Args:
        stage: Sweep stage (`probe`, `runner`, `capability`, `overview`, `run`).
        status: `started`, `completed` or an outcome kind value.
        subject: Module or `module.method` the event refers to.
        details: Row counts, failure reasons or tallies.

    Returns:
        dict[str, object]: Event with a UTC ISO timestamp under `at_utc`.
    """

    sweep_event: dict[str, object] = {"stage": stage, "status": status}
    if subject is not None:
        sweep_event["subject"] = subject
    if details:
        sweep_event["details"] = dict(details)
    sweep_event["at_utc"] = datetime.now(timezone.utc).isoformat()
    return sweep_event
