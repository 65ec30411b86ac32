"""Run identifier helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def generate_run_id() -> str:
    now = datetime.now(tz=timezone.utc)
    # Sortable by start time, one per conversion run.
    return now.strftime("run-%Y%m%dT%H%M%S%fZ")
