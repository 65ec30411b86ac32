"""Run summary of row counters."""

from __future__ import annotations

from pathlib import Path

from census_convert.common.fs import write_json
from census_convert.common.models import RunCounts
from census_convert.common.time_utils import utc_timestamp_iso


def run_status(counts: RunCounts) -> str:
    if counts.rows_in and not counts.rows_out:
        return "error"
    if counts.rows_dropped_invalid_postcode or counts.numeric_fields_defaulted:
        return "partial"
    return "success"


def write_run_summary(summary_path: Path, *, run_id: str, counts: RunCounts, files: list[Path]) -> Path:
    payload = {
        "run_id": run_id,
        "generated_at": utc_timestamp_iso(),
        "status": run_status(counts),
        "files": [str(path) for path in files],
        "totals": counts.to_dict(),
    }
    write_json(summary_path, payload)
    return summary_path
