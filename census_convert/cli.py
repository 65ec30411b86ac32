"""CLI entrypoint for the census postcode converter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from census_convert.common.config_loader import Settings, load_settings
from census_convert.common.constants import EXIT_HARD_FAIL, EXIT_SUCCESS
from census_convert.common.errors import PipelineError
from census_convert.common.ids import generate_run_id
from census_convert.common.logging import build_logger, log_event
from census_convert.pipeline.aggregate import CensusAggregate, aggregate_files
from census_convert.pipeline.enumerate import list_input_files
from census_convert.pipeline.export import write_area_files, write_taxonomy
from census_convert.pipeline.reports import write_run_summary


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def convert(settings: Settings, logger: logging.Logger, run_id: str) -> CensusAggregate:
    log_event(logger, "stage start", run_id=run_id, stage="aggregate", event="STAGE_START", status="ok")
    files = list_input_files(settings.input_dir)
    aggregate = aggregate_files(
        files,
        settings.columns,
        logger=logger,
        run_id=run_id,
        encoding=settings.encoding,
    )
    log_event(logger, "stage end", run_id=run_id, stage="aggregate", event="STAGE_END", status="ok")

    log_event(logger, "stage start", run_id=run_id, stage="write", event="STAGE_START", status="ok")
    written = write_area_files(
        aggregate.census,
        settings.output_dir,
        filename_template=settings.area_filename_template,
        indent=settings.indent,
    )
    written.append(
        write_taxonomy(
            aggregate.taxonomy,
            settings.output_dir,
            filename=settings.taxonomy_filename,
            indent=settings.indent,
        )
    )
    log_event(
        logger,
        f"wrote {len(written)} files to {settings.output_dir}",
        run_id=run_id,
        stage="write",
        event="STAGE_END",
        status="ok",
    )

    if settings.count_dropped_rows:
        counts = aggregate.counts
        log_event(
            logger,
            f"dropped {counts.rows_dropped_invalid_postcode} rows with invalid postcodes, "
            f"defaulted {counts.numeric_fields_defaulted} numeric fields",
            run_id=run_id,
            stage="write",
            event="RUN_COUNTS",
            status="ok",
            rows_in=counts.rows_in,
            rows_out=counts.rows_out,
        )
        write_run_summary(settings.summary_path, run_id=run_id, counts=counts, files=files)

    return aggregate


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None
    settings = load_settings(Path(args.config_dir), overlay_config_dir=overlay_config_dir)

    logger = build_logger(run_id, log_dir=settings.log_dir, level=args.log_level or settings.log_level)
    try:
        convert(settings, logger, run_id)
    except PipelineError as exc:
        log_event(
            logger,
            str(exc),
            run_id=run_id,
            event="RUN_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        return EXIT_HARD_FAIL
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return run_command(args)
    except PipelineError:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
