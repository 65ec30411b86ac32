"""Build the per-area census mapping and the OAC taxonomy from raw rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from census_convert.common.config_loader import ColumnLayout
from census_convert.common.constants import (
    COLUMN_AREA_DEPRIVATION,
    COLUMN_AREA_NAME,
    COLUMN_FEMALES,
    COLUMN_GROUP_CODE,
    COLUMN_HOUSEHOLDS,
    COLUMN_MALES,
    COLUMN_POSTCODE,
    COLUMN_POSTCODE_DEPRIVATION,
    COLUMN_SUBGROUP_CODE,
    COLUMN_SUBGROUP_NAME,
    COLUMN_SUPERGROUP_CODE,
    COLUMN_SUPERGROUP_NAME,
    COLUMN_TOTAL_PERSONS,
    FLOAT_COLUMNS,
    INTEGER_COLUMNS,
)
from census_convert.common.logging import log_event
from census_convert.common.models import CensusData, CensusRecord, OACTaxonomy, RunCounts
from census_convert.common.numeric import float_or_zero, int_or_zero, parse_leading_float, parse_leading_int
from census_convert.common.postcode import ParsedPostcode, parse_postcode_with_retry
from census_convert.pipeline.parse_rows import read_rows


def build_census_record(row: dict[str, str]) -> CensusRecord:
    return CensusRecord(
        population=int_or_zero(row.get(COLUMN_TOTAL_PERSONS)),
        females=int_or_zero(row.get(COLUMN_FEMALES)),
        males=int_or_zero(row.get(COLUMN_MALES)),
        households=int_or_zero(row.get(COLUMN_HOUSEHOLDS)),
        area_name=row.get(COLUMN_AREA_NAME, ""),
        oac_supergroup_code=row.get(COLUMN_SUPERGROUP_CODE, ""),
        oac_group_code=row.get(COLUMN_GROUP_CODE, ""),
        oac_subgroup_code=row.get(COLUMN_SUBGROUP_CODE, ""),
        area_deprivation_score=float_or_zero(row.get(COLUMN_AREA_DEPRIVATION)),
        postcode_deprivation_score=float_or_zero(row.get(COLUMN_POSTCODE_DEPRIVATION)),
    )


def count_defaulted_numeric_fields(row: dict[str, str]) -> int:
    """Numeric cells that hold text but fell back to zero."""
    defaulted = 0
    for column in INTEGER_COLUMNS:
        value = row.get(column)
        if value and parse_leading_int(value) is None:
            defaulted += 1
    for column in FLOAT_COLUMNS:
        value = row.get(column)
        if value and parse_leading_float(value) is None:
            defaulted += 1
    return defaulted


@dataclass
class CensusAggregate:
    census: CensusData = field(default_factory=dict)
    taxonomy: OACTaxonomy = field(default_factory=dict)
    counts: RunCounts = field(default_factory=RunCounts)

    def add_taxonomy(self, row: dict[str, str]) -> None:
        supergroup = self.taxonomy.setdefault(
            row.get(COLUMN_SUPERGROUP_CODE, ""),
            {"name": row.get(COLUMN_SUPERGROUP_NAME, ""), "children": {}},
        )
        group = supergroup["children"].setdefault(row.get(COLUMN_GROUP_CODE, ""), {"children": {}})
        group["children"].setdefault(row.get(COLUMN_SUBGROUP_CODE, ""), row.get(COLUMN_SUBGROUP_NAME, ""))

    def add_record(self, parsed: ParsedPostcode, record: CensusRecord) -> bool:
        """Store ``record`` under its postcode; True when the area is new."""
        is_new_area = parsed.area not in self.census
        outcodes = self.census.setdefault(parsed.area, {})
        outcodes.setdefault(parsed.outcode, {})[parsed.postcode] = record
        if is_new_area:
            self.counts.areas += 1
        return is_new_area

    def add_row(self, row: dict[str, str]) -> tuple[ParsedPostcode, bool]:
        """Fold one raw row in.

        Rows whose postcode stays invalid after the trim retry are dropped
        without raising. Returns the parse and whether the row opened a new
        area.
        """
        self.counts.rows_in += 1
        parsed, retried = parse_postcode_with_retry(row.get(COLUMN_POSTCODE))
        if not parsed.valid:
            self.counts.rows_dropped_invalid_postcode += 1
            return parsed, False
        if retried:
            self.counts.rows_recovered_by_trim += 1

        self.add_taxonomy(row)
        self.counts.numeric_fields_defaulted += count_defaulted_numeric_fields(row)
        is_new_area = self.add_record(parsed, build_census_record(row))
        self.counts.rows_out += 1
        return parsed, is_new_area


def aggregate_files(
    paths: Iterable[Path],
    layout: ColumnLayout,
    *,
    logger: logging.Logger,
    run_id: str,
    encoding: str = "utf-8",
    aggregate: CensusAggregate | None = None,
) -> CensusAggregate:
    aggregate = aggregate if aggregate is not None else CensusAggregate()

    for path in paths:
        aggregate.counts.files += 1
        log_event(
            logger,
            f"processing {path}",
            run_id=run_id,
            stage="aggregate",
            source=str(path),
            event="FILE_START",
            status="ok",
        )
        for row in read_rows(path, layout, encoding=encoding):
            parsed, is_new_area = aggregate.add_row(row)
            if is_new_area:
                log_event(
                    logger,
                    f"new area {parsed.area}",
                    run_id=run_id,
                    stage="aggregate",
                    source=str(path),
                    area=parsed.area,
                    event="AREA_NEW",
                    status="ok",
                )

    return aggregate
