"""Per-area census JSON and OAC taxonomy export."""

from __future__ import annotations

from pathlib import Path

from census_convert.common.fs import read_json, write_json
from census_convert.common.models import CensusData, CensusRecord, OACTaxonomy

DEFAULT_AREA_FILENAME_TEMPLATE = "census-{area}.json"
DEFAULT_TAXONOMY_FILENAME = "oac.json"


def _serialize_area(outcodes: dict[str, dict[str, CensusRecord]]) -> dict:
    return {
        outcode: {postcode: record.to_dict() for postcode, record in postcodes.items()}
        for outcode, postcodes in outcodes.items()
    }


def write_area_files(
    census: CensusData,
    output_dir: Path,
    *,
    filename_template: str = DEFAULT_AREA_FILENAME_TEMPLATE,
    indent: int = 2,
) -> list[Path]:
    written: list[Path] = []
    for area, outcodes in census.items():
        out_path = output_dir / filename_template.format(area=area)
        write_json(out_path, _serialize_area(outcodes), indent=indent, sort_keys=False)
        written.append(out_path)
    return written


def read_area_file(path: Path) -> dict[str, dict[str, CensusRecord]]:
    payload = read_json(path)
    return {
        outcode: {postcode: CensusRecord.from_dict(record) for postcode, record in postcodes.items()}
        for outcode, postcodes in payload.items()
    }


def write_taxonomy(
    taxonomy: OACTaxonomy,
    output_dir: Path,
    *,
    filename: str = DEFAULT_TAXONOMY_FILENAME,
    indent: int = 2,
) -> Path:
    out_path = output_dir / filename
    write_json(out_path, taxonomy, indent=indent, sort_keys=False)
    return out_path
