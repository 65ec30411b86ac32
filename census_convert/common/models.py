"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

# Field name -> JSON key in the published census files.
RECORD_JSON_KEYS = {
    "population": "population",
    "females": "females",
    "males": "males",
    "households": "households",
    "area_name": "areaName",
    "oac_supergroup_code": "OACSupergroupCode",
    "oac_group_code": "OACGroupCode",
    "oac_subgroup_code": "OACSubgroupCode",
    "area_deprivation_score": "areaDeprivationScore",
    "postcode_deprivation_score": "postcodeDeprivationScore",
}


@dataclass(frozen=True)
class CensusRecord:
    population: int
    females: int
    males: int
    households: int
    area_name: str
    oac_supergroup_code: str
    oac_group_code: str
    oac_subgroup_code: str
    area_deprivation_score: float
    postcode_deprivation_score: float

    def to_dict(self) -> dict[str, Any]:
        return {RECORD_JSON_KEYS[name]: value for name, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "CensusRecord":
        return cls(**{name: payload[key] for name, key in RECORD_JSON_KEYS.items()})


CensusData = dict[str, dict[str, dict[str, CensusRecord]]]
OACTaxonomy = dict[str, dict[str, Any]]


@dataclass
class RunCounts:
    files: int = 0
    rows_in: int = 0
    rows_out: int = 0
    rows_dropped_invalid_postcode: int = 0
    rows_recovered_by_trim: int = 0
    numeric_fields_defaulted: int = 0
    areas: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)
