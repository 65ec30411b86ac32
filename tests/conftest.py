from __future__ import annotations

from pathlib import Path

import pytest

CENSUS_HEADER = [
    "PCD",
    "OA_SA_Code",
    "OAC_Supergroup_Code",
    "OAC_Supergroup_Name",
    "OAC_Group_Code",
    "OAC_Group_Name",
    "OAC_Subgroup_Code",
    "OAC_Subgroup_Name",
    "Total_Persons",
    "Females",
    "Males",
    "Occupied_Households",
    "LSOA_DZ_Code",
    "LSOA_DZ_Name",
    "LSOA_DZ_Townsend_Deprivation_Score",
    "OA_SA_Townsend_Deprivation_Score",
    "Local_Authority_Code",
    "Local_Authority_Name",
    "Ward_Code",
    "Ward_Name",
    "Parliamentary_Constituency_Code",
    "Parliamentary_Constituency_Name",
    "Region_Code",
    "Region_Name",
    "Country_Code",
    "Country_Name",
    "Easting",
    "Northing",
    "Latitude",
    "Longitude",
    "Rural_Urban_Classification",
]

SCENARIO_ROW = {
    "PCD": "AB101AA",
    "Total_Persons": "1000",
    "Females": "520",
    "Males": "480",
    "Occupied_Households": "400",
    "OAC_Supergroup_Code": "1",
    "OAC_Supergroup_Name": "Rural",
    "OAC_Group_Code": "1a",
    "OAC_Subgroup_Code": "1a1",
    "OAC_Subgroup_Name": "Farms",
    "LSOA_DZ_Name": "Example Area",
    "LSOA_DZ_Townsend_Deprivation_Score": "-2.1",
    "OA_SA_Townsend_Deprivation_Score": "-1.8",
}


@pytest.fixture
def census_line():
    def _build(**values: str) -> str:
        return ",".join(values.get(column, "") for column in CENSUS_HEADER)

    return _build


@pytest.fixture
def write_census_csv(census_line):
    def _write(path: Path, rows: list[dict[str, str]], *, newline: str = "\n") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = [",".join(CENSUS_HEADER)] + [census_line(**row) for row in rows]
        path.write_bytes((newline.join(lines) + newline).encode("utf-8"))
        return path

    return _write


@pytest.fixture
def scenario_row() -> dict[str, str]:
    return dict(SCENARIO_ROW)
