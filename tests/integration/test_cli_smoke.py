from pathlib import Path

import pytest

from census_convert.cli import main, parse_args, run_command
from census_convert.common.constants import EXIT_HARD_FAIL
from census_convert.common.fs import read_json


def _write_config(config_dir: Path, data_dir: Path, *, count_dropped_rows: bool = False) -> None:
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "census.yml").write_text(
        f"""paths:
  input_dir: {(data_dir / 'rawdata').as_posix()}
  output_dir: {(data_dir / 'output').as_posix()}
  encoding: utf-8
columns:
  expected_width: 31
  merge_index: 13
  merge_separator: ", "
output:
  area_filename_template: census-{{area}}.json
  taxonomy_filename: oac.json
  indent: 2
reporting:
  count_dropped_rows: {'true' if count_dropped_rows else 'false'}
  summary_path: {(data_dir / 'output' / 'reports' / 'run_summary.json').as_posix()}
logging:
  level: INFO
  log_dir: null
""",
        encoding="utf-8",
    )


@pytest.mark.integration
def test_cli_generates_area_and_taxonomy_files(tmp_path: Path, write_census_csv, scenario_row):
    data_dir = tmp_path / "data"
    config_dir = tmp_path / "config"
    _write_config(config_dir, data_dir)
    write_census_csv(
        data_dir / "rawdata" / "scotland.csv",
        [
            scenario_row,
            dict(scenario_row, PCD="IV327LJ", LSOA_DZ_Name="Mosstodloch, Portgordon and seaward - 01"),
            dict(scenario_row, PCD="garbage"),
        ],
    )
    write_census_csv(data_dir / "rawdata" / "england.csv", [dict(scenario_row, PCD="M1 1AE")])

    exit_code = run_command(parse_args(["--config-dir", str(config_dir), "--run-id", "run-test"]))

    assert exit_code == 0
    output_dir = data_dir / "output"
    assert sorted(path.name for path in output_dir.glob("*.json")) == [
        "census-AB.json",
        "census-IV.json",
        "census-M.json",
        "oac.json",
    ]
    assert read_json(output_dir / "census-AB.json")["AB10"]["AB101AA"]["population"] == 1000
    iv = read_json(output_dir / "census-IV.json")
    assert iv["IV32"]["IV327LJ"]["areaName"] == "Mosstodloch, Portgordon and seaward - 01"
    assert iv["IV32"]["IV327LJ"]["areaDeprivationScore"] == -2.1
    assert read_json(output_dir / "oac.json") == {
        "1": {"name": "Rural", "children": {"1a": {"children": {"1a1": "Farms"}}}},
    }
    assert not (output_dir / "reports").exists()


@pytest.mark.integration
def test_cli_writes_run_summary_when_counting_enabled(tmp_path: Path, write_census_csv, scenario_row):
    data_dir = tmp_path / "data"
    config_dir = tmp_path / "config"
    _write_config(config_dir, data_dir, count_dropped_rows=True)
    write_census_csv(
        data_dir / "rawdata" / "extract.csv",
        [scenario_row, dict(scenario_row, PCD="???", Total_Persons="lots")],
    )

    assert run_command(parse_args(["--config-dir", str(config_dir), "--run-id", "run-count"])) == 0

    summary = read_json(data_dir / "output" / "reports" / "run_summary.json")
    assert summary["run_id"] == "run-count"
    assert summary["status"] == "partial"
    assert summary["totals"]["rows_in"] == 2
    assert summary["totals"]["rows_out"] == 1
    assert summary["totals"]["rows_dropped_invalid_postcode"] == 1


@pytest.mark.integration
def test_cli_missing_input_directory_is_hard_fail(tmp_path: Path):
    data_dir = tmp_path / "data"
    config_dir = tmp_path / "config"
    _write_config(config_dir, data_dir)

    assert main(["--config-dir", str(config_dir), "--run-id", "run-missing"]) == EXIT_HARD_FAIL
    assert not (data_dir / "output").exists()
