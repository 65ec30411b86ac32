"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from census_convert.common.errors import ConfigError
from census_convert.common.fs import read_yaml
from census_convert.common.schema import validate_census_config

CONFIG_FILENAME = "census.yml"


@dataclass(frozen=True)
class ColumnLayout:
    expected_width: int
    merge_index: int
    merge_separator: str


@dataclass(frozen=True)
class Settings:
    input_dir: Path
    output_dir: Path
    encoding: str
    columns: ColumnLayout
    area_filename_template: str
    taxonomy_filename: str
    indent: int
    count_dropped_rows: bool
    summary_path: Path
    log_level: str
    log_dir: Path | None


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Missing config file: {path}")
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    if overlay is None:
        return base
    return _deep_merge(base, overlay)


def settings_from_config(cfg: dict) -> Settings:
    log_dir = cfg["logging"]["log_dir"]
    return Settings(
        input_dir=Path(cfg["paths"]["input_dir"]),
        output_dir=Path(cfg["paths"]["output_dir"]),
        encoding=cfg["paths"]["encoding"],
        columns=ColumnLayout(
            expected_width=cfg["columns"]["expected_width"],
            merge_index=cfg["columns"]["merge_index"],
            merge_separator=cfg["columns"]["merge_separator"],
        ),
        area_filename_template=cfg["output"]["area_filename_template"],
        taxonomy_filename=cfg["output"]["taxonomy_filename"],
        indent=cfg["output"]["indent"],
        count_dropped_rows=cfg["reporting"]["count_dropped_rows"],
        summary_path=Path(cfg["reporting"]["summary_path"]),
        log_level=str(cfg["logging"]["level"]).upper(),
        log_dir=Path(log_dir) if log_dir else None,
    )


def load_settings(
    config_dir: Path,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> Settings:
    overlay_path = None
    if overlay_config_dir is not None:
        overlay_path = overlay_config_dir / CONFIG_FILENAME
    cfg = _load_yaml_with_overlay(config_dir / CONFIG_FILENAME, overlay_path)
    return settings_from_config(validate_census_config(cfg, allow_unknown=allow_unknown))
