"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from census_convert.common.errors import ConfigError

SECTION_KEYS = {
    "paths": {"input_dir", "output_dir", "encoding"},
    "columns": {"expected_width", "merge_index", "merge_separator"},
    "output": {"area_filename_template", "taxonomy_filename", "indent"},
    "reporting": {"count_dropped_rows", "summary_path"},
    "logging": {"level", "log_dir"},
}
LOG_LEVELS = {"DEBUG", "INFO", "WARN", "WARNING", "ERROR"}


def _assert_mapping(obj, ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_int(value, ctx: str, *, minimum: int = 0) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigError(f"{ctx} must be an integer >= {minimum}")


def validate_census_config(cfg, *, allow_unknown: bool = False) -> dict:
    _assert_mapping(cfg, "census config")
    _assert_required_keys(cfg, set(SECTION_KEYS), "census config")
    _assert_no_unknown_keys(cfg, set(SECTION_KEYS), "census config", allow_unknown)

    for section, keys in SECTION_KEYS.items():
        _assert_mapping(cfg[section], section)
        _assert_required_keys(cfg[section], keys, section)
        _assert_no_unknown_keys(cfg[section], keys, section, allow_unknown)

    columns = cfg["columns"]
    _assert_int(columns["expected_width"], "columns.expected_width", minimum=1)
    _assert_int(columns["merge_index"], "columns.merge_index")
    if columns["merge_index"] + 1 >= columns["expected_width"]:
        raise ConfigError("columns.merge_index must leave a following column inside expected_width")

    _assert_int(cfg["output"]["indent"], "output.indent")
    if "{area}" not in str(cfg["output"]["area_filename_template"]):
        raise ConfigError("output.area_filename_template must contain {area}")

    if not isinstance(cfg["reporting"]["count_dropped_rows"], bool):
        raise ConfigError("reporting.count_dropped_rows must be a boolean")

    if str(cfg["logging"]["level"]).upper() not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(sorted(LOG_LEVELS))}")

    return cfg
