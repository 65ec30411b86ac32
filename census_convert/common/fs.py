"""Filesystem helpers."""

from __future__ import annotations

import json
from pathlib import Path


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_yaml(path: Path):
    import yaml

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_json(path: Path, payload, *, indent: int = 2, sort_keys: bool = True) -> None:
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=indent, sort_keys=sort_keys)
        f.write("\n")


def read_json(path: Path):
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def read_lines(path: Path, encoding: str = "utf-8", errors: str = "replace") -> list[str]:
    """Return the file split on newlines, keeping any carriage returns.

    Undecodable bytes become U+FFFD by default so one stray byte in an extract
    does not abort the run.
    """
    with path.open("r", encoding=encoding, errors=errors, newline="") as f:
        return f.read().split("\n")
