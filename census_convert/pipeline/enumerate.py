"""Input file discovery."""

from __future__ import annotations

from pathlib import Path

from census_convert.common.errors import StageError


def list_input_files(input_dir: Path) -> list[Path]:
    """Every regular file in ``input_dir``, in directory-listing order.

    No extension filter is applied; anything present is read as CSV.
    """
    if not input_dir.is_dir():
        raise StageError(f"Missing input directory: {input_dir}")
    return [path for path in input_dir.iterdir() if path.is_file()]
