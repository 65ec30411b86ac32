"""Split raw census lines into header-keyed rows."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

from census_convert.common.config_loader import ColumnLayout
from census_convert.common.constants import EXPECTED_COLUMN_COUNT, PLACENAME_COLUMN_INDEX
from census_convert.common.fs import read_lines

_CELL_SEPARATOR_RE = re.compile(r"\s*,\s*")


def split_cells(line: str) -> list[str]:
    return [cell.rstrip("\r") for cell in _CELL_SEPARATOR_RE.split(line)]


def realign_columns(
    cells: list[str],
    *,
    expected_width: int = EXPECTED_COLUMN_COUNT,
    merge_index: int = PLACENAME_COLUMN_INDEX,
    separator: str = ", ",
) -> list[str]:
    """Fold surplus cells back into the placename column.

    A placename such as "Mosstodloch, Portgordon and seaward - 01" is not
    quoted in the source extracts, so the split produces one cell too many
    per embedded comma. Only that one column is assumed to be contaminated.
    """
    out = list(cells)
    while len(out) > expected_width:
        out[merge_index] = f"{out[merge_index]}{separator}{out[merge_index + 1]}"
        del out[merge_index + 1]
    return out


def row_to_record(header: list[str], cells: list[str]) -> dict[str, str]:
    return dict(zip(header, cells))


def read_rows(path: Path, layout: ColumnLayout, encoding: str = "utf-8") -> Iterator[dict[str, str]]:
    lines = read_lines(path, encoding=encoding)
    header = split_cells(lines[0])
    for line in lines[1:]:
        if not line.strip("\r"):
            continue
        cells = realign_columns(
            split_cells(line),
            expected_width=layout.expected_width,
            merge_index=layout.merge_index,
            separator=layout.merge_separator,
        )
        yield row_to_record(header, cells)
