"""Lenient numeric coercion for census count and score fields."""

from __future__ import annotations

import math
import re

_LEADING_INT_RE = re.compile(r"^[+-]?\d+", re.ASCII)
_LEADING_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_leading_int(value: str | None) -> int | None:
    if value is None:
        return None
    match = _LEADING_INT_RE.match(value.strip())
    if not match:
        return None
    return int(match.group(0))


def parse_leading_float(value: str | None) -> float | None:
    if value is None:
        return None
    match = _LEADING_FLOAT_RE.match(value.strip())
    if not match:
        return None
    parsed = float(match.group(0))
    if not math.isfinite(parsed):
        return None
    return parsed


def int_or_zero(value: str | None) -> int:
    parsed = parse_leading_int(value)
    return 0 if parsed is None else parsed


def float_or_zero(value: str | None) -> float:
    parsed = parse_leading_float(value)
    return 0.0 if parsed is None else parsed
