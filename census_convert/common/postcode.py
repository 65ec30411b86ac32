"""UK unit postcode decomposition and validation."""

from __future__ import annotations

import re
from dataclasses import dataclass

UK_UNIT_POSTCODE_RE = re.compile(r"^([A-Z]{1,2})(\d[A-Z\d]?)\s*(\d[A-Z]{2})$", re.ASCII)


@dataclass(frozen=True)
class ParsedPostcode:
    valid: bool
    postcode: str | None = None
    outcode: str | None = None
    incode: str | None = None
    area: str | None = None


INVALID_POSTCODE = ParsedPostcode(valid=False)


def parse_postcode(raw: str | None) -> ParsedPostcode:
    if raw is None:
        return INVALID_POSTCODE

    match = UK_UNIT_POSTCODE_RE.match(raw.strip().upper())
    if not match:
        return INVALID_POSTCODE

    area, district, incode = match.groups()
    outcode = f"{area}{district}"
    return ParsedPostcode(
        valid=True,
        postcode=f"{outcode}{incode}",
        outcode=outcode,
        incode=incode,
        area=area,
    )


def parse_postcode_with_retry(raw: str | None) -> tuple[ParsedPostcode, bool]:
    """Parse ``raw``, retrying once without its final character.

    Some extracts carry a stray trailing character on the postcode field.
    The second element of the result is True when the trimmed retry was the
    parse that succeeded.
    """
    parsed = parse_postcode(raw)
    if parsed.valid or not raw:
        return parsed, False

    retried = parse_postcode(raw[:-1])
    return retried, retried.valid
