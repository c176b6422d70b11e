# habitgrid/dates.py
"""Day string helpers.

Two forms coexist:
  - display   `DD/MM` (public boundary: add_day, day_exists)
  - canonical `MM-DD` (storage and sorting; month-major so a plain string
    sort is chronological within a year)

Conversion is purely syntactic. No calendar validation is done, so "31/02"
converts to "02-31" without complaint.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from .errors import InvalidDate

DISPLAY_SEP = "/"
CANONICAL_SEP = "-"

_DISPLAY_RE = re.compile(r"^(\d{2})/(\d{2})$")
_CANONICAL_RE = re.compile(r"^(\d{2})-(\d{2})$")


def _split2(s: str, sep: str) -> Tuple[str, str]:
    # Mirrors positional destructuring: missing fields come back empty,
    # anything past the second field is ignored.
    parts = s.split(sep)
    first = parts[0]
    second = parts[1] if len(parts) > 1 else ""
    return first, second


def to_canonical(date: str) -> str:
    """`DD/MM` -> `MM-DD` (permissive)."""
    day, month = _split2(date, DISPLAY_SEP)
    return month + CANONICAL_SEP + day


def to_display(date: str) -> str:
    """`MM-DD` -> `DD/MM` (permissive)."""
    month, day = _split2(date, CANONICAL_SEP)
    return day + DISPLAY_SEP + month


def parse_display_date(date: str) -> Tuple[str, str]:
    """Return (day, month) from a display date; raise InvalidDate if there is no `/`."""
    if not isinstance(date, str) or DISPLAY_SEP not in date:
        raise InvalidDate(f"Invalid DD/MM: {date!r}")
    return _split2(date, DISPLAY_SEP)


def parse_canonical_date(date: str) -> Tuple[str, str]:
    """Return (month, day) from a canonical date; raise InvalidDate if there is no `-`."""
    if not isinstance(date, str) or CANONICAL_SEP not in date:
        raise InvalidDate(f"Invalid MM-DD: {date!r}")
    return _split2(date, CANONICAL_SEP)


def is_display_date(s: object) -> bool:
    return isinstance(s, str) and bool(_DISPLAY_RE.match(s))


def is_canonical_date(s: object) -> bool:
    return isinstance(s, str) and bool(_CANONICAL_RE.match(s))


def sort_days(days: Iterable[str]) -> List[str]:
    return sorted(days)


__all__ = [
    "CANONICAL_SEP",
    "DISPLAY_SEP",
    "is_canonical_date",
    "is_display_date",
    "parse_canonical_date",
    "parse_display_date",
    "sort_days",
    "to_canonical",
    "to_display",
]
