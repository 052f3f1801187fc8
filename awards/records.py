from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple

import pandas as pd

WINNER_TOKENS = frozenset({"1", "true", "winner", "yes"})

_LEADING_YEAR = re.compile(r"^\d{4}")
_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


@dataclass(frozen=True)
class CanonicalRecord:
    """One normalized nomination row."""

    year: Optional[str]
    year_parsed: Optional[int]
    decade: Optional[int]
    winner_flag: int
    cat: Optional[str]
    category: Optional[str] = None
    award_class: Optional[str] = None
    film: Optional[str] = None
    name: Optional[str] = None

    @property
    def is_winner(self) -> bool:
        return self.winner_flag == 1


def _clean_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    s = str(value).strip()
    return s or None


def parse_year(value: Any) -> Optional[int]:
    """Parse '1939', '2003/2004' or ' 1939.0 ' into an int year.

    A leading 4-digit run wins over numeric coercion of the whole string.
    """
    s = _clean_str(value)
    if s is None:
        return None
    match = _LEADING_YEAR.match(s)
    if match:
        return int(match.group(0))
    if not _NUMBER.match(s):
        return None
    num = float(s)
    if not math.isfinite(num) or not num.is_integer():
        return None
    return int(num)


def decade_of(year: Optional[int]) -> Optional[int]:
    if year is None:
        return None
    return year // 10 * 10


def winner_flag(value: Any) -> int:
    s = _clean_str(value)
    if s is None:
        return 0
    return 1 if s.lower() in WINNER_TOKENS else 0


def normalize(raw: Mapping[str, Any]) -> CanonicalRecord:
    year_parsed = parse_year(raw.get("Year"))
    category = _clean_str(raw.get("Category"))
    canonical = _clean_str(raw.get("CanonicalCategory"))
    year = raw.get("Year")
    return CanonicalRecord(
        year=None if _clean_str(year) is None else str(year),
        year_parsed=year_parsed,
        decade=decade_of(year_parsed),
        winner_flag=winner_flag(raw.get("Winner")),
        cat=canonical if canonical else category,
        category=category,
        award_class=_clean_str(raw.get("Class")),
        film=_clean_str(raw.get("Film")),
        name=_clean_str(raw.get("Name")),
    )


def normalize_rows(rows: Iterable[Mapping[str, Any]]) -> Tuple[CanonicalRecord, ...]:
    """Normalize every raw row; the result is the read-only session collection."""
    return tuple(normalize(r) for r in rows)
