"""French date parsing and formatting for WordPress post dates."""

from __future__ import annotations

import datetime as dt
from typing import Optional

FRENCH_MONTHS = {
    1: "janvier",
    2: "février",
    3: "mars",
    4: "avril",
    5: "mai",
    6: "juin",
    7: "juillet",
    8: "août",
    9: "septembre",
    10: "octobre",
    11: "novembre",
    12: "décembre",
}
FRENCH_MONTH_TO_NUM = {name: num for num, name in FRENCH_MONTHS.items()}


def _leading_int(token: str) -> int:
    """Integer prefix of a token, 0 when there is none ("1er" -> 1)."""
    digits = ""
    for char in token:
        if char not in "0123456789":
            break
        digits += char
    return int(digits) if digits else 0


def _month_number(token: str) -> int:
    name = token.lower()
    month = FRENCH_MONTH_TO_NUM.get(name, 0)
    if month:
        return month
    for candidate, num in FRENCH_MONTH_TO_NUM.items():
        if name.startswith(candidate[:3]):
            return num
    return 0


def parse_french_date(value: Optional[str]) -> Optional[dt.date]:
    """Parse ``"5 mars 2020"`` style dates; returns ``None`` on any failure."""
    if not value:
        return None
    parts = value.split()
    if len(parts) < 3:
        return None
    day = _leading_int(parts[0])
    month = _month_number(parts[1])
    year = _leading_int(parts[2])
    if not day or not month or not year:
        return None
    try:
        return dt.date(year, month, day)
    except ValueError:
        return None


def format_french_date(value: Optional[dt.date]) -> str:
    if value is None:
        return ""
    return f"{value.day} {FRENCH_MONTHS[value.month]} {value.year}"
