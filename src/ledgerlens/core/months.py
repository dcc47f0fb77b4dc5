"""Month label parsing.

Labels look like "Jul 25": a three-letter English month abbreviation, one
space, and a two-digit year. Parsing goes through a fixed table so the
result never depends on the process locale.
"""

from __future__ import annotations

from typing import NamedTuple

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_MONTH_NUMBERS = {abbr.lower(): number for number, abbr in enumerate(MONTH_ABBREVIATIONS, start=1)}

# Two-digit years resolve into the century window ending at this year
TWO_DIGIT_YEAR_MAX = 2029


class MonthKey(NamedTuple):
    """Sortable (year, month) reference for a month label."""

    year: int
    month: int


def expand_two_digit_year(two_digit_year: int) -> int:
    """Expand a 0-99 year into a four-digit year.

    Years above TWO_DIGIT_YEAR_MAX % 100 fall into the previous century,
    so with the default window 25 -> 2025 and 30 -> 1930.

    Args:
        two_digit_year: Year in the range 0-99.

    Returns:
        Four-digit year.
    """
    year = (TWO_DIGIT_YEAR_MAX // 100) * 100 + two_digit_year
    if year > TWO_DIGIT_YEAR_MAX:
        year -= 100
    return year


def parse_month_label(label: str | None) -> MonthKey | None:
    """Parse a "MMM yy" label into a MonthKey.

    The abbreviation is matched case-insensitively. Anything other than
    exactly "<abbr> <two digits>" yields None.

    Args:
        label: Month label such as "Jul 25".

    Returns:
        MonthKey, or None when the label cannot be parsed.
    """
    if not isinstance(label, str):
        return None

    parts = label.split(" ")
    if len(parts) != 2:
        return None

    abbr, year_text = parts
    month = _MONTH_NUMBERS.get(abbr.lower())
    if month is None:
        return None

    if len(year_text) != 2 or not (year_text.isascii() and year_text.isdigit()):
        return None

    return MonthKey(year=expand_two_digit_year(int(year_text)), month=month)
