"""Domain models for Ledgerlens.

Pure Python dataclasses representing ledger entries. These are independent
of pydantic and are what the aggregation layer consumes.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

Direction = Literal["in", "out"]

DIRECTION_IN: Direction = "in"
DIRECTION_OUT: Direction = "out"


@dataclass(frozen=True)
class Row:
    """A single ledger entry.

    Labels are kept exactly as supplied; normalization happens during
    aggregation.
    """

    month_year: str | None
    category: str | None
    sub_category: str | None
    amount: Decimal
    direction: str | None = "In"


def normalize_direction(value: str | None) -> Direction | None:
    """Map a raw direction label to "in"/"out", case-insensitively.

    Returns None for anything else, including surrounding whitespace.
    """
    if value is None:
        return None
    lowered = value.lower()
    if lowered == DIRECTION_IN:
        return DIRECTION_IN
    if lowered == DIRECTION_OUT:
        return DIRECTION_OUT
    return None


def is_blank(value: str | None) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()
