"""Sample ledger served by GET /api/categorysummary.

Three months of money in and money out entries with mixed label casing.
"""

from __future__ import annotations

from decimal import Decimal

from ledgerlens.models.domain import Row

SAMPLE_ROWS: tuple[Row, ...] = (
    # Money in
    Row("Jul 25", "Processed", "Processed", Decimal("1101"), "In"),
    Row("Jul 25", "upcoming payments", "In process", Decimal("1101"), "In"),
    Row("Jul 25", "upcoming payments", "scheduled", Decimal("2100"), "In"),
    Row("Jul 25", "upcoming payments", "inProcess", Decimal("1110"), "In"),
    Row("Aug 25", "Processed", "Processed", Decimal("1101"), "In"),
    Row("Sep 25", "Processed", "Processed", Decimal("1101"), "In"),
    # Money out
    Row("Jul 25", "paid", "paid", Decimal("5000"), "Out"),
    Row("Jul 25", "inprocess", "inprocess", Decimal("2000"), "Out"),
    Row("Aug 25", "open", "sent", Decimal("3000"), "Out"),
    Row("Aug 25", "open", "overDue", Decimal("1000"), "Out"),
    Row("Sep 25", "paid", "paid", Decimal("1500"), "Out"),
)


def sample_rows() -> list[Row]:
    """Return a fresh list of the sample ledger rows."""
    return list(SAMPLE_ROWS)
