"""Ledger category summary aggregation.

Computes monthly money in/out totals and per-direction category
breakdowns from flat ledger rows. Malformed input degrades by omission:
unparseable month labels are dropped from the monthly series and rows with
a blank category or subcategory are left out of the category breakdowns.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable

from ledgerlens.core.months import MonthKey, parse_month_label
from ledgerlens.models.domain import (
    DIRECTION_IN,
    DIRECTION_OUT,
    Row,
    is_blank,
    normalize_direction,
)
from ledgerlens.models.types import (
    CategoryDetail,
    InsightsRoot,
    MoneySummary,
    MonthlyInsight,
    MonthlySummary,
    OverallSummary,
)

logger = logging.getLogger(__name__)


def compute_summary(
    rows: Iterable[Row] | None,
    month_range: int,
    as_of_date: date | None = None,
) -> InsightsRoot:
    """Compute the summary document for a set of ledger rows.

    No date filtering is applied: every row takes part. month_range is
    only echoed into each money summary's monthRange label and as_of_date
    is accepted for callers that track it but does not affect the result.

    Args:
        rows: Ledger rows. None is treated as an empty ledger.
        month_range: Reference month range, copied into the output labels.
        as_of_date: Reference date (unused).

    Returns:
        InsightsRoot with chronological monthly insights and money in/out
        category summaries.
    """
    rows = list(rows) if rows is not None else []
    month_range_label = str(month_range)

    insights = _compute_monthly_insights(rows)

    # Category breakdowns only see rows with both labels present
    eligible = [
        row for row in rows if not is_blank(row.category) and not is_blank(row.sub_category)
    ]
    in_rows = [row for row in eligible if normalize_direction(row.direction) == DIRECTION_IN]
    out_rows = [row for row in eligible if normalize_direction(row.direction) == DIRECTION_OUT]

    logger.debug(
        "Summarizing %d rows (%d in, %d out eligible for categories, %d months)",
        len(rows),
        len(in_rows),
        len(out_rows),
        len(insights),
    )

    return InsightsRoot(
        insight_summary=insights,
        money_in_summary=_compute_money_summary(in_rows, month_range_label),
        money_out_summary=_compute_money_summary(out_rows, month_range_label),
    )


def _compute_money_summary(rows: list[Row], month_range_label: str) -> MoneySummary:
    """Group one direction's rows by category and subcategory.

    Keys are the lowercased labels, so "Paid" and "paid" share a key.
    Internal spacing is preserved: "In process" and "inProcess" stay
    distinct.
    """
    # (category, subcategory) -> summed amount, in first-seen order
    pair_sums: dict[tuple[str, str], Decimal] = {}
    for row in rows:
        key = (row.category.lower(), row.sub_category.lower())
        pair_sums[key] = pair_sums.get(key, Decimal(0)) + row.amount

    subitems_by_category: dict[str, dict[str, Decimal]] = {}
    for (category_key, sub_category_key), amount in pair_sums.items():
        subitems_by_category.setdefault(category_key, {})[sub_category_key] = amount

    categories: dict[str, CategoryDetail] = {}
    grand_total = Decimal(0)
    for category_key, subitems in subitems_by_category.items():
        category_total = sum(subitems.values(), Decimal(0))
        grand_total += category_total
        categories[category_key] = CategoryDetail(
            amount=category_total,
            subitem=subitems if subitems else None,
        )

    return MoneySummary(
        month_range=month_range_label,
        summary=OverallSummary(total=grand_total),
        categories=categories,
    )


def _compute_monthly_insights(rows: list[Row]) -> list[MonthlyInsight]:
    """Build the chronological monthly series from all rows.

    Category labels play no part here. Each distinct non-blank month label
    yields one entry if it parses; labels that do not parse are dropped.
    """
    in_totals: dict[str, Decimal] = defaultdict(Decimal)
    out_totals: dict[str, Decimal] = defaultdict(Decimal)
    labels: list[str] = []

    for row in rows:
        if is_blank(row.month_year):
            continue
        label = row.month_year
        if label not in in_totals:
            labels.append(label)
            in_totals[label] = Decimal(0)
            out_totals[label] = Decimal(0)

        direction = normalize_direction(row.direction)
        if direction == DIRECTION_IN:
            in_totals[label] += row.amount
        elif direction == DIRECTION_OUT:
            out_totals[label] += row.amount

    dated: list[tuple[MonthKey, str]] = []
    for label in labels:
        month_key = parse_month_label(label)
        if month_key is None:
            logger.debug("Dropping unparseable month label %r", label)
            continue
        dated.append((month_key, label))

    # Stable sort keeps first-seen order for labels resolving to the same month
    dated.sort(key=lambda item: item[0])

    return [
        MonthlyInsight(
            index=index,
            month=label,
            summary=MonthlySummary(
                money_in_total=in_totals[label],
                money_out_total=out_totals[label],
            ),
        )
        for index, (_, label) in enumerate(dated, start=1)
    ]
