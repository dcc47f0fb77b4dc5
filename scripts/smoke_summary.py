#!/usr/bin/env python3
"""Smoke test for the sample ledger summary.

Computes the summary of the built-in sample ledger, prints it as JSON and
checks that its totals reconcile.

Usage:
    python scripts/smoke_summary.py [--month-range N]

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import argparse
import json
import sys
from decimal import Decimal
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from ledgerlens.aggregation.summary import compute_summary  # noqa: E402
from ledgerlens.config import Settings  # noqa: E402
from ledgerlens.data.sample import sample_rows  # noqa: E402
from ledgerlens.models.types import InsightsRoot, MoneySummary  # noqa: E402


def check_reconciles(name: str, money_summary: MoneySummary) -> bool:
    """Check total == sum of category amounts == sum of subitems."""
    category_sum = sum((c.amount for c in money_summary.categories.values()), Decimal(0))
    subitem_sum = sum(
        (v for c in money_summary.categories.values() for v in (c.subitem or {}).values()),
        Decimal(0),
    )
    total = money_summary.summary.total

    if total == category_sum == subitem_sum:
        print(f"OK: {name} reconciles (total={total})")
        return True

    print(f"FAIL: {name} total={total} categories={category_sum} subitems={subitem_sum}")
    return False


def check_months_ordered(root: InsightsRoot) -> bool:
    """Check that monthly insights are indexed 1..N."""
    indexes = [insight.index for insight in root.insight_summary]
    if indexes == list(range(1, len(indexes) + 1)):
        months = ", ".join(insight.month for insight in root.insight_summary)
        print(f"OK: {len(indexes)} months in order: {months}")
        return True

    print(f"FAIL: Unexpected month indexes: {indexes}")
    return False


def main() -> int:
    """Run all smoke checks."""
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Print the sample ledger summary")
    parser.add_argument("--month-range", type=int, default=settings.default_month_range)
    args = parser.parse_args()

    root = compute_summary(sample_rows(), args.month_range, settings.as_of_date)
    print(json.dumps(root.model_dump(mode="json", by_alias=True), indent=2))

    results = [
        check_months_ordered(root),
        check_reconciles("moneyInSummary", root.money_in_summary),
        check_reconciles("moneyOutSummary", root.money_out_summary),
    ]

    if all(results):
        print("All checks passed")
        return 0

    print("Some checks failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
