"""Tests for pydantic models.

Tests validate:
1. Wire names of the summary document
2. Money values serialize as JSON numbers
3. Row input aliases and defaults
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from ledgerlens.aggregation.summary import compute_summary
from ledgerlens.models.domain import Row, is_blank, normalize_direction
from ledgerlens.models.types import (
    CategoryDetail,
    InsightsRoot,
    MonthlySummary,
    RowInput,
    SummaryRequest,
)

from conftest import AS_OF


class TestSummaryDocumentSerialization:
    """Test InsightsRoot JSON shape."""

    def test_top_level_keys(self):
        data = InsightsRoot().model_dump(mode="json", by_alias=True)
        assert set(data) == {"insightSummary", "moneyInSummary", "moneyOutSummary"}

    def test_sample_document_shape(self, sample_rows):
        """Serialized sample matches the dashboard contract."""
        data = compute_summary(sample_rows, 6, AS_OF).model_dump(mode="json", by_alias=True)

        assert data["insightSummary"][0] == {
            "index": 1,
            "month": "Jul 25",
            "summary": {"moneyInTotal": 5412, "moneyOutTotal": 7000},
        }
        money_in = data["moneyInSummary"]
        assert money_in["monthRange"] == "6"
        assert money_in["summary"] == {"total": 7614}
        assert money_in["categories"]["upcoming payments"] == {
            "amount": 4311,
            "subitem": {"in process": 1101, "scheduled": 2100, "inprocess": 1110},
        }

    def test_integral_money_is_int(self):
        data = MonthlySummary(money_in_total=Decimal("1101.00")).model_dump(mode="json", by_alias=True)
        assert data["moneyInTotal"] == 1101
        assert isinstance(data["moneyInTotal"], int)

    def test_fractional_money_is_number(self):
        data = CategoryDetail(amount=Decimal("12.5"), subitem={"a": Decimal("12.5")}).model_dump(
            mode="json"
        )
        assert data == {"amount": 12.5, "subitem": {"a": 12.5}}

    def test_python_dump_keeps_decimal(self):
        data = CategoryDetail(amount=Decimal("12.50")).model_dump()
        assert data["amount"] == Decimal("12.50")
        assert data["subitem"] is None


class TestRowInput:
    """Test RowInput parsing."""

    def test_camel_case_fields(self):
        row = RowInput.model_validate(
            {
                "monthYear": "Jul 25",
                "category": "Paid",
                "subCategory": "paid",
                "amount": 5000,
                "direction": "Out",
            }
        )
        assert row.month_year == "Jul 25"
        assert row.sub_category == "paid"
        assert row.amount == Decimal("5000")
        assert row.direction == "Out"

    def test_type_alias_for_direction(self):
        row = RowInput.model_validate({"monthYear": "Jul 25", "amount": 1, "type": "Out"})
        assert row.direction == "Out"

    def test_defaults(self):
        row = RowInput.model_validate({})
        assert row.month_year == ""
        assert row.category == ""
        assert row.amount == Decimal("0")
        assert row.direction == "In"

    def test_fractional_amount_exact(self):
        row = RowInput.model_validate({"amount": "19.99"})
        assert row.amount == Decimal("19.99")

    def test_non_numeric_amount_rejected(self):
        with pytest.raises(ValidationError):
            RowInput.model_validate({"amount": "lots"})

    def test_to_row(self):
        row = RowInput(
            month_year="Aug 25",
            category="open",
            sub_category="sent",
            amount=Decimal("3000"),
            direction="Out",
        ).to_row()
        assert row == Row("Aug 25", "open", "sent", Decimal("3000"), "Out")


class TestSummaryRequest:
    """Test SummaryRequest parsing."""

    def test_defaults(self):
        request = SummaryRequest.model_validate({})
        assert request.month_range == 6
        assert request.rows is None

    def test_with_rows(self):
        request = SummaryRequest.model_validate(
            {"monthRange": 3, "rows": [{"monthYear": "Jul 25", "amount": 1}]}
        )
        assert request.month_range == 3
        assert len(request.rows) == 1


class TestDomainHelpers:
    """Test direction and blank-label helpers."""

    @pytest.mark.parametrize("value", ["in", "In", "IN", "iN"])
    def test_normalize_in(self, value):
        assert normalize_direction(value) == "in"

    @pytest.mark.parametrize("value", ["out", "Out", "OUT"])
    def test_normalize_out(self, value):
        assert normalize_direction(value) == "out"

    @pytest.mark.parametrize("value", [None, "", " in", "inbound", "transfer"])
    def test_normalize_other(self, value):
        assert normalize_direction(value) is None

    def test_is_blank(self):
        assert is_blank(None)
        assert is_blank("")
        assert is_blank(" \t")
        assert not is_blank("x")
