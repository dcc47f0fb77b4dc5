"""Pydantic models for the Ledgerlens API.

Field aliases are the wire names of the summary document and must not
change: dashboards consume them directly.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PlainSerializer

from ledgerlens.models.domain import Row


def _money_to_json(value: Decimal) -> int | float:
    """Render a Decimal as a JSON number, integral values without a fraction."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Exact in memory, a plain number on the wire
Money = Annotated[Decimal, PlainSerializer(_money_to_json, when_used="json")]


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class MonthlySummary(_WireModel):
    """Money in/out totals for one month."""

    money_in_total: Money = Field(default=Decimal(0), alias="moneyInTotal")
    money_out_total: Money = Field(default=Decimal(0), alias="moneyOutTotal")


class MonthlyInsight(_WireModel):
    """One chronologically indexed month."""

    index: int
    month: str
    summary: MonthlySummary


class OverallSummary(_WireModel):
    """Grand total across all categories of one direction."""

    total: Money = Decimal(0)


class CategoryDetail(_WireModel):
    """Category amount and its subcategory breakdown."""

    amount: Money
    subitem: dict[str, Money] | None = None


class MoneySummary(_WireModel):
    """Category summary for one direction (money in or money out)."""

    month_range: str = Field(default="", alias="monthRange")
    summary: OverallSummary = Field(default_factory=OverallSummary)
    categories: dict[str, CategoryDetail] = Field(default_factory=dict)


class InsightsRoot(_WireModel):
    """Complete summary document returned to the dashboard."""

    insight_summary: list[MonthlyInsight] = Field(default_factory=list, alias="insightSummary")
    money_in_summary: MoneySummary = Field(default_factory=MoneySummary, alias="moneyInSummary")
    money_out_summary: MoneySummary = Field(default_factory=MoneySummary, alias="moneyOutSummary")


class RowInput(_WireModel):
    """Ledger row as posted by clients.

    The direction is accepted as either "direction" or "type".
    """

    month_year: str | None = Field(default="", alias="monthYear")
    category: str | None = ""
    sub_category: str | None = Field(default="", alias="subCategory")
    amount: Decimal = Decimal(0)
    direction: str | None = Field(
        default="In",
        validation_alias=AliasChoices("direction", "type"),
    )

    def to_row(self) -> Row:
        """Convert to the domain Row consumed by the aggregator."""
        return Row(
            month_year=self.month_year,
            category=self.category,
            sub_category=self.sub_category,
            amount=self.amount,
            direction=self.direction,
        )


class SummaryRequest(_WireModel):
    """Body of POST /api/categorysummary."""

    month_range: int = Field(default=6, alias="monthRange")
    rows: list[RowInput] | None = None
