"""Shared pytest fixtures for ledgerlens tests."""

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from ledgerlens.config import Settings
from ledgerlens.data.sample import sample_rows as _sample_rows
from ledgerlens.models.domain import Row

AS_OF = date(2025, 10, 14)


def make_row(
    month_year="Jul 25",
    category="cat",
    sub_category="sub",
    amount="0",
    direction="In",
) -> Row:
    """Build a Row with sensible defaults."""
    return Row(
        month_year=month_year,
        category=category,
        sub_category=sub_category,
        amount=Decimal(amount),
        direction=direction,
    )


@pytest.fixture
def sample_rows():
    """The built-in sample ledger."""
    return _sample_rows()


@pytest.fixture
def settings():
    """Settings with fixed values independent of the environment."""
    return Settings(
        default_month_range=6,
        as_of_date=AS_OF,
        cors_origins=("http://testserver",),
        log_level="DEBUG",
    )


@pytest.fixture
def client(settings):
    """Test client for an app built with the test settings."""
    from ledgerlens.api.app import create_app

    return TestClient(create_app(settings))
