"""Category summary API endpoints.

GET /api/categorysummary - Summary of the built-in sample ledger
POST /api/categorysummary - Summary of posted rows
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from ledgerlens.aggregation.summary import compute_summary
from ledgerlens.api.app import get_settings
from ledgerlens.config import Settings
from ledgerlens.data.sample import sample_rows
from ledgerlens.models.types import InsightsRoot, SummaryRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/categorysummary", response_model=InsightsRoot)
def get_category_summary(
    month_range: int | None = Query(default=None, alias="monthRange"),
    settings: Settings = Depends(get_settings),
) -> InsightsRoot:
    """Summarize the sample ledger.

    Args:
        month_range: Reference month range. Defaults to the configured value.
        settings: Application settings (injected).

    Returns:
        InsightsRoot for the sample rows.
    """
    if month_range is None:
        month_range = settings.default_month_range

    rows = sample_rows()
    logger.info("Summarizing %d sample rows (monthRange=%d)", len(rows), month_range)
    return compute_summary(rows, month_range, settings.as_of_date)


@router.post("/categorysummary", response_model=InsightsRoot)
def post_category_summary(
    request: SummaryRequest | None = Body(default=None),
    settings: Settings = Depends(get_settings),
) -> InsightsRoot:
    """Summarize rows supplied in the request body.

    Args:
        request: Month range and rows.
        settings: Application settings (injected).

    Returns:
        InsightsRoot for the posted rows.

    Raises:
        HTTPException: 400 if the body or its rows are missing.
    """
    if request is None or request.rows is None:
        raise HTTPException(status_code=400, detail="Invalid request.")

    rows = [row.to_row() for row in request.rows]
    logger.info("Summarizing %d posted rows (monthRange=%d)", len(rows), request.month_range)
    return compute_summary(rows, request.month_range, settings.as_of_date)
