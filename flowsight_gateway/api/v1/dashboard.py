"""GET /api/v1/dashboard - balance and current-month activity summary"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from flowsight_gateway.api.v1.schemas import DashboardSummaryResponse
from flowsight_gateway.api.dependencies import get_request_id, get_today
from flowsight_gateway.infrastructure.database.session import get_db
from flowsight_gateway.infrastructure.database.snapshot import load_projection_inputs, build_lookups
from flowsight_gateway.domain.cashflow import project_cashflow
from flowsight_gateway.domain.dashboard import build_dashboard_summary
from flowsight_gateway.domain.exceptions import DataAccessError
from flowsight_gateway.infrastructure.observability.metrics import snapshot_load_failures_counter

router = APIRouter()


@router.get("/dashboard", response_model=DashboardSummaryResponse)
def get_dashboard(
    request: Request,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """
    Summarize total balance and this month's projected activity.

    Returns:
        Totals plus the first five days of the month with income or expense
    """
    request_id = get_request_id(request)

    try:
        inputs = load_projection_inputs(db)
    except DataAccessError as e:
        snapshot_load_failures_counter.inc()
        logging.error(f"Failed to load dashboard inputs: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Data store unavailable")

    projections = project_cashflow(inputs, build_lookups(db), 1, only_changes=True, today=today)
    summary = build_dashboard_summary(inputs, projections, today)

    return DashboardSummaryResponse.model_validate(summary)
