"""GET /api/v1/cashflow-projection - daily balance forecast endpoint"""

import time
import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from flowsight_gateway.api.v1.schemas import CashflowProjectionSchema
from flowsight_gateway.api.dependencies import get_request_id, get_today
from flowsight_gateway.config import settings
from flowsight_gateway.infrastructure.database.session import get_db
from flowsight_gateway.infrastructure.database.snapshot import load_projection_inputs, build_lookups
from flowsight_gateway.domain.cashflow import clamp_projection_months, project_cashflow
from flowsight_gateway.domain.exceptions import DataAccessError, InvalidHorizonError
from flowsight_gateway.infrastructure.observability.metrics import record_projection, snapshot_load_failures_counter
from flowsight_gateway.infrastructure.observability.logging import log_projection

router = APIRouter()


@router.get("/cashflow-projection", response_model=List[CashflowProjectionSchema])
def get_cashflow_projection(
    request: Request,
    months: int = Query(settings.default_projection_months, description="Months to project; clamped to 1-120"),
    only_changes: bool = Query(False, alias="onlyChanges", description="Omit days without income or expense"),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """
    Project the combined bank balance day by day.

    Flow:
    1. Clamp the horizon into the supported range
    2. Load accounts, income sources, recurring payments, cards and settings
    3. Simulate every day from the 1st of the current month
    4. Return one row per day (or per changed day with onlyChanges)
    """
    start_time = time.time()
    request_id = get_request_id(request)
    months = clamp_projection_months(months, settings.min_projection_months, settings.max_projection_months)

    try:
        inputs = load_projection_inputs(db)
        projections = project_cashflow(
            inputs,
            build_lookups(db),
            months,
            only_changes=only_changes,
            today=today,
        )

    except DataAccessError as e:
        snapshot_load_failures_counter.inc()
        logging.error(f"Failed to load projection inputs: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Data store unavailable")

    except InvalidHorizonError as e:
        logging.warning(f"Invalid projection horizon: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_projection(only_changes, len(projections))
    log_projection(request_id, months, only_changes, len(projections), duration_ms)

    return [CashflowProjectionSchema.model_validate(p) for p in projections]
