"""GET/PUT /api/v1/settings - key/value application settings"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from flowsight_gateway.api.v1.schemas import SettingSchema, SettingUpdateRequest
from flowsight_gateway.api.dependencies import get_request_id
from flowsight_gateway.infrastructure.database.session import get_db
from flowsight_gateway.infrastructure.database.repositories import AppSettingRepository
from flowsight_gateway.domain.exceptions import DataAccessError

router = APIRouter()


@router.get("/settings", response_model=List[SettingSchema])
def list_settings(request: Request, db: Session = Depends(get_db)):
    """Return every stored setting ordered by key"""
    try:
        rows = AppSettingRepository(db).get_all()
    except DataAccessError as e:
        logging.error(f"Failed to load settings: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=503, detail="Data store unavailable")

    return [SettingSchema(key=row.key, value=row.value) for row in rows]


@router.put("/settings/{key}", response_model=SettingSchema)
def update_setting(
    key: str,
    request_body: SettingUpdateRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Create or replace a setting.

    minimum_monthly_expense is read by the projection; a value that is not a
    non-negative integer is stored as-is and disables the expense floor.
    """
    request_id = get_request_id(request)

    try:
        setting = AppSettingRepository(db).upsert(key, request_body.value)
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Failed to save setting {key}: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    logging.info("Setting updated", extra={"request_id": request_id, "key": key})
    return SettingSchema(key=setting.key, value=setting.value)
