"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date
from typing import List, Literal


class CashflowProjectionDetailSchema(BaseModel):
    """Single income or expense line within a projected day"""

    model_config = ConfigDict(from_attributes=True)

    type: Literal["income", "recurring_payment", "card_payment"]
    description: str
    amount: int


class CashflowProjectionSchema(BaseModel):
    """One projected day in GET /api/v1/cashflow-projection"""

    model_config = ConfigDict(from_attributes=True)

    date: date
    income: int
    expense: int
    balance: int
    details: List[CashflowProjectionDetailSchema]


class DashboardSummaryResponse(BaseModel):
    """Response for GET /api/v1/dashboard"""

    model_config = ConfigDict(from_attributes=True)

    total_balance: int
    monthly_income: int
    monthly_expense: int
    total_assets: int
    recent_activities: List[CashflowProjectionSchema]


class SettingSchema(BaseModel):
    """Single key/value setting"""

    model_config = ConfigDict(from_attributes=True)

    key: str
    value: str


class SettingUpdateRequest(BaseModel):
    """Request body for PUT /api/v1/settings/{key}"""

    value: str = Field(..., max_length=1024, description="Setting value, stored as text")
