"""Dependency injection for FastAPI endpoints"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi import Request
from flowsight_gateway.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_today() -> date:
    """Calendar date the projection starts from, in the configured timezone"""
    if settings.timezone:
        return datetime.now(ZoneInfo(settings.timezone)).date()
    return date.today()
