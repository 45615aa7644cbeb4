"""Minimum monthly expense floor applied to later projection months"""

import logging
from typing import Optional

from flowsight_gateway.domain.exceptions import DataAccessError
from flowsight_gateway.domain.lookups import SettingsStore
from flowsight_gateway.domain.models import DETAIL_TYPE_RECURRING_PAYMENT, CashflowProjectionDetail

logger = logging.getLogger(__name__)

NORMALIZATION_DAY = 26
# The first two simulated months are left as-is
NORMALIZATION_START_OFFSET = 2

ADJUSTMENT_DESCRIPTION = "最低月支出調整"


def parse_minimum_monthly_expense(value: Optional[str]) -> int:
    """Setting value as an amount; absent, malformed, or negative values disable the floor"""
    if value is None or not value.strip():
        return 0

    try:
        amount = int(value.strip())
    except ValueError:
        logger.warning("Ignoring non-integer minimum_monthly_expense", extra={"value": value})
        return 0

    return max(amount, 0)


def read_minimum_monthly_expense(store: SettingsStore, key: str) -> int:
    """Floor from the settings store; an unreadable store disables it"""
    try:
        value = store.get(key)
    except DataAccessError as e:
        logger.warning(f"Minimum expense setting unavailable, floor disabled: {e}")
        return 0
    return parse_minimum_monthly_expense(value)


def minimum_expense_adjustment(
    month_offset: int,
    day: int,
    monthly_expense_total: int,
    minimum_monthly_expense: int,
) -> Optional[CashflowProjectionDetail]:
    """
    Synthetic expense topping the month up to the configured floor.

    Only fires on day 26 from the third simulated month onward, when the floor is
    positive and the month's payments so far fall short of it.
    """
    if minimum_monthly_expense <= 0:
        return None
    if month_offset < NORMALIZATION_START_OFFSET or day != NORMALIZATION_DAY:
        return None

    shortfall = minimum_monthly_expense - monthly_expense_total
    if shortfall <= 0:
        return None

    return CashflowProjectionDetail(
        type=DETAIL_TYPE_RECURRING_PAYMENT,
        description=ADJUSTMENT_DESCRIPTION,
        amount=shortfall,
    )
