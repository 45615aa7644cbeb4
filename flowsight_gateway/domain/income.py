"""Income resolution - which income sources pay out on a given day"""

import logging
import uuid
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

from flowsight_gateway.domain.lookups import ProjectionLookups
from flowsight_gateway.domain.models import (
    DETAIL_TYPE_INCOME,
    INCOME_TYPE_MONTHLY_FIXED,
    INCOME_TYPE_ONE_TIME,
    CashflowProjectionDetail,
    IncomeSource,
)

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_DAY = 25

# Tried in order: plain date, datetime with UTC offset, naive datetime,
# then the same two with fractional seconds (JSON and toISOString output)
SCHEDULED_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S.%f",
)


def parse_scheduled_date(value: str) -> Optional[date]:
    """
    Parse a one-time income's scheduled_date.

    Returns None when no format matches; the source is then skipped rather than
    failing the projection. A datetime with an offset keeps its own calendar date.
    """
    for fmt in SCHEDULED_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return None


class IncomeResolver:
    """
    Resolves income per day for one projection call.

    Scheduled dates are parsed once up front; unparseable ones are logged and the
    source contributes nothing.
    """

    def __init__(self, sources: List[IncomeSource], lookups: ProjectionLookups):
        self.sources = [s for s in sources if s.is_active]
        self.lookups = lookups
        self._scheduled: Dict[uuid.UUID, Optional[date]] = {}

        for source in self.sources:
            if source.income_type == INCOME_TYPE_ONE_TIME and source.scheduled_date:
                parsed = parse_scheduled_date(source.scheduled_date)
                if parsed is None:
                    logger.warning(
                        "Skipping one-time income with unparseable scheduled_date",
                        extra={"income_source_id": str(source.id), "scheduled_date": source.scheduled_date},
                    )
                self._scheduled[source.id] = parsed

    def monthly_amount(self, source: IncomeSource, year_month: str) -> int:
        """Recorded amount for the month if one exists, otherwise the base amount"""
        recorded = self.lookups.monthly_income_amount(source.id, year_month)
        return source.base_amount if recorded is None else recorded

    def one_time_pays_on(self, source: IncomeSource, current_date: date, year_month: str) -> bool:
        if source.id in self._scheduled:
            return self._scheduled[source.id] == current_date
        # Legacy rows only carry a month; they pay out on the 1st
        if source.scheduled_year_month:
            return source.scheduled_year_month == year_month and current_date.day == 1
        return False

    def resolve(self, current_date: date, year_month: str) -> Tuple[int, List[CashflowProjectionDetail]]:
        """Total income landing on current_date and the detail line per source"""
        total = 0
        details: List[CashflowProjectionDetail] = []

        for source in self.sources:
            if source.income_type == INCOME_TYPE_MONTHLY_FIXED:
                pay_day = DEFAULT_PAYMENT_DAY if source.payment_day is None else source.payment_day
                if current_date.day != pay_day:
                    continue
                amount = self.monthly_amount(source, year_month)
                description = f"収入: {source.name}"

            elif source.income_type == INCOME_TYPE_ONE_TIME:
                if not self.one_time_pays_on(source, current_date, year_month):
                    continue
                amount = source.base_amount
                description = f"臨時収入: {source.name}"

            else:
                continue

            total += amount
            details.append(
                CashflowProjectionDetail(type=DETAIL_TYPE_INCOME, description=description, amount=amount)
            )

        return total, details
