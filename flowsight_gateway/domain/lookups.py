"""Per-month readers used by the projection engine, with per-call memoization"""

import logging
import uuid
from typing import Dict, List, Optional, Protocol

from flowsight_gateway.domain.exceptions import DataAccessError
from flowsight_gateway.domain.models import CardMonthlyTotal, MonthlyIncomeRecord

logger = logging.getLogger(__name__)


class MonthlyIncomeReader(Protocol):
    def get_by_year_month(self, year_month: str) -> List[MonthlyIncomeRecord]: ...


class CardMonthlyTotalReader(Protocol):
    def get_by_credit_card_id(self, credit_card_id: uuid.UUID) -> List[CardMonthlyTotal]: ...


class SettingsStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...


class ProjectionLookups:
    """
    Lookups for a single projection call.

    Results are cached per year-month (income records) and per card (totals) since
    the stores do not change during one call. A DataAccessError is not fatal: the
    caller gets None and falls back to the base amount or to zero. Failed reads are
    not cached.
    """

    def __init__(self, monthly_income_reader: MonthlyIncomeReader, card_total_reader: CardMonthlyTotalReader):
        self.monthly_income_reader = monthly_income_reader
        self.card_total_reader = card_total_reader
        self._income_by_month: Dict[str, Dict[uuid.UUID, int]] = {}
        self._totals_by_card: Dict[uuid.UUID, Dict[str, int]] = {}

    def monthly_income_amount(self, income_source_id: uuid.UUID, year_month: str) -> Optional[int]:
        """Recorded amount for the source in year_month, or None if absent or unreadable"""
        if year_month not in self._income_by_month:
            try:
                records = self.monthly_income_reader.get_by_year_month(year_month)
            except DataAccessError as e:
                logger.warning(
                    f"Monthly income lookup failed, using base amounts: {e}",
                    extra={"year_month": year_month},
                )
                return None

            amounts: Dict[uuid.UUID, int] = {}
            for record in records:
                # First record wins if the store holds duplicates
                amounts.setdefault(record.income_source_id, record.actual_amount)
            self._income_by_month[year_month] = amounts

        return self._income_by_month[year_month].get(income_source_id)

    def card_total(self, credit_card_id: uuid.UUID, year_month: str) -> Optional[int]:
        """Billed usage of the card for year_month, or None if absent or unreadable"""
        if credit_card_id not in self._totals_by_card:
            try:
                totals = self.card_total_reader.get_by_credit_card_id(credit_card_id)
            except DataAccessError as e:
                logger.warning(
                    f"Card total lookup failed, treating as zero: {e}",
                    extra={"credit_card_id": str(credit_card_id)},
                )
                return None

            by_month: Dict[str, int] = {}
            for total in totals:
                by_month.setdefault(total.year_month, total.total_amount)
            self._totals_by_card[credit_card_id] = by_month

        return self._totals_by_card[credit_card_id].get(year_month)
