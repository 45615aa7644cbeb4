"""Loads the read-only projection snapshot from the repositories"""

from sqlalchemy.orm import Session

from flowsight_gateway.config import settings
from flowsight_gateway.domain.lookups import ProjectionLookups
from flowsight_gateway.domain.models import ProjectionInputs
from flowsight_gateway.domain.normalizer import read_minimum_monthly_expense
from flowsight_gateway.infrastructure.database.repositories import (
    AppSettingRepository,
    BankAccountRepository,
    CardMonthlyTotalRepository,
    CreditCardRepository,
    IncomeSourceRepository,
    MonthlyIncomeRepository,
    RecurringPaymentRepository,
)


def load_projection_inputs(db: Session) -> ProjectionInputs:
    """
    Load everything the engine needs up front.

    Raises:
        DataAccessError: An entity read failed; the projection cannot proceed.
            An unreadable minimum-expense setting only disables the floor.
    """
    return ProjectionInputs(
        bank_accounts=BankAccountRepository(db).get_all(),
        income_sources=IncomeSourceRepository(db).get_active(),
        recurring_payments=RecurringPaymentRepository(db).get_active(),
        credit_cards=CreditCardRepository(db).get_all(),
        minimum_monthly_expense=read_minimum_monthly_expense(
            AppSettingRepository(db), settings.minimum_expense_setting_key
        ),
    )


def build_lookups(db: Session) -> ProjectionLookups:
    """Per-month readers for one projection call"""
    return ProjectionLookups(
        monthly_income_reader=MonthlyIncomeRepository(db),
        card_total_reader=CardMonthlyTotalRepository(db),
    )
