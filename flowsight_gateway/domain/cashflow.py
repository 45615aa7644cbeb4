"""Cashflow projection engine - day-by-day balance simulation"""

from datetime import date
from typing import List

from flowsight_gateway.domain.exceptions import InvalidHorizonError
from flowsight_gateway.domain.income import IncomeResolver
from flowsight_gateway.domain.lookups import ProjectionLookups
from flowsight_gateway.domain.models import CashflowProjection, ProjectionInputs
from flowsight_gateway.domain.normalizer import minimum_expense_adjustment
from flowsight_gateway.domain.payments import resolve_card_payments, resolve_recurring_payments
from flowsight_gateway.utils.date_utils import add_months, format_year_month, month_dates

MIN_PROJECTION_MONTHS = 1
MAX_PROJECTION_MONTHS = 120


def clamp_projection_months(
    months: int,
    lower: int = MIN_PROJECTION_MONTHS,
    upper: int = MAX_PROJECTION_MONTHS,
) -> int:
    """Clamp a requested horizon into [lower, upper]"""
    return max(lower, min(months, upper))


def project_cashflow(
    inputs: ProjectionInputs,
    lookups: ProjectionLookups,
    months: int,
    only_changes: bool = False,
    today: date | None = None,
) -> List[CashflowProjection]:
    """
    Simulate the combined bank balance day by day.

    Rules:
    - Starts from the sum of account balances and covers every day of today's month
      (day 1 onward) plus the following months - 1 months
    - Each day adds resolved income and subtracts recurring payments, card bills,
      and the minimum-expense adjustment
    - With only_changes, days without income or expense are left out of the result
      but the balance still carries through them

    Raises:
        InvalidHorizonError: months outside [1, 120]; callers clamp beforehand
    """
    if not MIN_PROJECTION_MONTHS <= months <= MAX_PROJECTION_MONTHS:
        raise InvalidHorizonError(
            f"Projection horizon must be {MIN_PROJECTION_MONTHS}-{MAX_PROJECTION_MONTHS} months, got {months}"
        )

    if today is None:
        today = date.today()

    income_resolver = IncomeResolver(inputs.income_sources, lookups)
    projections: List[CashflowProjection] = []
    current_balance = inputs.starting_balance

    for month_offset in range(months):
        year, month = add_months(today.year, today.month, month_offset)
        year_month = format_year_month(year, month)
        monthly_expense_total = 0

        for current_date in month_dates(year, month):
            day_income, details = income_resolver.resolve(current_date, year_month)

            recurring_expense, recurring_details = resolve_recurring_payments(
                inputs.recurring_payments, current_date, year_month
            )
            card_expense, card_details = resolve_card_payments(
                inputs.credit_cards, current_date, year_month, lookups
            )
            details.extend(recurring_details)
            details.extend(card_details)

            day_expense = recurring_expense + card_expense
            monthly_expense_total += day_expense

            adjustment = minimum_expense_adjustment(
                month_offset, current_date.day, monthly_expense_total, inputs.minimum_monthly_expense
            )
            if adjustment is not None:
                day_expense += adjustment.amount
                monthly_expense_total += adjustment.amount
                details.append(adjustment)

            current_balance = current_balance + day_income - day_expense

            if only_changes and day_income == 0 and day_expense == 0:
                continue

            projections.append(
                CashflowProjection(
                    date=current_date,
                    income=day_income,
                    expense=day_expense,
                    balance=current_balance,
                    details=details,
                )
            )

    return projections
