"""Dashboard summary built on top of the current month's projection"""

from datetime import date
from typing import List

from flowsight_gateway.domain.models import CashflowProjection, DashboardSummary, ProjectionInputs

RECENT_ACTIVITY_LIMIT = 5


def build_dashboard_summary(
    inputs: ProjectionInputs,
    projections: List[CashflowProjection],
    today: date,
) -> DashboardSummary:
    """
    Summarize balances and this month's activity.

    projections is expected to be a one-month projection starting at today's month;
    rows from other months are ignored.
    """
    current_month = [
        p for p in projections if p.date.year == today.year and p.date.month == today.month
    ]

    active_days = [p for p in current_month if p.income > 0 or p.expense > 0]

    return DashboardSummary(
        total_balance=inputs.starting_balance,
        monthly_income=sum(p.income for p in current_month),
        monthly_expense=sum(p.expense for p in current_month),
        total_assets=len(inputs.bank_accounts) + len(inputs.credit_cards),
        recent_activities=active_days[:RECENT_ACTIVITY_LIMIT],
    )
