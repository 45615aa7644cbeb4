"""Unit tests for the dashboard summary"""

import uuid
from datetime import date
from conftest import make_lookups
from flowsight_gateway.domain.cashflow import project_cashflow
from flowsight_gateway.domain.dashboard import build_dashboard_summary
from flowsight_gateway.domain.models import (
    BankAccount,
    CreditCard,
    IncomeSource,
    ProjectionInputs,
    RecurringPayment,
)


def test_dashboard_summary_for_current_month():
    inputs = ProjectionInputs(
        bank_accounts=[BankAccount(id=uuid.uuid4(), name="Checking", balance=400000)],
        income_sources=[
            IncomeSource(id=uuid.uuid4(), name="Salary", income_type="monthly_fixed", base_amount=300000, payment_day=25)
        ],
        recurring_payments=[
            RecurringPayment(id=uuid.uuid4(), name=f"Bill {day}", amount=1000 * day, payment_day=day, start_year_month="2024-01")
            for day in (1, 3, 5, 7, 9, 11)
        ],
        credit_cards=[CreditCard(id=uuid.uuid4(), name="Visa", payment_day=10, closing_day=15)],
    )
    today = date(2024, 5, 17)

    projections = project_cashflow(inputs, make_lookups(), 1, only_changes=True, today=today)
    summary = build_dashboard_summary(inputs, projections, today)

    assert summary.total_balance == 400000
    assert summary.monthly_income == 300000
    assert summary.monthly_expense == 1000 * (1 + 3 + 5 + 7 + 9 + 11)
    assert summary.total_assets == 2
    assert [a.date.day for a in summary.recent_activities] == [1, 3, 5, 7, 9]


def test_dashboard_summary_ignores_other_months():
    today = date(2024, 5, 17)
    projections = project_cashflow(
        ProjectionInputs(
            income_sources=[
                IncomeSource(id=uuid.uuid4(), name="Salary", income_type="monthly_fixed", base_amount=1000, payment_day=2)
            ]
        ),
        make_lookups(),
        2,
        only_changes=True,
        today=today,
    )

    summary = build_dashboard_summary(ProjectionInputs(), projections, today)

    assert summary.monthly_income == 1000
    assert len(summary.recent_activities) == 1
