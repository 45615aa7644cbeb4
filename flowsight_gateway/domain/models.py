"""Domain models - pure Python dataclasses representing business entities"""

import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

INCOME_TYPE_MONTHLY_FIXED = "monthly_fixed"
INCOME_TYPE_ONE_TIME = "one_time"

DETAIL_TYPE_INCOME = "income"
DETAIL_TYPE_RECURRING_PAYMENT = "recurring_payment"
DETAIL_TYPE_CARD_PAYMENT = "card_payment"


@dataclass
class BankAccount:
    """Bank account; only the balance feeds the projection"""

    id: uuid.UUID
    name: str
    balance: int


@dataclass
class IncomeSource:
    """Salary, side income, or a one-off payout"""

    id: uuid.UUID
    name: str
    income_type: str  # "monthly_fixed" or "one_time"
    base_amount: int
    payment_day: Optional[int] = None  # monthly_fixed only, defaults to 25
    scheduled_date: Optional[str] = None  # one_time only, wins over scheduled_year_month
    scheduled_year_month: Optional[str] = None  # one_time legacy fallback, "YYYY-MM"
    is_active: bool = True


@dataclass
class MonthlyIncomeRecord:
    """Actual amount of a monthly_fixed source for one month"""

    income_source_id: uuid.UUID
    year_month: str
    actual_amount: int


@dataclass
class RecurringPayment:
    """Fixed monthly payment, optionally bounded (loans, installments)"""

    id: uuid.UUID
    name: str
    amount: int
    payment_day: int
    start_year_month: str
    total_payments: Optional[int] = None  # None or 0 means unbounded
    is_active: bool = True


@dataclass
class CreditCard:
    """Card paid from the bank balance; no closing day means same-month billing"""

    id: uuid.UUID
    name: str
    payment_day: int
    closing_day: Optional[int] = None


@dataclass
class CardMonthlyTotal:
    """Billed usage of one card for one month"""

    credit_card_id: uuid.UUID
    year_month: str
    total_amount: int


@dataclass
class ProjectionInputs:
    """Snapshot of everything the engine reads, loaded once per projection"""

    bank_accounts: List[BankAccount] = field(default_factory=list)
    income_sources: List[IncomeSource] = field(default_factory=list)
    recurring_payments: List[RecurringPayment] = field(default_factory=list)
    credit_cards: List[CreditCard] = field(default_factory=list)
    minimum_monthly_expense: int = 0

    @property
    def starting_balance(self) -> int:
        return sum(account.balance for account in self.bank_accounts)


@dataclass
class CashflowProjectionDetail:
    """Single line item contributing to a day's income or expense"""

    type: str  # "income", "recurring_payment" or "card_payment"
    description: str
    amount: int


@dataclass
class CashflowProjection:
    """Projected cash position for one calendar day"""

    date: date
    income: int
    expense: int
    balance: int
    details: List[CashflowProjectionDetail] = field(default_factory=list)


@dataclass
class DashboardSummary:
    """Headline figures for the current month"""

    total_balance: int
    monthly_income: int
    monthly_expense: int
    total_assets: int
    recent_activities: List[CashflowProjection] = field(default_factory=list)
