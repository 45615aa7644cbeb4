"""Data access layer for the projection inputs"""

import uuid
from typing import Callable, List, Optional, TypeVar
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from flowsight_gateway.infrastructure.database.models import (
    DBAppSetting,
    DBBankAccount,
    DBCardMonthlyTotal,
    DBCreditCard,
    DBIncomeSource,
    DBMonthlyIncomeRecord,
    DBRecurringPayment,
)
from flowsight_gateway.domain.exceptions import DataAccessError
from flowsight_gateway.domain.models import (
    BankAccount,
    CardMonthlyTotal,
    CreditCard,
    IncomeSource,
    MonthlyIncomeRecord,
    RecurringPayment,
)

T = TypeVar("T")


def _read(db: Session, what: str, query: Callable[[], T]) -> T:
    """Run a read, converting driver/ORM failures into DataAccessError"""
    try:
        return query()
    except SQLAlchemyError as e:
        db.rollback()  # leave the session usable for later reads
        raise DataAccessError(f"Failed to load {what}: {e}") from e


class BankAccountRepository:
    """Repository for bank accounts"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[BankAccount]:
        rows = _read(
            self.db,
            "bank accounts",
            lambda: self.db.query(DBBankAccount).order_by(DBBankAccount.created_at, DBBankAccount.id).all(),
        )
        return [BankAccount(id=r.id, name=r.name, balance=r.balance) for r in rows]


class IncomeSourceRepository:
    """Repository for income sources"""

    def __init__(self, db: Session):
        self.db = db

    def get_active(self) -> List[IncomeSource]:
        rows = _read(
            self.db,
            "income sources",
            lambda: (
                self.db.query(DBIncomeSource)
                .filter(DBIncomeSource.is_active.is_(True))
                .order_by(DBIncomeSource.created_at, DBIncomeSource.id)
                .all()
            ),
        )
        return [
            IncomeSource(
                id=r.id,
                name=r.name,
                income_type=r.income_type,
                base_amount=r.base_amount,
                payment_day=r.payment_day,
                scheduled_date=r.scheduled_date,
                scheduled_year_month=r.scheduled_year_month,
                is_active=r.is_active,
            )
            for r in rows
        ]


class MonthlyIncomeRepository:
    """Repository for per-month income records"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_year_month(self, year_month: str) -> List[MonthlyIncomeRecord]:
        rows = _read(
            self.db,
            f"monthly income records for {year_month}",
            lambda: (
                self.db.query(DBMonthlyIncomeRecord)
                .filter(DBMonthlyIncomeRecord.year_month == year_month)
                .order_by(DBMonthlyIncomeRecord.created_at, DBMonthlyIncomeRecord.id)
                .all()
            ),
        )
        return [
            MonthlyIncomeRecord(
                income_source_id=r.income_source_id,
                year_month=r.year_month,
                actual_amount=r.actual_amount,
            )
            for r in rows
        ]


class RecurringPaymentRepository:
    """Repository for recurring payments"""

    def __init__(self, db: Session):
        self.db = db

    def get_active(self) -> List[RecurringPayment]:
        rows = _read(
            self.db,
            "recurring payments",
            lambda: (
                self.db.query(DBRecurringPayment)
                .filter(DBRecurringPayment.is_active.is_(True))
                .order_by(DBRecurringPayment.created_at, DBRecurringPayment.id)
                .all()
            ),
        )
        return [
            RecurringPayment(
                id=r.id,
                name=r.name,
                amount=r.amount,
                payment_day=r.payment_day,
                start_year_month=r.start_year_month,
                total_payments=r.total_payments,
                is_active=r.is_active,
            )
            for r in rows
        ]


class CreditCardRepository:
    """Repository for credit cards"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[CreditCard]:
        rows = _read(
            self.db,
            "credit cards",
            lambda: self.db.query(DBCreditCard).order_by(DBCreditCard.created_at, DBCreditCard.id).all(),
        )
        return [
            CreditCard(id=r.id, name=r.name, payment_day=r.payment_day, closing_day=r.closing_day)
            for r in rows
        ]


class CardMonthlyTotalRepository:
    """Repository for monthly card usage totals"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_credit_card_id(self, credit_card_id: uuid.UUID) -> List[CardMonthlyTotal]:
        rows = _read(
            self.db,
            "card monthly totals",
            lambda: (
                self.db.query(DBCardMonthlyTotal)
                .filter(DBCardMonthlyTotal.credit_card_id == credit_card_id)
                .order_by(DBCardMonthlyTotal.year_month, DBCardMonthlyTotal.created_at)
                .all()
            ),
        )
        return [
            CardMonthlyTotal(credit_card_id=r.credit_card_id, year_month=r.year_month, total_amount=r.total_amount)
            for r in rows
        ]


class AppSettingRepository:
    """Key/value settings store"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        row = _read(self.db, f"setting {key}", lambda: self.db.get(DBAppSetting, key))
        return row.value if row is not None else None

    def get_all(self) -> List[DBAppSetting]:
        return _read(self.db, "settings", lambda: self.db.query(DBAppSetting).order_by(DBAppSetting.key).all())

    def upsert(self, key: str, value: str) -> DBAppSetting:
        """Create or replace a setting; caller commits"""
        setting = self.db.get(DBAppSetting, key)
        if setting is None:
            setting = DBAppSetting(key=key, value=value)
            self.db.add(setting)
        else:
            setting.value = value
        self.db.flush()
        return setting
