"""SQLAlchemy ORM models for the entities read by the projection engine"""

import uuid
from sqlalchemy import Column, String, BigInteger, Boolean, DateTime, Integer, ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class DBBankAccount(Base):
    """Bank account with its current balance"""

    __tablename__ = "bank_accounts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    balance = Column(BigInteger, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class DBIncomeSource(Base):
    """Monthly or one-time income source"""

    __tablename__ = "income_sources"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    income_type = Column(String(32), nullable=False)  # monthly_fixed | one_time
    base_amount = Column(BigInteger, nullable=False)
    payment_day = Column(Integer, nullable=True)
    # Text, not Date: older rows hold RFC 3339 datetimes
    scheduled_date = Column(Text, nullable=True)
    scheduled_year_month = Column(String(7), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    monthly_records = relationship("DBMonthlyIncomeRecord", back_populates="income_source", cascade="all, delete-orphan")


class DBMonthlyIncomeRecord(Base):
    """Actual income of a monthly source for one month"""

    __tablename__ = "monthly_income_records"
    __table_args__ = (UniqueConstraint("income_source_id", "year_month"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    income_source_id = Column(Uuid, ForeignKey("income_sources.id", ondelete="CASCADE"), nullable=False)
    year_month = Column(String(7), nullable=False, index=True)
    actual_amount = Column(BigInteger, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    income_source = relationship("DBIncomeSource", back_populates="monthly_records")


class DBRecurringPayment(Base):
    """Fixed monthly payment, optionally limited to total_payments occurrences"""

    __tablename__ = "recurring_payments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    amount = Column(BigInteger, nullable=False)
    payment_day = Column(Integer, nullable=False)
    start_year_month = Column(String(7), nullable=False)
    total_payments = Column(Integer, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class DBCreditCard(Base):
    """Credit card (closing_day set) or loan-like asset (closing_day null)"""

    __tablename__ = "credit_cards"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    closing_day = Column(Integer, nullable=True)
    payment_day = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    monthly_totals = relationship("DBCardMonthlyTotal", back_populates="credit_card", cascade="all, delete-orphan")


class DBCardMonthlyTotal(Base):
    """Billed card usage for one month"""

    __tablename__ = "card_monthly_totals"
    __table_args__ = (UniqueConstraint("credit_card_id", "year_month"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    credit_card_id = Column(Uuid, ForeignKey("credit_cards.id", ondelete="CASCADE"), nullable=False, index=True)
    year_month = Column(String(7), nullable=False)
    total_amount = Column(BigInteger, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    credit_card = relationship("DBCreditCard", back_populates="monthly_totals")


class DBAppSetting(Base):
    """Key/value application setting"""

    __tablename__ = "app_settings"

    key = Column(String(128), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
