"""Pytest fixtures for testing"""

import uuid
import pytest
from collections import defaultdict
from datetime import date
from typing import Dict, Generator, List
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from flowsight_gateway.api.main import create_app
from flowsight_gateway.api.dependencies import get_today
from flowsight_gateway.infrastructure.database.models import Base
from flowsight_gateway.infrastructure.database.session import get_db
from flowsight_gateway.domain.exceptions import DataAccessError
from flowsight_gateway.domain.lookups import ProjectionLookups
from flowsight_gateway.domain.models import CardMonthlyTotal, MonthlyIncomeRecord


# Test database: one shared in-memory connection
TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Pinned "today" for API tests
TODAY = date(2024, 5, 17)


class InMemoryMonthlyIncomeReader:
    """Monthly income records keyed by year-month; optionally failing"""

    def __init__(self, records: List[MonthlyIncomeRecord] | None = None, fail: bool = False):
        self.by_month: Dict[str, List[MonthlyIncomeRecord]] = defaultdict(list)
        for record in records or []:
            self.by_month[record.year_month].append(record)
        self.fail = fail
        self.calls: List[str] = []

    def get_by_year_month(self, year_month: str) -> List[MonthlyIncomeRecord]:
        self.calls.append(year_month)
        if self.fail:
            raise DataAccessError("monthly income store offline")
        return list(self.by_month.get(year_month, []))


class InMemoryCardTotalReader:
    """Card totals keyed by card id; optionally failing"""

    def __init__(self, totals: List[CardMonthlyTotal] | None = None, fail: bool = False):
        self.by_card: Dict[uuid.UUID, List[CardMonthlyTotal]] = defaultdict(list)
        for total in totals or []:
            self.by_card[total.credit_card_id].append(total)
        self.fail = fail
        self.calls: List[uuid.UUID] = []

    def get_by_credit_card_id(self, credit_card_id: uuid.UUID) -> List[CardMonthlyTotal]:
        self.calls.append(credit_card_id)
        if self.fail:
            raise DataAccessError("card total store offline")
        return list(self.by_card.get(credit_card_id, []))


def make_lookups(
    records: List[MonthlyIncomeRecord] | None = None,
    totals: List[CardMonthlyTotal] | None = None,
) -> ProjectionLookups:
    return ProjectionLookups(InMemoryMonthlyIncomeReader(records), InMemoryCardTotalReader(totals))


@pytest.fixture
def empty_lookups() -> ProjectionLookups:
    """Lookups with no monthly records and no card totals"""
    return make_lookups()


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a pinned date"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    return TestClient(app)
