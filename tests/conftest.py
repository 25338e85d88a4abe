"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from spendwise.api.main import create_app
from spendwise.infrastructure.database.models import Base
from spendwise.infrastructure.database.session import get_db
from spendwise.domain.models import Category, Expense, ExpenseType


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_USER = "user_test"

# A Wednesday
WEDNESDAY = date(2024, 5, 15)


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
    """Create FastAPI test client with test database, authenticated as TEST_USER"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app, headers={"X-User-ID": TEST_USER})


def make_expense(
    category: Category | str,
    amount,
    expense_type: ExpenseType | str = ExpenseType.NEED,
    spent_on: date = WEDNESDAY,
) -> Expense:
    """Build an expense snapshot; amount may be given as int/float/str"""
    return Expense(
        amount=Decimal(str(amount)),
        category=Category(category),
        expense_type=ExpenseType(expense_type),
        date=spent_on,
    )


@pytest.fixture
def expense() -> Callable[..., Expense]:
    return make_expense


@pytest.fixture
def even_month() -> list[Expense]:
    """Low, evenly spread spending: 20 on needs in every category"""
    return [make_expense(category, 20) for category in Category]
