"""
Shared test fixtures.

Sets up an isolated test database so tests never touch
the real database. Tables are created before each test and
dropped after it, so no test data persists.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from bank_accounts.main import app
from bank_accounts.models import Base, Customer, CurrentAccount, SavingsAccount
from bank_accounts.models.base import get_db
from bank_accounts.models.enums import AccountType


# SQLite keeps the tests free of any database infrastructure.
TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    The get_db dependency is overridden so the app uses the
    test session instead of the real database.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def customer(db_session):
    customer = Customer(name="Alice", email="alice@bank.com")
    db_session.add(customer)
    db_session.commit()
    return customer


@pytest.fixture
def make_account(db_session, customer):
    """Factory: create a committed account with the given balance."""
    def _make(balance="0.00", account_type=AccountType.CURRENT):
        if account_type == AccountType.CURRENT:
            account = CurrentAccount(
                balance=Decimal(balance),
                overdraft_limit=Decimal("100.00"),
            )
        else:
            account = SavingsAccount(
                balance=Decimal(balance),
                interest_rate=Decimal("0.0250"),
            )
        account.customer = customer
        db_session.add(account)
        db_session.commit()
        return account

    return _make
