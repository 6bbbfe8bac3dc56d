"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Generator
from decimal import Decimal
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from solicitudes.database import Base, build_engine, build_session_factory, create_tables
from solicitudes.domain.common.value_objects import (
    ApplicationId,
    Email,
    InterestRate,
    LoanTypeId,
    Money,
    Name,
    StatusId,
    Term,
)
from solicitudes.domain.lending.entities import LoanApplication, LoanType, Status
from solicitudes.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

PERSONAL_LOAN_ID = UUID("11111111-1111-4111-8111-111111111111")
PENDING_STATUS_ID = UUID("22222222-2222-4222-8222-222222222222")


def create_test_loan_type(
    loan_type_id: UUID = PERSONAL_LOAN_ID,
    name: str = "Préstamo Personal",
    min_amount: str = "1000000",
    max_amount: str = "10000000",
    rate: str = "15.5",
    requires_auto_validation: bool = True,
    version: int = 0,
) -> LoanType:
    """Build the personal loan type used across tests."""
    return LoanType.reconstruct(
        id=LoanTypeId(loan_type_id),
        name=Name(name),
        min_amount=Money.of(min_amount),
        max_amount=Money.of(max_amount),
        interest_rate=InterestRate.of(rate),
        requires_auto_validation=requires_auto_validation,
        version=version,
    )


def create_test_status(
    status_id: UUID = PENDING_STATUS_ID,
    name: str = "PENDIENTE",
    description: str = "Pendiente de revisión",
    version: int = 0,
) -> Status:
    return Status.reconstruct(
        id=StatusId(status_id), name=name, description=description, version=version
    )


def create_test_application(
    status_id: UUID = PENDING_STATUS_ID,
    loan_type_id: UUID = PERSONAL_LOAN_ID,
    amount: str = "5000000.00",
    term_months: int = 24,
    email: str = "cliente@test.com",
    version: int = 0,
) -> LoanApplication:
    return LoanApplication.reconstruct(
        id=ApplicationId(uuid4()),
        amount=Money(Decimal(amount)),
        term=Term(term_months),
        applicant_email=Email(email),
        status_id=StatusId(status_id),
        loan_type_id=LoanTypeId(loan_type_id),
        version=version,
    )


@pytest.fixture
def personal_loan() -> LoanType:
    return create_test_loan_type()


@pytest.fixture
def pending_status() -> Status:
    return create_test_status()


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for each test."""
    engine = build_engine(TEST_DATABASE_URL)
    await create_tables(engine)
    try:
        yield engine
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session bound to the test engine."""
    session_factory = build_session_factory(db_engine)
    async with session_factory() as session:
        yield session


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """
    Create a test client without running the lifespan.

    Tests override the use case dependencies, so no database is touched.
    """
    yield TestClient(app)
    app.dependency_overrides.clear()
