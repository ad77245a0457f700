"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app
- In-memory database for testing
- Applicant request bodies for the common risk profiles
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from credit_guard.main import app
from credit_guard.core.dependencies import get_history_repository
from credit_guard.infrastructure.database import Base
from credit_guard.infrastructure.repositories import SqlAlchemyHistoryRepository


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def history_repository(test_session: AsyncSession) -> SqlAlchemyHistoryRepository:
    return SqlAlchemyHistoryRepository(test_session)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with an in-memory history log.

    The lifespan is not run, so the app's own engine is never created;
    every request goes through the overridden repository.
    """
    async def override_get_history_repository():
        return SqlAlchemyHistoryRepository(test_session)

    app.dependency_overrides[get_history_repository] = override_get_history_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def medium_risk_request() -> dict:
    """Licensed professional, modest loan: 28 / Medium / 696."""
    return {
        "age": 35,
        "loanAmount": 50000,
        "loanTerm": 12,
        "income": 25000,
        "education": "Bachelor",
        "gender": "Female",
        "maritalStatus": "Single",
        "employmentStatus": "Licensed Professional",
        "loanType": "Regular",
        "loanAppType": "New",
        "modeOfPayment": "Monthly",
    }


@pytest.fixture
def high_risk_request() -> dict:
    """Retiree, large long-term loan: 75 / High / 438."""
    return {
        "age": 60,
        "loanAmount": 300000,
        "loanTerm": 48,
        "income": 20000,
        "education": "Elementary",
        "gender": "Male",
        "maritalStatus": "Widowed",
        "employmentStatus": "Retired",
        "loanType": "Collateral",
        "loanAppType": "New",
        "modeOfPayment": "Quarterly",
    }


@pytest.fixture
def critical_risk_request(high_risk_request: dict) -> dict:
    """Same retiree on a fifth of the income: 95 / Critical / 328."""
    return {**high_risk_request, "income": 5000}


@pytest.fixture
def low_risk_request() -> dict:
    """Government employee renewing a small loan: 13 / Low."""
    return {
        "age": 40,
        "loanAmount": 10000,
        "loanTerm": 12,
        "income": 50000,
        "education": "Doctoral",
        "gender": "Female",
        "maritalStatus": "Married",
        "employmentStatus": "Employed-Government",
        "loanType": "Salary",
        "loanAppType": "Renewal",
        "modeOfPayment": "Weekly",
    }
