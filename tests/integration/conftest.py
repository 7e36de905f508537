"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database
- Test client for the FastAPI app bound to that database
- Request body builders for customers and credits
"""

from datetime import date
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from dateutil.relativedelta import relativedelta
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from credit_system.main import app
from credit_system.infrastructure.database import Base, get_db_session


VALID_CPF = "28475934625"
OTHER_VALID_CPF = "52998224725"


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
        autoflush=False,
    )

    async with async_session() as session:
        yield session


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client whose requests share one in-memory database.

    Each request commits on success and rolls back on error, the same
    way the production session dependency behaves.
    """
    async def override_get_db_session():
        try:
            yield test_session
            await test_session.commit()
        except Exception:
            await test_session.rollback()
            raise

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def customer_body() -> Callable[..., dict]:
    """Build a customer registration body, overriding any field."""
    def build(**overrides) -> dict:
        body = {
            "first_name": "Cami",
            "last_name": "Cavalcante",
            "cpf": VALID_CPF,
            "income": "1000.00",
            "email": "camila@email.com",
            "password": "1234",
            "zip_code": "000000",
            "street": "Rua da Cami, 123",
        }
        body.update(overrides)
        return body

    return build


@pytest.fixture
def credit_body() -> Callable[..., dict]:
    """Build a credit application body, overriding any field."""
    def build(customer_id: int = 1, **overrides) -> dict:
        body = {
            "credit_value": "100.00",
            "day_first_installment": (date.today() + relativedelta(months=2)).isoformat(),
            "number_of_installments": 15,
            "customer_id": customer_id,
        }
        body.update(overrides)
        return body

    return build


@pytest_asyncio.fixture
async def customer_id(client: AsyncClient, customer_body) -> int:
    """Register a customer and return its id."""
    response = await client.post("/v1/customers", json=customer_body())
    assert response.status_code == 201
    return response.json()["id"]
