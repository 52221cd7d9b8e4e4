"""Root conftest — shared test configuration, async DB and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db and get_view_cache dependencies overridden per test
    - Customers c1 / c2 exist whenever invoices are seeded (FK target)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for single-statement
      mutations (PostgreSQL-specific features not exercised here)
"""

import os

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from dashboard.db.base import Base  # noqa: E402
from dashboard.infrastructure.database import get_db  # noqa: E402
from dashboard.infrastructure.view_cache import ViewCache, get_view_cache  # noqa: E402
from dashboard.main import app  # noqa: E402
from dashboard.models import Customer, Invoice  # noqa: E402

SEEDED_INVOICE_DATE = date(2024, 1, 15)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def views():
    """Fresh view cache per test (the app singleton is never touched)."""
    return ViewCache()


@pytest.fixture
async def customers(test_db):
    rows = [
        Customer(id="c1", name="Evil Rabbit", email="evil@rabbit.com"),
        Customer(id="c2", name="Delba de Oliveira", email="delba@oliveira.com"),
    ]
    test_db.add_all(rows)
    await test_db.commit()
    return rows


@pytest.fixture
async def seed_invoice(test_db, customers):
    """Invoice inv1: c1, $10.00, pending, dated 2024-01-15."""
    invoice = Invoice(
        id="inv1", customer_id="c1", amount=1000,
        status="pending", date=SEEDED_INVOICE_DATE,
    )
    test_db.add(invoice)
    await test_db.commit()
    return invoice


@pytest.fixture
async def client(test_session_factory, views):
    """FastAPI test client with DB and view cache dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_view_cache] = lambda: views

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
