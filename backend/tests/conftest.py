"""Root conftest — shared SQLite fixtures for repository and end-to-end route tests.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the ORM schema
    - seed_rows inserts the same small fleet used across tests
    - sqlite_client wires app.state.db_manager to the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, enough for the joins
      and ordering; PostgreSQL routines (add_car_sale and the price
      functions) are exercised through the in-memory fake in tests/api
"""

import os
from datetime import date
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from car_shop.db.base import Base  # noqa: E402
from car_shop.infrastructure.database import DatabaseSessionManager  # noqa: E402
from car_shop.main import app  # noqa: E402
from car_shop.models import Brand, Car, CarCentre, Order  # noqa: E402


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
async def seed_rows(test_db):
    """Two brands, two centres, three cars and four orders."""
    test_db.add_all([
        Brand(id=1, name="Toyota", country_code="JP"),
        Brand(id=2, name="Lada", country_code=None),
        CarCentre(id=1, name="North Centre", address="1 Main St"),
        CarCentre(id=2, name="South Centre"),
    ])
    await test_db.flush()
    test_db.add_all([
        Car(id=1, name="Camry", brand_id=1, car_centre_id=1,
            price=Decimal("30000.00"), quantity=5, description="Sedan"),
        Car(id=2, name="Corolla", brand_id=1, car_centre_id=2,
            price=Decimal("20000.50"), quantity=2, description=None),
        Car(id=3, name="Niva", brand_id=2, car_centre_id=1,
            price=Decimal("9000.25"), quantity=1, description="Off-road"),
    ])
    await test_db.flush()
    test_db.add_all([
        Order(id=1, car_id=1, check_num=101, quantity=1, sold_at=date(2024, 1, 10)),
        Order(id=2, car_id=1, check_num=102, quantity=2, sold_at=date(2024, 3, 5)),
        Order(id=3, car_id=2, check_num=103, quantity=2, sold_at=date(2024, 2, 1)),
        Order(id=4, car_id=1, check_num=104, quantity=1, sold_at=date(2023, 12, 24)),
    ])
    await test_db.commit()


@pytest.fixture
async def sqlite_client(test_engine, test_session_factory):
    """FastAPI test client whose pool handle points at the SQLite engine."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db_manager = None
