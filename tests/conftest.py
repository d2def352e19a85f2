"""
Pytest configuration and fixtures for testing.

Every test gets its own in-memory SQLite database, so tests never see
each other's rows.
"""

import os
import pytest
import pytest_asyncio
from decimal import Decimal
from typing import AsyncGenerator
from uuid import uuid4
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Set testing environment before the application modules read it
os.environ["TESTING"] = "true"

from src.models.base import Base
from src.models import Category, MenuItem, Order
from src.repositories.category import CategoryRepository
from src.repositories.menu_item import MenuItemRepository
from src.schemas.menu_item import MenuItemCreateUpdate
from src.services.order_summary_service import OrderSummaryService

TEST_DATABASE_URL = "sqlite+aiosqlite://"

@pytest_asyncio.fixture
async def engine():
    """Create a test database engine with a fresh schema."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()

@pytest_asyncio.fixture
async def db_session(engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with session_factory() as session:
        yield session

@pytest_asyncio.fixture
async def categories(db_session):
    """Seed the categories used throughout the tests."""
    seeded = {
        name: Category(name=name, description=f"{name} on the menu")
        for name in ("Mains", "Appetizers", "Drinks")
    }
    db_session.add_all(seeded.values())
    await db_session.commit()
    return seeded

@pytest.fixture
def category_repository(db_session) -> CategoryRepository:
    return CategoryRepository(db_session)

@pytest.fixture
def menu_item_repository(db_session) -> MenuItemRepository:
    return MenuItemRepository(db_session)

@pytest.fixture
def order_summary_service(db_session) -> OrderSummaryService:
    return OrderSummaryService(db_session)

@pytest.fixture
def burger_payload() -> MenuItemCreateUpdate:
    return MenuItemCreateUpdate(
        name="Burger",
        description="Beef patty, cheddar, brioche bun",
        price=Decimal("9.99"),
        category="Mains",
        is_available=True
    )

@pytest_asyncio.fixture
async def table_orders(db_session, categories):
    """Two active order lines at one table, worth 100.00 before tax."""
    menu_item = MenuItem(
        name="Steak",
        price=Decimal("75.00"),
        category_id=categories["Mains"].id,
        is_available=True
    )
    db_session.add(menu_item)
    await db_session.flush()

    table_id = uuid4()
    user_id = uuid4()
    orders = [
        Order(
            table_id=table_id,
            table_number=7,
            user_id=user_id,
            user_full_name="Ada Lovelace",
            menu_item_id=menu_item.id,
            quantity=2,
            unit_price=Decimal("12.50")
        ),
        Order(
            table_id=table_id,
            table_number=7,
            user_id=user_id,
            user_full_name="Ada Lovelace",
            menu_item_id=menu_item.id,
            quantity=1,
            unit_price=Decimal("75.00")
        ),
    ]
    db_session.add_all(orders)
    await db_session.commit()
    return {"table_id": table_id, "user_id": user_id, "orders": orders}
