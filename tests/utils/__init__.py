"""
Test utilities for the restaurant core.

This module provides common helpers for building payloads and inspecting
the test database.
"""

from decimal import Decimal
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from src.models import MenuItem
from src.schemas.menu_item import MenuItemCreateUpdate

def make_payload(name: str, category: str, price: str = "5.00", is_available: bool = True) -> MenuItemCreateUpdate:
    """Build a create/update payload with sensible defaults."""
    return MenuItemCreateUpdate(
        name=name,
        description=None,
        price=Decimal(price),
        category=category,
        is_available=is_available
    )

async def count_menu_items(db_session: AsyncSession) -> int:
    """Count menu item rows, soft-deleted ones included."""
    result = await db_session.execute(select(func.count()).select_from(MenuItem))
    return result.scalar_one()
