"""
This package contains repository implementations for database operations.

Repositories provide a clean abstraction layer for database access,
implementing the repository pattern to separate business logic from
data access concerns.
"""

from src.repositories.category import CategoryRepository
from src.repositories.menu_item import MenuItemRepository
from src.repositories.order_summary import OrderSummaryRepository

__all__ = ['CategoryRepository', 'MenuItemRepository', 'OrderSummaryRepository']
