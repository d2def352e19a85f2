"""
Repository for Category lookups.

Categories are referred to by name in every catalog write. Resolution is a
single exact match after lower-casing both sides with the database's
``lower()``, so the stored name and the lookup are always folded the same
way. On SQLite that folds ASCII letters only: "CAFÉ" and "café" are
different names there. There is no partial or fuzzy matching and no
locale-aware collation.
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from src.repositories.base import BaseRepository
from src.models.category import Category

logger = logging.getLogger(__name__)

class CategoryRepository(BaseRepository[Category]):
    """Read-only access to menu categories."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Category)

    async def resolve(self, name: Optional[str]) -> Optional[Category]:
        """
        Resolve a free-text category name to its record.

        Args:
            name (str): Category name as typed by the caller

        Returns:
            Optional[Category]: The matching category, or None when the name
            is blank or nothing matches
        """
        if name is None or not name.strip():
            return None
        category = await self.find_first(func.lower(self.model.name) == func.lower(name))
        if category is None:
            logger.debug(f"No category matches {name!r}")
        return category

    async def list_categories(self) -> List[Category]:
        """
        Get every category, ordered by name.

        Returns:
            List[Category]: All categories
        """
        return await self.find_all(order_by=self.model.name)
