"""
Base repository pattern implementation for database operations.

This module provides a generic async repository that specific model
repositories extend. It covers the store capabilities the domain core
relies on: lookup by identity, predicate-filtered queries, staging new
rows, and committing or rolling back the current unit of work.
"""

from typing import List, Optional, Any, TypeVar, Generic, Type
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from src.models.base import Base

# Type variable for the model
T = TypeVar('T', bound=Base)

logger = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    """
    Generic async repository for database operations.

    Attributes:
        db (AsyncSession): SQLAlchemy async session, one per unit of work
        model (Type[T]): SQLAlchemy model class
    """

    def __init__(self, db: AsyncSession, model: Type[T]):
        """
        Initialize the repository with a database session and model class.

        Args:
            db (AsyncSession): SQLAlchemy async session
            model (Type[T]): SQLAlchemy model class
        """
        self.db = db
        self.model = model

    async def get_by_id(self, id: Any) -> Optional[T]:
        """
        Get a record by primary key, regardless of soft-delete state.

        Args:
            id (Any): Primary key value

        Returns:
            Optional[T]: Model instance if found, None otherwise
        """
        return await self.db.get(self.model, id)

    async def find_all(self, *criteria, order_by=None) -> List[T]:
        """
        Get all records matching the given SQL expressions.

        Args:
            *criteria: SQLAlchemy boolean expressions combined with AND
            order_by: Optional ordering clause

        Returns:
            List[T]: Matching model instances
        """
        stmt = select(self.model).where(*criteria)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find_first(self, *criteria) -> Optional[T]:
        """
        Get the first record matching the given SQL expressions.

        Args:
            *criteria: SQLAlchemy boolean expressions combined with AND

        Returns:
            Optional[T]: Model instance if found, None otherwise
        """
        result = await self.db.execute(select(self.model).where(*criteria).limit(1))
        return result.scalars().first()

    async def add(self, db_item: T) -> T:
        """
        Stage a new record and flush so its identity is assigned.

        Args:
            db_item (T): Transient model instance

        Returns:
            T: The same instance, now pending with its primary key set
        """
        self.db.add(db_item)
        await self.db.flush()
        return db_item

    async def commit(self) -> None:
        """Commit the current unit of work."""
        await self.db.commit()

    async def rollback(self) -> None:
        """Discard the current unit of work."""
        await self.db.rollback()
