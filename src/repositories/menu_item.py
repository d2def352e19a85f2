"""
Repository for the menu catalog.

This module owns the menu item lifecycle: listing what can be ordered,
filtering by category or name, creating items, replacing their fields and
soft-deleting them. Every operation reports its outcome through
``ServiceResponse``; store failures are rolled back and reported the same
way.

Name and category matching lower-cases both sides with the database's
``lower()``, which folds ASCII letters only on SQLite.
"""

from typing import Any, List, Optional
from uuid import UUID, uuid4
from sqlalchemy import select, update, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from src.repositories.base import BaseRepository
from src.repositories.category import CategoryRepository
from src.models.base import utcnow
from src.models.category import Category
from src.models.menu_item import MenuItem
from src.schemas.menu_item import MenuItemCreateUpdate, MenuItemResponse
from src.schemas.response import ServiceResponse, describe_failure

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "Unknown"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class MenuItemRepository(BaseRepository[MenuItem]):
    """
    Repository for MenuItem database operations.

    Reads never change state. Each write (add, update, delete) issues one
    change and commits it as a single unit of work.
    """

    def __init__(self, db: AsyncSession, categories: Optional[CategoryRepository] = None):
        """
        Initialize the repository with a database session.

        Args:
            db (AsyncSession): SQLAlchemy async session
            categories (CategoryRepository): Resolver for category names,
                built on the same session when omitted
        """
        super().__init__(db, MenuItem)
        self.categories = categories or CategoryRepository(db)

    def _projection(self):
        return (
            select(MenuItem, Category.name)
            .outerjoin(Category, MenuItem.category_id == Category.id)
        )

    @staticmethod
    def _to_response(menu_item: MenuItem, category_name: Optional[str]) -> MenuItemResponse:
        return MenuItemResponse(
            id=menu_item.id,
            name=menu_item.name,
            description=menu_item.description,
            price=menu_item.price,
            category=category_name if category_name is not None else UNKNOWN_CATEGORY,
            is_available=menu_item.is_available
        )

    async def _fetch_projection(self, *criteria, first: bool = False) -> Any:
        stmt = self._projection().where(MenuItem.is_available == True, *criteria).order_by(MenuItem.name)
        result = await self.db.execute(stmt)
        rows = result.all()
        if first:
            return self._to_response(*rows[0]) if rows else None
        return [self._to_response(item, category_name) for item, category_name in rows]

    async def get_available_menu_items(self) -> ServiceResponse[List[MenuItemResponse]]:
        """
        Get every menu item that can currently be ordered.

        Returns:
            ServiceResponse[List[MenuItemResponse]]: Success with a possibly
            empty list, or an error if the store fails
        """
        try:
            menu_items = await self._fetch_projection()
            return ServiceResponse.success_response("Menu items fetched successfully", menu_items)
        except SQLAlchemyError as e:
            await self.rollback()
            logger.error(f"Database error in get_available_menu_items: {str(e)}", exc_info=True)
            return ServiceResponse.error_response(
                f"An error occurred while fetching the menu items: {describe_failure(e)}"
            )

    async def get_menu_items_by_category(self, category: Optional[str]) -> ServiceResponse[List[MenuItemResponse]]:
        """
        Get available menu items in one category.

        Unlike ``get_available_menu_items``, an empty result is an error:
        asking for a specific category that has nothing to offer is a miss.

        Args:
            category (str): Category name, matched case-insensitively

        Returns:
            ServiceResponse[List[MenuItemResponse]]: Matching items or an error
        """
        if _is_blank(category):
            logger.warning("get_menu_items_by_category called with a blank category")
            return ServiceResponse.error_response("Category cannot be empty.")

        try:
            menu_items = await self._fetch_projection(func.lower(Category.name) == func.lower(category))
        except SQLAlchemyError as e:
            await self.rollback()
            logger.error(f"Database error in get_menu_items_by_category: {str(e)}", exc_info=True)
            return ServiceResponse.error_response(
                f"An error occurred while fetching the menu items: {describe_failure(e)}"
            )

        if not menu_items:
            return ServiceResponse.error_response("No menu items found for the specified category.")

        return ServiceResponse.success_response("Menu items fetched successfully", menu_items)

    async def get_menu_item_by_name(self, name: Optional[str]) -> ServiceResponse[MenuItemResponse]:
        """
        Get the first available menu item with the given name.

        Args:
            name (str): Item name, matched case-insensitively

        Returns:
            ServiceResponse[MenuItemResponse]: The item or an error
        """
        if _is_blank(name):
            logger.warning("get_menu_item_by_name called with a blank name")
            return ServiceResponse.error_response("Menu item name cannot be empty.")

        try:
            menu_item = await self._fetch_projection(func.lower(MenuItem.name) == func.lower(name), first=True)
        except SQLAlchemyError as e:
            await self.rollback()
            logger.error(f"Database error in get_menu_item_by_name: {str(e)}", exc_info=True)
            return ServiceResponse.error_response(
                f"An error occurred while fetching the menu item: {describe_failure(e)}"
            )

        if menu_item is None:
            return ServiceResponse.error_response("Menu item not found.")

        return ServiceResponse.success_response("Menu item fetched successfully", menu_item)

    async def add_menu_item(self, payload: MenuItemCreateUpdate) -> ServiceResponse[MenuItemResponse]:
        """
        Create a menu item in the named category.

        Args:
            payload (MenuItemCreateUpdate): Fields of the new item

        Returns:
            ServiceResponse[MenuItemResponse]: The created item or an error.
            Nothing is written when the category does not resolve.
        """
        if _is_blank(payload.category):
            logger.warning("add_menu_item called with a blank category")
            return ServiceResponse.error_response("Category cannot be empty.")

        try:
            category = await self.categories.resolve(payload.category)
            if category is None:
                logger.warning(f"Cannot add menu item {payload.name!r}: category {payload.category!r} not found")
                return ServiceResponse.error_response("Category not found.")

            menu_item = MenuItem(
                id=uuid4(),
                name=payload.name,
                description=payload.description,
                price=payload.price,
                category_id=category.id,
                is_available=payload.is_available,
                version=1
            )
            await self.add(menu_item)
            response = self._to_response(menu_item, category.name)
            await self.commit()

            logger.info(f"Added menu item {menu_item.id} ({menu_item.name})")
            return ServiceResponse.success_response("Menu item added successfully", response)

        except SQLAlchemyError as e:
            await self.rollback()
            logger.error(f"Database error in add_menu_item: {str(e)}", exc_info=True)
            return ServiceResponse.error_response(
                f"An error occurred while adding the menu item: {describe_failure(e)}"
            )

    async def update_menu_item(
        self,
        menu_item_id: UUID,
        payload: MenuItemCreateUpdate,
        expected_version: Optional[int] = None
    ) -> ServiceResponse[MenuItemResponse]:
        """
        Replace every editable field of a menu item.

        The current row is read, a complete new state is built from the
        payload and submitted as one UPDATE. Soft-deleted rows can be
        updated; making such an item available again clears ``deleted_at``.

        Args:
            menu_item_id (UUID): Item to update
            payload (MenuItemCreateUpdate): New field values
            expected_version (int): When given, the update is rejected unless
                the stored row still carries this version

        Returns:
            ServiceResponse[MenuItemResponse]: The updated item or an error
        """
        try:
            menu_item = await self.get_by_id(menu_item_id)
            if menu_item is None:
                return ServiceResponse.error_response("Menu item not found.")

            if _is_blank(payload.category):
                return ServiceResponse.error_response("Category cannot be empty.")

            category = await self.categories.resolve(payload.category)
            if category is None:
                logger.warning(f"Cannot update menu item {menu_item_id}: category {payload.category!r} not found")
                return ServiceResponse.error_response("Category not found.")

            if expected_version is not None and expected_version != menu_item.version:
                return ServiceResponse.error_response("Menu item was modified by another request.")

            now = utcnow()
            values = {
                "name": payload.name,
                "description": payload.description,
                "price": payload.price,
                "category_id": category.id,
                "is_available": payload.is_available,
                "version": menu_item.version + 1,
                "updated_at": now,
            }
            if payload.is_available:
                values["deleted_at"] = None

            stmt = update(MenuItem).where(MenuItem.id == menu_item.id)
            if expected_version is not None:
                stmt = stmt.where(MenuItem.version == expected_version)
            result = await self.db.execute(stmt.values(**values))

            if result.rowcount == 0:
                await self.rollback()
                return ServiceResponse.error_response("Menu item was modified by another request.")

            await self.commit()

            response = MenuItemResponse(
                id=menu_item.id,
                name=payload.name,
                description=payload.description,
                price=payload.price,
                category=category.name,
                is_available=payload.is_available
            )
            logger.info(f"Updated menu item {menu_item.id}")
            return ServiceResponse.success_response("Menu item updated successfully", response)

        except SQLAlchemyError as e:
            await self.rollback()
            logger.error(f"Database error in update_menu_item: {str(e)}", exc_info=True)
            return ServiceResponse.error_response(
                f"An error occurred while updating the menu item: {describe_failure(e)}"
            )

    async def delete_menu_item(self, menu_item_id: UUID) -> ServiceResponse[str]:
        """
        Soft-delete a menu item.

        Deleting an item that is already deleted succeeds again and moves
        ``deleted_at`` to the current time.

        Args:
            menu_item_id (UUID): Item to delete

        Returns:
            ServiceResponse[str]: Confirmation text or an error
        """
        try:
            menu_item = await self.get_by_id(menu_item_id)
            if menu_item is None:
                return ServiceResponse.error_response("Menu item not found.")

            now = utcnow()
            await self.db.execute(
                update(MenuItem)
                .where(MenuItem.id == menu_item.id)
                .values(
                    is_available=False,
                    deleted_at=now,
                    updated_at=now,
                    version=menu_item.version + 1
                )
            )
            await self.commit()

            logger.info(f"Soft-deleted menu item {menu_item.id}")
            return ServiceResponse.success_response(
                "Menu item deleted successfully",
                "Menu item is marked unavailable."
            )

        except SQLAlchemyError as e:
            await self.rollback()
            logger.error(f"Database error in delete_menu_item: {str(e)}", exc_info=True)
            return ServiceResponse.error_response(
                f"An error occurred while deleting the menu item: {describe_failure(e)}"
            )
