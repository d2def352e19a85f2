"""
Router for menu catalog endpoints.

This module exposes the menu item repository over HTTP:
- Listing available items, by category or by name
- Creating, replacing and soft-deleting items
- Listing categories
"""

import logging
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from src.utils.database import get_db
from src.utils.api_response import envelope_response, success_response
from src.repositories.category import CategoryRepository
from src.repositories.menu_item import MenuItemRepository
from src.schemas.menu_item import MenuItemCreateUpdate, CategoryResponse

router = APIRouter(
    prefix="/api/menu",
    tags=["menu"]
)

logger = logging.getLogger(__name__)

def get_menu_item_repository(db: AsyncSession = Depends(get_db)) -> MenuItemRepository:
    """Get a menu item repository bound to the request's session."""
    return MenuItemRepository(db)

@router.get("/")
async def get_available_menu_items(repository: MenuItemRepository = Depends(get_menu_item_repository)):
    """List every available menu item"""
    return envelope_response(await repository.get_available_menu_items())

@router.get("/categories")
async def get_categories(db: AsyncSession = Depends(get_db)):
    """List all categories"""
    categories = await CategoryRepository(db).list_categories()
    data = [CategoryResponse.model_validate(category).model_dump(mode="json") for category in categories]
    return JSONResponse(content=success_response(data, "Categories fetched successfully"))

@router.get("/category/{category}")
async def get_menu_items_by_category(category: str, repository: MenuItemRepository = Depends(get_menu_item_repository)):
    """List available menu items in one category"""
    return envelope_response(await repository.get_menu_items_by_category(category))

@router.get("/name/{name}")
async def get_menu_item_by_name(name: str, repository: MenuItemRepository = Depends(get_menu_item_repository)):
    """Get an available menu item by name"""
    return envelope_response(await repository.get_menu_item_by_name(name))

@router.post("/")
async def add_menu_item(payload: MenuItemCreateUpdate, repository: MenuItemRepository = Depends(get_menu_item_repository)):
    """Create a menu item"""
    logger.info(f"Adding menu item {payload.name!r} to category {payload.category!r}")
    return envelope_response(
        await repository.add_menu_item(payload),
        success_status=status.HTTP_201_CREATED
    )

@router.put("/{menu_item_id}")
async def update_menu_item(
    menu_item_id: UUID,
    payload: MenuItemCreateUpdate,
    expected_version: Optional[int] = Query(None, description="Reject the update unless the item still has this version"),
    repository: MenuItemRepository = Depends(get_menu_item_repository)
):
    """Replace every field of a menu item"""
    return envelope_response(await repository.update_menu_item(menu_item_id, payload, expected_version))

@router.delete("/{menu_item_id}")
async def delete_menu_item(menu_item_id: UUID, repository: MenuItemRepository = Depends(get_menu_item_repository)):
    """Soft-delete a menu item"""
    return envelope_response(await repository.delete_menu_item(menu_item_id))
