"""
Integration tests for the menu catalog repository.

These tests verify that:
1. Listings only ever contain available items
2. Category and name lookups are case-insensitive and report misses as errors
3. Writes resolve categories, replace fields wholesale and soft-delete
4. Row versions reject stale updates when the caller asks for the check
"""

import pytest
from decimal import Decimal
from uuid import uuid4

from src.models import MenuItem
from tests.utils import make_payload, count_menu_items

@pytest.mark.asyncio
async def test_list_available_on_empty_catalog(menu_item_repository):
    response = await menu_item_repository.get_available_menu_items()

    assert response.success is True
    assert response.data == []

@pytest.mark.asyncio
async def test_add_and_find_by_name(menu_item_repository, categories, burger_payload):
    """Adding Burger to Mains makes it findable by name in any case."""
    added = await menu_item_repository.add_menu_item(burger_payload)

    assert added.success is True
    assert added.message == "Menu item added successfully"
    assert added.data.name == "Burger"
    assert added.data.category == "Mains"
    assert added.data.price == Decimal("9.99")
    assert added.data.is_available is True

    found = await menu_item_repository.get_menu_item_by_name("burger")

    assert found.success is True
    assert found.data == added.data

@pytest.mark.asyncio
async def test_add_with_category_in_other_case(menu_item_repository, categories):
    response = await menu_item_repository.add_menu_item(make_payload("Lemonade", "drinks"))

    assert response.success is True
    assert response.data.category == "Drinks"

@pytest.mark.asyncio
async def test_add_unknown_category_writes_nothing(menu_item_repository, categories, db_session):
    response = await menu_item_repository.add_menu_item(make_payload("Tiramisu", "Desserts"))

    assert response.success is False
    assert response.message == "Category not found."
    assert response.data is None
    assert await count_menu_items(db_session) == 0

@pytest.mark.asyncio
@pytest.mark.parametrize("category", [None, "", "   "])
async def test_add_blank_category(menu_item_repository, categories, db_session, category):
    response = await menu_item_repository.add_menu_item(make_payload("Soup", category))

    assert response.success is False
    assert response.message == "Category cannot be empty."
    assert await count_menu_items(db_session) == 0

@pytest.mark.asyncio
async def test_list_available_excludes_unavailable(menu_item_repository, categories):
    await menu_item_repository.add_menu_item(make_payload("Burger", "Mains"))
    await menu_item_repository.add_menu_item(make_payload("Seasonal Pie", "Mains", is_available=False))
    wings = await menu_item_repository.add_menu_item(make_payload("Wings", "Appetizers"))
    await menu_item_repository.delete_menu_item(wings.data.id)

    response = await menu_item_repository.get_available_menu_items()

    assert response.success is True
    assert [item.name for item in response.data] == ["Burger"]
    assert all(item.is_available for item in response.data)

@pytest.mark.asyncio
async def test_list_available_reports_unknown_category(menu_item_repository, categories, db_session):
    db_session.add(MenuItem(name="Mystery Dish", price=Decimal("3.00"), category_id=uuid4(), is_available=True))
    await db_session.commit()

    response = await menu_item_repository.get_available_menu_items()

    assert response.success is True
    assert response.data[0].name == "Mystery Dish"
    assert response.data[0].category == "Unknown"

@pytest.mark.asyncio
async def test_list_by_category(menu_item_repository, categories):
    await menu_item_repository.add_menu_item(make_payload("Burger", "Mains"))
    await menu_item_repository.add_menu_item(make_payload("Steak", "Mains"))
    await menu_item_repository.add_menu_item(make_payload("Wings", "Appetizers"))

    response = await menu_item_repository.get_menu_items_by_category("MAINS")

    assert response.success is True
    assert sorted(item.name for item in response.data) == ["Burger", "Steak"]
    assert {item.category for item in response.data} == {"Mains"}

@pytest.mark.asyncio
async def test_list_by_category_with_no_available_items(menu_item_repository, categories):
    """A specific category with nothing available is an error, not an empty success."""
    await menu_item_repository.add_menu_item(make_payload("Seasonal Pie", "Mains", is_available=False))

    response = await menu_item_repository.get_menu_items_by_category("Mains")

    assert response.success is False
    assert response.message == "No menu items found for the specified category."
    assert response.data is None

@pytest.mark.asyncio
async def test_list_by_category_skips_deleted(menu_item_repository, categories):
    burger = await menu_item_repository.add_menu_item(make_payload("Burger", "Mains"))
    await menu_item_repository.add_menu_item(make_payload("Steak", "Mains"))
    await menu_item_repository.delete_menu_item(burger.data.id)

    response = await menu_item_repository.get_menu_items_by_category("mains")

    assert response.success is True
    assert [item.name for item in response.data] == ["Steak"]

@pytest.mark.asyncio
@pytest.mark.parametrize("category", [None, "", "  "])
async def test_list_by_blank_category(menu_item_repository, category):
    response = await menu_item_repository.get_menu_items_by_category(category)

    assert response.success is False
    assert response.message == "Category cannot be empty."

@pytest.mark.asyncio
async def test_find_by_name_misses(menu_item_repository, categories):
    await menu_item_repository.add_menu_item(make_payload("Burger", "Mains"))

    blank = await menu_item_repository.get_menu_item_by_name("  ")
    partial = await menu_item_repository.get_menu_item_by_name("Burg")

    assert blank.success is False
    assert blank.message == "Menu item name cannot be empty."
    assert partial.success is False
    assert partial.message == "Menu item not found."

@pytest.mark.asyncio
async def test_find_by_name_skips_deleted(menu_item_repository, categories):
    added = await menu_item_repository.add_menu_item(make_payload("Burger", "Mains"))
    await menu_item_repository.delete_menu_item(added.data.id)

    response = await menu_item_repository.get_menu_item_by_name("Burger")

    assert response.success is False
    assert response.message == "Menu item not found."

@pytest.mark.asyncio
async def test_update_replaces_all_fields(menu_item_repository, categories, db_session):
    added = await menu_item_repository.add_menu_item(make_payload("Burger", "Mains", price="9.99"))

    response = await menu_item_repository.update_menu_item(
        added.data.id,
        make_payload("Veggie Burger", "appetizers", price="8.50", is_available=False)
    )

    assert response.success is True
    assert response.message == "Menu item updated successfully"
    assert response.data.id == added.data.id
    assert response.data.name == "Veggie Burger"
    assert response.data.description is None
    assert response.data.price == Decimal("8.50")
    assert response.data.category == "Appetizers"
    assert response.data.is_available is False

    stored = await db_session.get(MenuItem, added.data.id)
    assert stored.name == "Veggie Burger"
    assert stored.category_id == categories["Appetizers"].id
    assert stored.version == 2

@pytest.mark.asyncio
async def test_update_missing_item(menu_item_repository, categories):
    response = await menu_item_repository.update_menu_item(uuid4(), make_payload("Ghost", "Mains"))

    assert response.success is False
    assert response.message == "Menu item not found."

@pytest.mark.asyncio
async def test_update_unknown_category(menu_item_repository, categories, db_session):
    added = await menu_item_repository.add_menu_item(make_payload("Burger", "Mains"))

    response = await menu_item_repository.update_menu_item(added.data.id, make_payload("Burger", "Desserts"))

    assert response.success is False
    assert response.message == "Category not found."
    stored = await db_session.get(MenuItem, added.data.id)
    assert stored.category_id == categories["Mains"].id

@pytest.mark.asyncio
@pytest.mark.parametrize("category", [None, "", "   "])
async def test_update_blank_category(menu_item_repository, categories, db_session, category):
    added = await menu_item_repository.add_menu_item(make_payload("Burger", "Mains"))

    response = await menu_item_repository.update_menu_item(
        added.data.id, make_payload("Veggie Burger", category, price="8.50")
    )

    assert response.success is False
    assert response.message == "Category cannot be empty."
    stored = await db_session.get(MenuItem, added.data.id)
    assert stored.name == "Burger"
    assert stored.version == 1

@pytest.mark.asyncio
async def test_update_restores_soft_deleted_item(menu_item_repository, categories, db_session):
    """Updates work on the raw row; making a deleted item available clears its deletion stamp."""
    added = await menu_item_repository.add_menu_item(make_payload("Burger", "Mains"))
    await menu_item_repository.delete_menu_item(added.data.id)

    response = await menu_item_repository.update_menu_item(added.data.id, make_payload("Burger", "Mains"))

    assert response.success is True
    stored = await db_session.get(MenuItem, added.data.id)
    assert stored.is_available is True
    assert stored.deleted_at is None
    listed = await menu_item_repository.get_available_menu_items()
    assert [item.id for item in listed.data] == [added.data.id]

@pytest.mark.asyncio
async def test_update_keeps_deletion_stamp_when_unavailable(menu_item_repository, categories, db_session):
    """Editing a deleted item without making it available leaves it deleted."""
    added = await menu_item_repository.add_menu_item(make_payload("Burger", "Mains"))
    await menu_item_repository.delete_menu_item(added.data.id)
    deleted_at = (await db_session.get(MenuItem, added.data.id)).deleted_at

    response = await menu_item_repository.update_menu_item(
        added.data.id, make_payload("Burger", "Mains", price="12.00", is_available=False)
    )

    assert response.success is True
    assert response.data.is_available is False
    stored = await db_session.get(MenuItem, added.data.id)
    assert stored.price == Decimal("12.00")
    assert stored.deleted_at is not None
    assert stored.deleted_at == deleted_at
    listed = await menu_item_repository.get_available_menu_items()
    assert listed.data == []

@pytest.mark.asyncio
async def test_update_with_expected_version(menu_item_repository, categories, db_session):
    added = await menu_item_repository.add_menu_item(make_payload("Burger", "Mains"))

    first = await menu_item_repository.update_menu_item(
        added.data.id, make_payload("Burger", "Mains", price="10.49"), expected_version=1
    )
    stale = await menu_item_repository.update_menu_item(
        added.data.id, make_payload("Burger", "Mains", price="11.00"), expected_version=1
    )

    assert first.success is True
    assert stale.success is False
    assert stale.message == "Menu item was modified by another request."
    stored = await db_session.get(MenuItem, added.data.id)
    assert stored.price == Decimal("10.49")
    assert stored.version == 2

@pytest.mark.asyncio
async def test_delete_is_repeatable(menu_item_repository, categories, db_session):
    """Deleting twice succeeds both times and the item stays out of listings."""
    added = await menu_item_repository.add_menu_item(make_payload("Burger", "Mains"))

    first = await menu_item_repository.delete_menu_item(added.data.id)

    second = await menu_item_repository.delete_menu_item(added.data.id)
    stored = await db_session.get(MenuItem, added.data.id)

    assert first.success is True
    assert first.message == "Menu item deleted successfully"
    assert first.data == "Menu item is marked unavailable."
    assert second.success is True
    assert stored.is_available is False
    assert stored.deleted_at is not None
    assert stored.audit.is_deleted
    assert await count_menu_items(db_session) == 1

    listed = await menu_item_repository.get_available_menu_items()
    assert listed.success is True
    assert listed.data == []

@pytest.mark.asyncio
async def test_delete_missing_item(menu_item_repository):
    response = await menu_item_repository.delete_menu_item(uuid4())

    assert response.success is False
    assert response.message == "Menu item not found."
