"""
Pydantic models for menu item requests and responses.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field


class MenuItemCreateUpdate(BaseModel):
    """Payload for creating a menu item or replacing all of its fields"""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
    category: Optional[str] = None
    is_available: bool = True


class MenuItemResponse(BaseModel):
    """Projection of a menu item with its category name resolved"""
    id: UUID
    name: str
    description: Optional[str] = None
    price: Decimal
    category: str
    is_available: bool

    model_config = ConfigDict(from_attributes=True)


class CategoryResponse(BaseModel):
    """Model for category response"""
    id: UUID
    name: str
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
