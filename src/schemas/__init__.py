"""
This package contains Pydantic models for request/response validation.
"""

from src.schemas.response import ServiceResponse, describe_failure
from src.schemas.menu_item import (
    MenuItemCreateUpdate,
    MenuItemResponse,
    CategoryResponse
)
from src.schemas.order_summary import (
    OrderResponse,
    OrderSummaryResponse,
    SubTotalUpdate
)

__all__ = [
    'ServiceResponse',
    'describe_failure',
    'MenuItemCreateUpdate',
    'MenuItemResponse',
    'CategoryResponse',
    'OrderResponse',
    'OrderSummaryResponse',
    'SubTotalUpdate'
]
