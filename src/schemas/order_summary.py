"""
Pydantic models for order summaries.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field


class OrderResponse(BaseModel):
    """Model for a single order line"""
    id: UUID
    menu_item_id: UUID
    quantity: int
    unit_price: Decimal
    line_total: Decimal
    status: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class OrderSummaryResponse(BaseModel):
    """Model for an order summary with its order lines"""
    id: UUID
    sub_total_amount: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    table_id: UUID
    table_number: int
    user_id: UUID
    user_full_name: str
    orders: List[OrderResponse] = []

    model_config = ConfigDict(from_attributes=True)


class SubTotalUpdate(BaseModel):
    """Model for replacing a summary's subtotal"""
    sub_total_amount: Decimal = Field(..., max_digits=18, decimal_places=2)
