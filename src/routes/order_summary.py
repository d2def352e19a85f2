"""
Router for order summary endpoints.
"""

from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.utils.database import get_db
from src.utils.api_response import envelope_response
from src.services.order_summary_service import OrderSummaryService
from src.schemas.order_summary import SubTotalUpdate

router = APIRouter(
    prefix="/api/order-summaries",
    tags=["order-summaries"]
)


def get_order_summary_service(db: AsyncSession = Depends(get_db)) -> OrderSummaryService:
    """Get an order summary service bound to the request's session."""
    return OrderSummaryService(db)

@router.post("/tables/{table_id}/finalize")
async def finalize_table_orders(table_id: UUID, service: OrderSummaryService = Depends(get_order_summary_service)):
    """Roll a table's active orders into a new summary"""
    return envelope_response(
        await service.finalize_table_orders(table_id),
        success_status=status.HTTP_201_CREATED
    )

@router.get("/{summary_id}")
async def get_order_summary(summary_id: UUID, service: OrderSummaryService = Depends(get_order_summary_service)):
    """Get a summary with its orders"""
    return envelope_response(await service.get_order_summary(summary_id))

@router.put("/{summary_id}/subtotal")
async def update_sub_total(
    summary_id: UUID,
    payload: SubTotalUpdate,
    service: OrderSummaryService = Depends(get_order_summary_service)
):
    """Replace a summary's subtotal and recompute its totals"""
    return envelope_response(await service.update_sub_total(summary_id, payload.sub_total_amount))
