"""
Service for order summaries.

This module handles:
- Computing tax and total for a summary at the fixed 7.25% rate
- Rolling a table's active orders into a new summary
- Replacing a summary's subtotal and recomputing its totals
- Loading a summary together with its orders
"""

import logging
from decimal import Decimal
from typing import List
from uuid import UUID
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.order import Order, OrderSummary, ORDER_STATUS_FINALIZED, to_cents
from src.repositories.order_summary import OrderSummaryRepository
from src.schemas.order_summary import OrderResponse, OrderSummaryResponse
from src.schemas.response import ServiceResponse, describe_failure

logger = logging.getLogger(__name__)


def calculate_totals(summary: OrderSummary) -> OrderSummary:
    """
    Recompute tax and total of ``summary`` from its subtotal.

    Args:
        summary: Summary whose subtotal was just set or changed

    Returns:
        The same summary, now consistent
    """
    summary.calculate_totals()
    return summary


def to_summary_response(summary: OrderSummary, orders: List[Order]) -> OrderSummaryResponse:
    return OrderSummaryResponse(
        id=summary.id,
        sub_total_amount=summary.sub_total_amount,
        tax_amount=summary.tax_amount,
        total_amount=summary.total_amount,
        table_id=summary.table_id,
        table_number=summary.table_number,
        user_id=summary.user_id,
        user_full_name=summary.user_full_name,
        orders=[OrderResponse.model_validate(order) for order in orders]
    )


class OrderSummaryService:
    """Service for building and maintaining order summaries."""

    def __init__(self, db_session: AsyncSession):
        """Initialize the service.

        Args:
            db_session: The database session
        """
        self.db_session = db_session
        self.repository = OrderSummaryRepository(db_session)

    def calculate_totals(self, summary: OrderSummary) -> OrderSummary:
        return calculate_totals(summary)

    async def finalize_table_orders(self, table_id: UUID) -> ServiceResponse[OrderSummaryResponse]:
        """
        Roll the table's active orders into a new summary.

        The summary, its totals and the orders' link to it are committed
        together.

        Args:
            table_id: The table being settled

        Returns:
            ServiceResponse with the new summary, or an error if the table
            has no active orders
        """
        try:
            orders = await self.repository.get_active_orders_for_table(table_id)
            if not orders:
                logger.warning(f"No active orders to finalize for table {table_id}")
                return ServiceResponse.error_response("No active orders found for the table.")

            first = orders[0]
            summary = OrderSummary(
                sub_total_amount=sum((order.line_total for order in orders), Decimal("0.00")),
                table_id=first.table_id,
                table_number=first.table_number,
                user_id=first.user_id,
                user_full_name=first.user_full_name
            )
            self.calculate_totals(summary)
            await self.repository.save(summary)

            for order in orders:
                order.summary_id = summary.id
                order.status = ORDER_STATUS_FINALIZED

            response = to_summary_response(summary, orders)
            await self.repository.commit()

            logger.info(
                f"Finalized {len(orders)} orders for table {first.table_number} "
                f"into summary {summary.id} (total {summary.total_amount})"
            )
            return ServiceResponse.success_response("Order summary created successfully", response)

        except SQLAlchemyError as e:
            await self.repository.rollback()
            logger.error(f"Database error in finalize_table_orders: {str(e)}", exc_info=True)
            return ServiceResponse.error_response(
                f"An error occurred while creating the order summary: {describe_failure(e)}"
            )

    async def update_sub_total(self, summary_id: UUID, sub_total_amount: Decimal) -> ServiceResponse[OrderSummaryResponse]:
        """
        Replace a summary's subtotal and recompute its totals.

        Args:
            summary_id: The summary to change
            sub_total_amount: New subtotal, must not be negative; rounded
                half-up to cents before it is stored

        Returns:
            ServiceResponse with the updated summary or an error
        """
        if sub_total_amount < 0:
            return ServiceResponse.error_response("Subtotal cannot be negative.")

        try:
            summary = await self.repository.get_by_id(summary_id)
            if summary is None:
                return ServiceResponse.error_response("Order summary not found.")

            summary.sub_total_amount = to_cents(sub_total_amount)
            self.calculate_totals(summary)
            await self.repository.save(summary)

            orders = await self.repository.get_orders(summary.id)
            response = to_summary_response(summary, orders)
            await self.repository.commit()

            logger.info(f"Updated subtotal of summary {summary.id} to {summary.sub_total_amount}")
            return ServiceResponse.success_response("Order summary updated successfully", response)

        except SQLAlchemyError as e:
            await self.repository.rollback()
            logger.error(f"Database error in update_sub_total: {str(e)}", exc_info=True)
            return ServiceResponse.error_response(
                f"An error occurred while updating the order summary: {describe_failure(e)}"
            )

    async def get_order_summary(self, summary_id: UUID) -> ServiceResponse[OrderSummaryResponse]:
        """
        Get a summary together with its orders.

        Args:
            summary_id: The summary to load

        Returns:
            ServiceResponse with the summary or an error
        """
        try:
            summary = await self.repository.get_by_id(summary_id)
            if summary is None:
                return ServiceResponse.error_response("Order summary not found.")

            orders = await self.repository.get_orders(summary.id)
            return ServiceResponse.success_response(
                "Order summary fetched successfully",
                to_summary_response(summary, orders)
            )
        except SQLAlchemyError as e:
            await self.repository.rollback()
            logger.error(f"Database error in get_order_summary: {str(e)}", exc_info=True)
            return ServiceResponse.error_response(
                f"An error occurred while fetching the order summary: {describe_failure(e)}"
            )
