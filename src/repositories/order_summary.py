"""
Repository for OrderSummary and Order operations.

Orders point at their summary through ``Order.summary_id``; the orders of
a summary are always loaded with an explicit query on that key.
"""

from typing import List
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from src.exceptions import InconsistentOrderTotalsError
from src.repositories.base import BaseRepository
from src.models.order import Order, OrderSummary, ORDER_STATUS_ACTIVE

logger = logging.getLogger(__name__)

class OrderSummaryRepository(BaseRepository[OrderSummary]):
    """
    Repository for OrderSummary database operations.

    This class extends the BaseRepository with order lookups and a guarded
    save that refuses summaries whose totals are stale.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(db, OrderSummary)

    async def _find_orders(self, *criteria) -> List[Order]:
        result = await self.db.execute(
            select(Order).where(*criteria).order_by(Order.created_at, Order.id)
        )
        return list(result.scalars().all())

    async def get_orders(self, summary_id: UUID) -> List[Order]:
        """
        Get the orders rolled into a summary, oldest first.

        Args:
            summary_id (UUID): OrderSummary ID

        Returns:
            List[Order]: Orders whose summary_id matches
        """
        return await self._find_orders(Order.summary_id == summary_id)

    async def get_active_orders_for_table(self, table_id: UUID) -> List[Order]:
        """
        Get the table's orders that have not been rolled into a summary yet.

        Args:
            table_id (UUID): Table ID

        Returns:
            List[Order]: Active, unsummarized orders, oldest first
        """
        return await self._find_orders(
            Order.table_id == table_id,
            Order.status == ORDER_STATUS_ACTIVE,
            Order.summary_id.is_(None)
        )

    async def save(self, summary: OrderSummary) -> OrderSummary:
        """
        Stage a summary for the current unit of work.

        Args:
            summary (OrderSummary): Summary to stage

        Returns:
            OrderSummary: The staged summary

        Raises:
            InconsistentOrderTotalsError: If tax/total do not match the subtotal
        """
        if not summary.totals_consistent:
            raise InconsistentOrderTotalsError(
                f"Order summary {summary.id} must have calculate_totals() called before it is saved"
            )
        if summary not in self.db:
            return await self.add(summary)
        await self.db.flush()
        return summary
