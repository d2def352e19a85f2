"""
Order and order summary models.

An ``Order`` is a single line (one menu item, a quantity and a unit price)
placed at a table. When the table settles up, its active orders are rolled
into one ``OrderSummary`` and each order records the summary's id in
``summary_id``. There is no navigable relationship between the two; the
orders of a summary are loaded with an explicit query on that key.

Tax and total on a summary are derived values. They are only ever written
by ``OrderSummary.calculate_totals()``, which must be called after every
change to ``sub_total_amount``.
"""

from decimal import Decimal, ROUND_HALF_UP
from uuid import uuid4
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import composite

from src.models.base import Base, AuditFields, utcnow
from src.models.custom_types import UUIDType, Money, TaxMoney

TAX_RATE = Decimal("0.0725")
CENTS = Decimal("0.01")

ORDER_STATUS_ACTIVE = "active"
ORDER_STATUS_FINALIZED = "finalized"


def to_cents(amount) -> Decimal:
    """``amount`` as a Decimal rounded half-up to two fractional digits."""
    return Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)


def compute_tax(sub_total: Decimal) -> Decimal:
    """Tax owed on ``sub_total`` at the fixed rate, rounded half-up to cents."""
    return (Decimal(sub_total) * TAX_RATE).quantize(CENTS, rounding=ROUND_HALF_UP)


class Order(Base):
    """
    Model for a single order line placed at a table.

    Attributes:
        id (UUID): Primary key, automatically generated UUID
        summary_id (UUID): Owning order summary, set when the table is finalized
        table_id (UUID): Table the order was placed at
        table_number (int): Human-facing table number
        user_id (UUID): Guest or staff member who placed the order
        user_full_name (str): Display name of that user
        menu_item_id (UUID): Ordered menu item
        quantity (int): Number of portions
        unit_price (Decimal): Price per portion at the time of ordering
        status (str): "active" until rolled into a summary, then "finalized"
    """
    __tablename__ = "orders"

    id = Column(UUIDType, primary_key=True, default=uuid4)
    summary_id = Column(UUIDType, ForeignKey("order_summaries.id"), index=True)
    table_id = Column(UUIDType, nullable=False, index=True)
    table_number = Column(Integer, nullable=False)
    user_id = Column(UUIDType, nullable=False)
    user_full_name = Column(String, nullable=False, default="")
    menu_item_id = Column(UUIDType, ForeignKey("menu_items.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    unit_price = Column(Money, nullable=False)
    status = Column(String(20), nullable=False, default=ORDER_STATUS_ACTIVE)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)
    deleted_at = Column(DateTime(timezone=True))

    audit = composite(AuditFields, created_at, updated_at, deleted_at)

    @property
    def line_total(self) -> Decimal:
        return Decimal(self.unit_price) * self.quantity

    def __repr__(self):
        return f"<Order {self.id} x{self.quantity}>"


class OrderSummary(Base):
    """
    Model for the bill of one table session.

    Attributes:
        id (UUID): Primary key, automatically generated UUID
        sub_total_amount (Decimal): Sum of the order lines before tax
        tax_amount (Decimal): Derived, read-only
        total_amount (Decimal): Derived, read-only
        table_id (UUID): Table the summary was created for
        table_number (int): Human-facing table number
        user_id (UUID): User the bill is addressed to
        user_full_name (str): Display name of that user
    """
    __tablename__ = "order_summaries"

    id = Column(UUIDType, primary_key=True, default=uuid4)
    sub_total_amount = Column(Money, nullable=False, default=Decimal("0.00"))
    _tax_amount = Column("tax_amount", TaxMoney, nullable=False)
    _total_amount = Column("total_amount", Money, nullable=False)
    table_id = Column(UUIDType, nullable=False, index=True)
    table_number = Column(Integer, nullable=False)
    user_id = Column(UUIDType, nullable=False)
    user_full_name = Column(String, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)
    deleted_at = Column(DateTime(timezone=True))

    audit = composite(AuditFields, created_at, updated_at, deleted_at)

    def __init__(self, **kwargs):
        if "tax_amount" in kwargs or "total_amount" in kwargs:
            raise TypeError("tax_amount and total_amount are derived; call calculate_totals()")
        kwargs.setdefault("sub_total_amount", Decimal("0.00"))
        super().__init__(**kwargs)
        self._tax_amount = None
        self._total_amount = None

    @property
    def tax_amount(self) -> Decimal:
        return self._tax_amount

    @property
    def total_amount(self) -> Decimal:
        return self._total_amount

    def calculate_totals(self) -> None:
        """Round the subtotal to cents, then recompute tax and total from it."""
        sub_total = to_cents(self.sub_total_amount)
        self.sub_total_amount = sub_total
        self._tax_amount = compute_tax(sub_total)
        self._total_amount = sub_total + self._tax_amount

    @property
    def totals_consistent(self) -> bool:
        if self._tax_amount is None or self._total_amount is None:
            return False
        sub_total = Decimal(self.sub_total_amount)
        if sub_total != to_cents(sub_total):
            return False
        tax = compute_tax(sub_total)
        return Decimal(self._tax_amount) == tax and Decimal(self._total_amount) == sub_total + tax

    def __repr__(self):
        return f"<OrderSummary table={self.table_number} total={self.total_amount}>"
