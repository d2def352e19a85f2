from uuid import uuid4
from sqlalchemy import Column, String, Boolean, DateTime, Integer, ForeignKey
from sqlalchemy.orm import composite

from src.models.base import Base, AuditFields, utcnow
from src.models.custom_types import UUIDType, Money


class MenuItem(Base):
    """
    Model for items on the restaurant menu.

    Items are never physically removed. A soft-deleted item has
    ``is_available`` false and ``deleted_at`` stamped, and is hidden from
    every listing and lookup by name.

    Attributes:
        id (UUID): Primary key, automatically generated UUID
        name (str): Item name shown to guests
        description (str): Optional free text
        price (Decimal): Non-negative price, two fractional digits
        category_id (UUID): Foreign key to the categories table
        is_available (bool): Whether the item can be ordered
        version (int): Row token bumped on every write
        audit (AuditFields): created/updated/deleted timestamps
    """
    __tablename__ = "menu_items"

    id = Column(UUIDType, primary_key=True, default=uuid4)
    name = Column(String(200), nullable=False)
    description = Column(String)
    price = Column(Money, nullable=False)
    category_id = Column(UUIDType, ForeignKey("categories.id"), nullable=False)
    is_available = Column(Boolean, nullable=False, default=True)
    version = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)
    deleted_at = Column(DateTime(timezone=True))

    audit = composite(AuditFields, created_at, updated_at, deleted_at)

    def __repr__(self):
        return f"<MenuItem {self.name}>"
