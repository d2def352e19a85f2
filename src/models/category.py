from uuid import uuid4
from sqlalchemy import Column, String, DateTime, Index, func
from sqlalchemy.orm import composite

from src.models.base import Base, AuditFields, utcnow
from src.models.custom_types import UUIDType


class Category(Base):
    """
    Model for menu categories (Mains, Appetizers, Drinks, ...).

    Categories are read-only from the catalog's point of view; menu items
    reference them by id and callers refer to them by name.

    Attributes:
        id (UUID): Primary key, automatically generated UUID
        name (str): Display name, unique regardless of case
        description (str): Optional free text
        audit (AuditFields): created/updated/deleted timestamps
    """
    __tablename__ = "categories"

    id = Column(UUIDType, primary_key=True, default=uuid4)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(String)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)
    deleted_at = Column(DateTime(timezone=True))

    audit = composite(AuditFields, created_at, updated_at, deleted_at)

    def __repr__(self):
        return f"<Category {self.name}>"


# "Mains" and "mains" are the same category
Index("uq_categories_name_lower", func.lower(Category.name), unique=True)
