"""
Base model configuration for SQLAlchemy ORM.

This module defines the declarative base shared by every model and the
audit value object that each entity embeds as a composite of three columns
(created, updated and deleted timestamps).

Usage:
    from src.models.base import Base, AuditFields, utcnow

    class MyModel(Base):
        __tablename__ = "my_table"

        id = Column(UUIDType, primary_key=True, default=uuid4)
        created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
        updated_at = Column(DateTime(timezone=True), onupdate=utcnow)
        deleted_at = Column(DateTime(timezone=True))
        audit = composite(AuditFields, created_at, updated_at, deleted_at)
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Timezone-aware current UTC time, used for all audit stamps."""
    return datetime.now(timezone.utc)


@dataclass
class AuditFields:
    """
    Audit timestamps carried by every entity.

    Attributes:
        created_at (datetime): When the record was inserted
        updated_at (datetime): When the record was last written, if ever
        deleted_at (datetime): When the record was soft-deleted, if ever
    """
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
