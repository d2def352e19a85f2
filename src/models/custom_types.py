"""
Custom SQLAlchemy types shared by the restaurant models.

Identities are UUIDs stored natively on PostgreSQL and as 36-character
strings everywhere else. Money columns use fixed precision numerics so
that prices and totals round-trip as ``Decimal`` values.
"""

import uuid

from sqlalchemy import Numeric
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.types import TypeDecorator, String

# decimal(18, 2): prices, subtotals and totals
Money = Numeric(18, 2, asdecimal=True)

# decimal(10, 2): tax amounts
TaxMoney = Numeric(10, 2, asdecimal=True)


class UUIDType(TypeDecorator):
    """
    UUID column type that works on SQLite and PostgreSQL alike.

    Values are always handed back to Python as ``uuid.UUID``. Strings are
    accepted on the way in and validated by parsing them.

    Usage:
        ```python
        id = Column(UUIDType, primary_key=True, default=uuid4)
        category_id = Column(UUIDType, ForeignKey("categories.id"), nullable=False)
        ```
    """

    impl = String
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(UUID())
        return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(str(value))
