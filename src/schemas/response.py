"""
Uniform result envelope returned by every core operation.

Expected business outcomes (validation misses, missing entities, empty
category listings) are reported through ``ServiceResponse.error_response``
instead of being raised. Only programming errors surface as exceptions.
"""

from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class ServiceResponse(BaseModel, Generic[T]):
    """Success/failure wrapper with a human readable message and optional payload."""
    success: bool
    message: str
    data: Optional[T] = None

    @classmethod
    def success_response(cls, message: str, data: Optional[T] = None) -> "ServiceResponse[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def error_response(cls, message: str) -> "ServiceResponse[T]":
        return cls(success=False, message=message)


def describe_failure(exc: BaseException) -> str:
    """
    Most specific diagnostic available for a store failure.

    Prefers the DBAPI exception wrapped by SQLAlchemy (``orig``), then an
    explicitly chained cause, then the exception's own text.

    Args:
        exc: The exception raised by the store

    Returns:
        str: Message suitable for embedding in an error envelope
    """
    orig = getattr(exc, "orig", None)
    if orig is not None and str(orig):
        return str(orig)
    if exc.__cause__ is not None and str(exc.__cause__):
        return str(exc.__cause__)
    if str(exc):
        return str(exc)
    return "No further details available."
