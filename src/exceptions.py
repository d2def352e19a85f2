"""
Custom exceptions for the application.

Expected business outcomes are reported through ``ServiceResponse``; these
exceptions are reserved for programming errors.
"""

class RestaurantCoreError(Exception):
    """Base exception for restaurant core errors."""
    pass

class InconsistentOrderTotalsError(RestaurantCoreError):
    """Raised when an order summary is saved without recalculating its totals."""
    pass
