"""
This package contains the database models for the application.
"""

from src.models.category import Category
from src.models.menu_item import MenuItem
from src.models.order import Order, OrderSummary

__all__ = ['Category', 'MenuItem', 'Order', 'OrderSummary']
