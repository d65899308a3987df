"""
Models package - Database models for the inventory service
"""

from pos_inventory.shared.database import db

from .enums import ItemStatus, StockLevel
from .stock_level import classify_stock, stock_level_condition, parse_stock_filter
from .inventory_item import InventoryItem

__all__ = [
    'db',
    'ItemStatus',
    'StockLevel',
    'classify_stock',
    'stock_level_condition',
    'parse_stock_filter',
    'InventoryItem',
]
