"""
Model Enums
"""

from enum import Enum


class ItemStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class StockLevel(Enum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
