"""
Inventory query filter
"""

from dataclasses import dataclass
from typing import Optional

from pos_inventory.utils.pagination import DEFAULT_LIMIT, DEFAULT_PAGE

DEFAULT_SORT_BY = 'created_at'
DEFAULT_SORT_DIR = 'desc'


@dataclass
class InventoryFilter:
    """Optional, AND-combined criteria for listing inventory items.

    Numeric bounds at or below zero mean "no bound".
    """
    search: Optional[str] = None
    status: Optional[str] = None
    category: Optional[str] = None
    unit: Optional[str] = None
    stock: Optional[str] = None
    min_qty: int = 0
    max_qty: int = 0
    min_price: float = 0
    max_price: float = 0
    sort_by: str = DEFAULT_SORT_BY
    sort_dir: str = DEFAULT_SORT_DIR
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
