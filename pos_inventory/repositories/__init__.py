"""
Repositories package - Data access layer for the inventory service
"""

from .filters import InventoryFilter
from .base import InventoryRepositoryInterface
from .inventory_repository import InventoryRepository, SORTABLE_COLUMNS

__all__ = [
    'InventoryFilter',
    'InventoryRepositoryInterface',
    'InventoryRepository',
    'SORTABLE_COLUMNS',
]
