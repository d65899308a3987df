"""
Base Repository Interface - Abstract base classes
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from pos_inventory.models import InventoryItem
from .filters import InventoryFilter


class InventoryRepositoryInterface(ABC):
    """Abstract base class for inventory repository"""

    @abstractmethod
    def get_by_id(self, item_id: int, for_update: bool = False) -> Optional[InventoryItem]:
        pass

    @abstractmethod
    def create(self, item: InventoryItem) -> InventoryItem:
        pass

    @abstractmethod
    def update(self, item: InventoryItem) -> InventoryItem:
        pass

    @abstractmethod
    def soft_delete(self, item_id: int) -> bool:
        pass

    @abstractmethod
    def find_by_filter(self, filters: InventoryFilter) -> Tuple[List[InventoryItem], int]:
        pass

    @abstractmethod
    def increase_stock(self, item_id: int, amount: int) -> bool:
        pass

    @abstractmethod
    def decrease_stock(self, item_id: int, amount: int) -> bool:
        pass

    @abstractmethod
    def get_low_stock_items(self) -> List[InventoryItem]:
        pass

    @abstractmethod
    def get_summary(self) -> dict:
        pass
