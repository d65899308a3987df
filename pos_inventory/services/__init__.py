"""
Services package - Business logic layer
"""

from .inventory_service import InventoryService

__all__ = ['InventoryService']
