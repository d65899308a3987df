"""
POS Inventory Service
Stock-keeping unit records, filtered queries and guarded stock mutations.
"""

from pos_inventory.api.main import create_app

__all__ = ['create_app']
