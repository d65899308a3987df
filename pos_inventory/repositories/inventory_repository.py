"""
Inventory Repository Implementation
"""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import func, update
from sqlalchemy.exc import SQLAlchemyError

from pos_inventory.shared.database import db
from pos_inventory.models import (
    InventoryItem, ItemStatus, StockLevel, parse_stock_filter, stock_level_condition
)
from pos_inventory.utils.exceptions import PersistenceError
from pos_inventory.utils.pagination import normalize_page
from .base import InventoryRepositoryInterface
from .filters import InventoryFilter

logger = logging.getLogger(__name__)

# Caller-supplied sort fields never reach the query as text; only these columns can be ordered on
SORTABLE_COLUMNS = {
    'name': InventoryItem.name,
    'quantity': InventoryItem.quantity,
    'retail_price': InventoryItem.retail_price,
    'created_at': InventoryItem.created_at,
    'category': InventoryItem.category,
    'status': InventoryItem.status,
}


class InventoryRepository(InventoryRepositoryInterface):
    """Concrete implementation of inventory repository"""

    def _active_query(self):
        """Base query; soft-deleted rows are never visible"""
        return InventoryItem.query.filter(InventoryItem.deleted_at.is_(None))

    def _persistence_error(self, action: str, error: Exception) -> PersistenceError:
        db.session.rollback()
        logger.error(f"Failed to {action}: {error}")
        return PersistenceError(f"Failed to {action}")

    def get_by_id(self, item_id: int, for_update: bool = False) -> Optional[InventoryItem]:
        """Get a non-deleted inventory item, optionally locking its row"""
        try:
            query = self._active_query().filter(InventoryItem.id == item_id)
            if for_update:
                query = query.populate_existing().with_for_update()
            return query.first()
        except SQLAlchemyError as e:
            raise self._persistence_error(f"load inventory item {item_id}", e) from e

    def create(self, item: InventoryItem) -> InventoryItem:
        """Create new inventory item"""
        try:
            db.session.add(item)
            db.session.commit()
            return item
        except SQLAlchemyError as e:
            raise self._persistence_error("create inventory item", e) from e

    def update(self, item: InventoryItem) -> InventoryItem:
        """Persist changes made to a loaded inventory item"""
        try:
            item.updated_at = datetime.utcnow()
            db.session.commit()
            return item
        except SQLAlchemyError as e:
            raise self._persistence_error(f"update inventory item {item.id}", e) from e

    def soft_delete(self, item_id: int) -> bool:
        """Mark an item deleted; returns False when nothing was left to delete"""
        now = datetime.utcnow()
        try:
            result = db.session.execute(
                update(InventoryItem)
                .where(InventoryItem.id == item_id, InventoryItem.deleted_at.is_(None))
                .values(deleted_at=now, updated_at=now)
                .execution_options(synchronize_session=False)
            )
            db.session.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            raise self._persistence_error(f"delete inventory item {item_id}", e) from e

    def increase_stock(self, item_id: int, amount: int) -> bool:
        """Atomically add ``amount``; False when the item is missing or deleted"""
        return self._apply_stock_delta(item_id, amount)

    def decrease_stock(self, item_id: int, amount: int) -> bool:
        """
        Atomically subtract ``amount`` where at least ``amount`` is on hand.

        The guard is evaluated by the store in the same statement as the
        write, so concurrent decreases can never drive quantity below zero.
        False means no row matched: missing, deleted or insufficient stock.
        """
        return self._apply_stock_delta(item_id, -amount)

    def _apply_stock_delta(self, item_id: int, delta: int) -> bool:
        criteria = [InventoryItem.id == item_id, InventoryItem.deleted_at.is_(None)]
        if delta < 0:
            criteria.append(InventoryItem.quantity >= -delta)

        try:
            result = db.session.execute(
                update(InventoryItem)
                .where(*criteria)
                .values(quantity=InventoryItem.quantity + delta, updated_at=datetime.utcnow())
                .execution_options(synchronize_session=False)
            )
            db.session.commit()
            return result.rowcount == 1
        except SQLAlchemyError as e:
            raise self._persistence_error(f"adjust stock for inventory item {item_id}", e) from e

    def find_by_filter(self, filters: InventoryFilter) -> Tuple[List[InventoryItem], int]:
        """Filter, sort and paginate inventory items; returns the page and the total match count"""
        page, limit = normalize_page(filters.page, filters.limit)
        sort_column = SORTABLE_COLUMNS.get(filters.sort_by, InventoryItem.created_at)
        # Only the exact token 'asc' sorts ascending
        order = sort_column.asc() if filters.sort_dir == 'asc' else sort_column.desc()

        try:
            query = self._apply_filters(self._active_query(), filters)
            total = query.count()
            items = query.order_by(order).limit(limit).offset((page - 1) * limit).all()
            return items, total
        except SQLAlchemyError as e:
            raise self._persistence_error("query inventory items", e) from e

    def _apply_filters(self, query, filters: InventoryFilter):
        if filters.search:
            query = query.filter(
                func.lower(InventoryItem.name).contains(filters.search.lower(), autoescape=True)
            )

        if filters.status:
            query = query.filter(func.lower(InventoryItem.status) == filters.status.lower())

        if filters.category:
            query = query.filter(func.lower(InventoryItem.category) == filters.category.lower())

        if filters.unit:
            query = query.filter(func.lower(InventoryItem.unit) == filters.unit.lower())

        if filters.stock:
            level = parse_stock_filter(filters.stock)
            if level is None:
                logger.warning(f"Ignoring unknown stock filter '{filters.stock}'")
            else:
                query = query.filter(
                    stock_level_condition(level, InventoryItem.quantity, InventoryItem.min_stock)
                )

        if filters.min_qty and filters.min_qty > 0:
            query = query.filter(InventoryItem.quantity >= filters.min_qty)
        if filters.max_qty and filters.max_qty > 0:
            query = query.filter(InventoryItem.quantity <= filters.max_qty)

        if filters.min_price and filters.min_price > 0:
            query = query.filter(InventoryItem.retail_price >= filters.min_price)
        if filters.max_price and filters.max_price > 0:
            query = query.filter(InventoryItem.retail_price <= filters.max_price)

        return query

    def get_low_stock_items(self) -> List[InventoryItem]:
        """Get items whose quantity is below their threshold"""
        try:
            return self._active_query().filter(
                InventoryItem.quantity < InventoryItem.min_stock
            ).order_by(InventoryItem.id).all()
        except SQLAlchemyError as e:
            raise self._persistence_error("load low stock items", e) from e

    def get_summary(self) -> dict:
        """Counts and totals over all non-deleted items"""
        quantity, min_stock = InventoryItem.quantity, InventoryItem.min_stock
        try:
            def count(*criteria):
                return self._active_query().filter(*criteria).count()

            total_units, total_value = db.session.query(
                func.coalesce(func.sum(quantity), 0),
                func.coalesce(func.sum(quantity * InventoryItem.retail_price), 0)
            ).filter(InventoryItem.deleted_at.is_(None)).one()

            return {
                'total_products': count(),
                'active_products': count(func.lower(InventoryItem.status) == ItemStatus.ACTIVE.value),
                'inactive_products': count(func.lower(InventoryItem.status) == ItemStatus.INACTIVE.value),
                'low_stock_products': count(stock_level_condition(StockLevel.LOW_STOCK, quantity, min_stock)),
                'out_of_stock_products': count(stock_level_condition(StockLevel.OUT_OF_STOCK, quantity, min_stock)),
                'total_units': int(total_units),
                'total_inventory_value': round(float(total_value), 2),
            }
        except SQLAlchemyError as e:
            raise self._persistence_error("compute inventory summary", e) from e
