"""
Inventory Service - Business logic for inventory management
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple
import logging

from marshmallow import ValidationError

from pos_inventory.models import InventoryItem
from pos_inventory.repositories import InventoryFilter, InventoryRepository
from pos_inventory.utils.exceptions import (
    InsufficientStockError, ItemNotFoundError, ItemValidationError, PersistenceError
)
from pos_inventory.utils.pagination import DEFAULT_LIMIT, build_pagination, normalize_page
from pos_inventory.utils.schemas import InventoryFilterSchema, InventoryItemRequestSchema

logger = logging.getLogger(__name__)


class InventoryService:
    """Business rules for inventory items and their stock levels"""

    def __init__(self, repository=None, default_limit: int = DEFAULT_LIMIT):
        self.inventory_repo = repository or InventoryRepository()
        self.default_limit = default_limit
        self.item_schema = InventoryItemRequestSchema()
        self.filter_schema = InventoryFilterSchema()

    def _load_item_payload(self, payload) -> Dict[str, Any]:
        try:
            return self.item_schema.load(payload if payload is not None else {})
        except ValidationError as e:
            logger.warning(f"Rejected inventory item payload: {e.messages}")
            raise ItemValidationError(e.messages) from e

    def _load_filters(self, params: Dict[str, Any]) -> InventoryFilter:
        params = dict(params)
        params.setdefault('limit', self.default_limit)
        try:
            return self.filter_schema.load(params)
        except ValidationError as e:
            logger.warning(f"Rejected inventory query parameters: {e.messages}")
            raise ItemValidationError(e.messages) from e

    @staticmethod
    def _validate_amount(amount):
        # bool is an int subclass; True must not count as 1
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise ItemValidationError({'amount': ['Amount must be a positive integer.']})

    def _require_item(self, item_id: int, for_update: bool = False) -> InventoryItem:
        item = self.inventory_repo.get_by_id(item_id, for_update=for_update)
        if not item:
            raise ItemNotFoundError(item_id)
        return item

    def create_item(self, payload) -> Dict[str, Any]:
        """Validate and store a new inventory item"""
        data = self._load_item_payload(payload)
        try:
            item = self.inventory_repo.create(InventoryItem(**data))
        except PersistenceError:
            logger.error(f"Error creating inventory item '{data['name']}'")
            raise

        logger.info(f"Created inventory item {item.id} ({item.name})")
        return item.to_dict()

    def get_item(self, item_id: int) -> Dict[str, Any]:
        """Get a single non-deleted item"""
        return self._require_item(item_id).to_dict()

    def update_item(self, item_id: int, payload) -> Dict[str, Any]:
        """
        Replace every mutable field of an item.

        Validation runs first; the row is then loaded with a lock held until
        the rewrite commits.

        Raises:
            ItemValidationError: payload violates a field rule
            ItemNotFoundError: item is missing or soft-deleted
        """
        data = self._load_item_payload(payload)
        item = self._require_item(item_id, for_update=True)

        for field, value in data.items():
            setattr(item, field, value)

        try:
            item = self.inventory_repo.update(item)
        except PersistenceError:
            logger.error(f"Error updating inventory item {item_id}")
            raise

        logger.info(f"Updated inventory item {item_id}")
        return item.to_dict()

    def delete_item(self, item_id: int) -> bool:
        """Soft delete an item; repeated deletes succeed without changing anything"""
        deleted = self.inventory_repo.soft_delete(item_id)
        if deleted:
            logger.info(f"Deleted inventory item {item_id}")
        else:
            logger.warning(f"Delete requested for missing or already deleted inventory item {item_id}")
        return deleted

    def list_items(self, filters=None) -> Tuple[List[Dict[str, Any]], Dict[str, int]]:
        """
        Filtered, sorted, paginated listing.

        Args:
            filters: an InventoryFilter, a mapping of raw query parameters, or None

        Returns:
            Tuple of (serialized items, pagination metadata)
        """
        if filters is None:
            filters = InventoryFilter(limit=self.default_limit)
        elif not isinstance(filters, InventoryFilter):
            filters = self._load_filters(filters)

        page, limit = normalize_page(filters.page, filters.limit, self.default_limit)
        filters = replace(filters, page=page, limit=limit)

        items, total = self.inventory_repo.find_by_filter(filters)
        return [item.to_dict() for item in items], build_pagination(page, limit, total)

    def increase_stock(self, item_id: int, amount: int) -> Optional[Dict[str, Any]]:
        """Add ``amount`` units to an item's quantity"""
        self._validate_amount(amount)

        if not self.inventory_repo.increase_stock(item_id, amount):
            raise ItemNotFoundError(item_id)

        logger.info(f"Increased stock of inventory item {item_id} by {amount}")
        return self._snapshot(item_id)

    def decrease_stock(self, item_id: int, amount: int) -> Optional[Dict[str, Any]]:
        """
        Remove ``amount`` units from an item's quantity.

        The guarded update either applies in full or not at all. When it
        matches no row the item is read once to tell a missing item apart
        from a shortfall. That read happens after the guard, so the
        ``available`` reported by InsufficientStockError is a later
        snapshot and may already include concurrent increases.

        Raises:
            ItemValidationError: amount is not a positive integer
            ItemNotFoundError: item is missing or soft-deleted
            InsufficientStockError: fewer than ``amount`` units on hand
        """
        self._validate_amount(amount)

        if not self.inventory_repo.decrease_stock(item_id, amount):
            item = self._require_item(item_id)
            logger.warning(
                f"Insufficient stock for inventory item {item_id}: "
                f"available {item.quantity}, requested {amount}"
            )
            raise InsufficientStockError(item_id, item.quantity, amount)

        logger.info(f"Decreased stock of inventory item {item_id} by {amount}")
        return self._snapshot(item_id)

    def _snapshot(self, item_id: int) -> Optional[Dict[str, Any]]:
        # The item may be deleted between the committed update and this read
        item = self.inventory_repo.get_by_id(item_id)
        return item.to_dict() if item else None

    def list_low_stock_items(self) -> List[Dict[str, Any]]:
        """Items whose quantity has fallen below their minimum stock"""
        return [item.to_dict() for item in self.inventory_repo.get_low_stock_items()]

    def check_availability(self, item_id: int, amount: int) -> Dict[str, Any]:
        """Report whether ``amount`` units could be taken right now"""
        self._validate_amount(amount)
        item = self._require_item(item_id)

        return {
            'item_id': item.id,
            'available': item.quantity >= amount,
            'available_quantity': item.quantity,
            'requested_quantity': amount
        }

    def get_summary(self) -> Dict[str, Any]:
        """Dashboard counts and totals"""
        summary = self.inventory_repo.get_summary()
        logger.debug(f"Inventory summary computed: {summary}")
        return summary
