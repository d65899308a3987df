"""
Inventory service exceptions
"""


class InventoryServiceError(Exception):
    """Base class for errors raised by the inventory core"""
    status_code = 500
    title = 'Internal Server Error'

    def to_dict(self):
        return {
            'error': self.title,
            'message': str(self),
            'status_code': self.status_code
        }


class ItemValidationError(InventoryServiceError):
    """Caller-supplied fields violate a precondition"""
    status_code = 400
    title = 'Validation Error'

    def __init__(self, messages):
        if isinstance(messages, str):
            messages = {'_schema': [messages]}
        self.messages = messages
        super().__init__('Request data validation failed')

    def to_dict(self):
        payload = super().to_dict()
        payload['details'] = self.messages
        return payload


class ItemNotFoundError(InventoryServiceError):
    """Item does not exist or has been soft-deleted"""
    status_code = 404
    title = 'Not Found'

    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"Inventory item {item_id} not found")


class InsufficientStockError(InventoryServiceError):
    """A decrease asked for more than is on hand"""
    status_code = 409
    title = 'Insufficient Stock'

    def __init__(self, item_id, available, requested):
        self.item_id = item_id
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for item {item_id}: available {available}, requested {requested}"
        )

    def to_dict(self):
        payload = super().to_dict()
        payload['available'] = self.available
        payload['requested'] = self.requested
        return payload


class PersistenceError(InventoryServiceError):
    """The underlying store failed"""
    status_code = 500
    title = 'Persistence Error'
