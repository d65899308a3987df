from marshmallow import Schema, fields, validate, post_load, ValidationError, EXCLUDE

from pos_inventory.models import ItemStatus
from pos_inventory.repositories.filters import InventoryFilter, DEFAULT_SORT_BY, DEFAULT_SORT_DIR
from pos_inventory.utils.pagination import DEFAULT_PAGE


def not_blank(value):
    if not value or not value.strip():
        raise ValidationError('Field may not be blank.')


class InventoryItemRequestSchema(Schema):
    """Schema for creating/updating inventory items"""

    class Meta:
        unknown = EXCLUDE

    image = fields.Str(validate=validate.Length(max=500), allow_none=True, load_default=None)
    name = fields.Str(required=True, validate=[validate.Length(max=255), not_blank])
    category = fields.Str(required=True, validate=[validate.Length(max=100), not_blank])
    quantity = fields.Int(required=True, strict=True, validate=validate.Range(min=0))
    min_stock = fields.Int(strict=True, validate=validate.Range(min=0), load_default=5)
    unit = fields.Str(validate=validate.Length(max=50), load_default='')
    retail_price = fields.Decimal(required=True, places=2, validate=validate.Range(min=0))
    status = fields.Str(
        required=True,
        validate=validate.OneOf([status.value for status in ItemStatus])
    )


class InventoryFilterSchema(Schema):
    """Schema for inventory list query parameters"""

    class Meta:
        unknown = EXCLUDE

    search = fields.Str()
    status = fields.Str()
    category = fields.Str()
    unit = fields.Str()
    stock = fields.Str()
    min_qty = fields.Int(load_default=0)
    max_qty = fields.Int(load_default=0)
    min_price = fields.Float(load_default=0)
    max_price = fields.Float(load_default=0)
    sort_by = fields.Str(load_default=DEFAULT_SORT_BY)
    sort_dir = fields.Str(load_default=DEFAULT_SORT_DIR)
    page = fields.Int(load_default=DEFAULT_PAGE)
    limit = fields.Int()

    @post_load
    def make_filter(self, data, **kwargs):
        return InventoryFilter(**data)


class StockAdjustmentRequestSchema(Schema):
    """Schema for stock increase/decrease requests"""
    amount = fields.Int(required=True, strict=True, validate=validate.Range(min=1))


class AvailabilityQuerySchema(Schema):
    """Schema for availability check query parameters"""

    class Meta:
        unknown = EXCLUDE

    amount = fields.Int(required=True, validate=validate.Range(min=1))
