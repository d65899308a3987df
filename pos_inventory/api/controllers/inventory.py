"""
Inventory Controller - Handles inventory CRUD operations and stock mutations
"""

from flask import Blueprint, current_app, request
from flask_restx import Api, Resource, fields
from marshmallow import ValidationError
import logging

from pos_inventory.services import InventoryService
from pos_inventory.utils.error_handlers import register_api_error_handlers
from pos_inventory.utils.exceptions import ItemValidationError
from pos_inventory.utils.schemas import AvailabilityQuerySchema, StockAdjustmentRequestSchema

logger = logging.getLogger(__name__)

# Create blueprint
inventory_bp = Blueprint('inventory', __name__)
api = Api(inventory_bp, version='1.0', title='POS Inventory API',
          description='Inventory and stock control endpoints', doc='/docs/')
register_api_error_handlers(api)

# Create namespace
inventory_ns = api.namespace('inventories', description='Inventory operations')

# Initialize schemas
stock_adjustment_schema = StockAdjustmentRequestSchema()
availability_query_schema = AvailabilityQuerySchema()


def get_inventory_models(api):
    """Define API models for inventory operations"""
    inventory_item_model = api.model('InventoryItem', {
        'id': fields.Integer(readonly=True, description='Inventory item ID'),
        'image': fields.String(description='Picture URL'),
        'name': fields.String(required=True, description='Item name'),
        'category': fields.String(required=True, description='Item category'),
        'quantity': fields.Integer(required=True, description='Units on hand'),
        'min_stock': fields.Integer(description='Low stock threshold', default=5),
        'unit': fields.String(description='Unit of measure'),
        'retail_price': fields.Float(required=True, description='Retail price'),
        'status': fields.String(required=True, enum=['active', 'inactive'], description='Item status'),
        'stock_status': fields.String(readonly=True, enum=['in_stock', 'low_stock', 'out_of_stock']),
        'created_at': fields.DateTime(readonly=True, description='Creation timestamp'),
        'updated_at': fields.DateTime(readonly=True, description='Last update timestamp')
    })

    stock_adjustment_model = api.model('StockAdjustment', {
        'amount': fields.Integer(required=True, min=1, description='Units to add or remove')
    })

    return inventory_item_model, stock_adjustment_model


# Define models
inventory_item_model, stock_adjustment_model = get_inventory_models(api)


def get_inventory_service():
    return InventoryService(default_limit=current_app.config['DEFAULT_PAGE_SIZE'])


def load_request(schema, data):
    """Validate request data against a schema"""
    try:
        return schema.load(data)
    except ValidationError as e:
        raise ItemValidationError(e.messages) from e


@inventory_ns.route('/')
class InventoryList(Resource):
    @api.doc('list_inventory', params={
        'search': 'Case-insensitive substring of the name',
        'status': 'active or inactive',
        'category': 'Exact category',
        'unit': 'Exact unit',
        'stock': 'instock, lowstock or outofstock',
        'min_qty': 'Minimum quantity', 'max_qty': 'Maximum quantity',
        'min_price': 'Minimum retail price', 'max_price': 'Maximum retail price',
        'sort_by': 'name, quantity, retail_price, created_at, category or status',
        'sort_dir': 'asc or desc',
        'page': 'Page number', 'limit': 'Page size'
    })
    def get(self):
        """List inventory items with optional filtering, sorting and pagination"""
        items, pagination = get_inventory_service().list_items(request.args.to_dict())
        return {'data': items, 'pagination': pagination}, 200

    @api.doc('create_inventory')
    @api.expect(inventory_item_model)
    def post(self):
        """Create new inventory item"""
        item = get_inventory_service().create_item(request.get_json(silent=True))
        return item, 201


@inventory_ns.route('/low-stock')
class LowStockList(Resource):
    @api.doc('list_low_stock')
    def get(self):
        """Items whose quantity is below their minimum stock"""
        items = get_inventory_service().list_low_stock_items()
        return {'data': items, 'total': len(items)}, 200


@inventory_ns.route('/<int:item_id>')
class InventoryItemResource(Resource):
    @api.doc('get_inventory')
    def get(self, item_id):
        """Get inventory item by ID"""
        return get_inventory_service().get_item(item_id), 200

    @api.doc('update_inventory')
    @api.expect(inventory_item_model)
    def put(self, item_id):
        """Replace all mutable fields of an inventory item"""
        return get_inventory_service().update_item(item_id, request.get_json(silent=True)), 200

    @api.doc('delete_inventory')
    def delete(self, item_id):
        """Soft delete inventory item"""
        get_inventory_service().delete_item(item_id)
        return {'message': 'Inventory item deleted successfully'}, 200


@inventory_ns.route('/<int:item_id>/increase')
class StockIncrease(Resource):
    @api.doc('increase_stock')
    @api.expect(stock_adjustment_model)
    def post(self, item_id):
        """Add units to an item's stock"""
        data = load_request(stock_adjustment_schema, request.get_json(silent=True) or {})
        item = get_inventory_service().increase_stock(item_id, data['amount'])
        return {'message': 'Stock increased successfully', 'data': item}, 200


@inventory_ns.route('/<int:item_id>/decrease')
class StockDecrease(Resource):
    @api.doc('decrease_stock')
    @api.expect(stock_adjustment_model)
    def post(self, item_id):
        """Remove units from an item's stock"""
        data = load_request(stock_adjustment_schema, request.get_json(silent=True) or {})
        item = get_inventory_service().decrease_stock(item_id, data['amount'])
        return {'message': 'Stock decreased successfully', 'data': item}, 200


@inventory_ns.route('/<int:item_id>/availability')
class StockAvailability(Resource):
    @api.doc('check_availability', params={'amount': 'Units wanted'})
    def get(self, item_id):
        """Check whether an amount could be taken from stock"""
        query = load_request(availability_query_schema, request.args.to_dict())
        return get_inventory_service().check_availability(item_id, query['amount']), 200
