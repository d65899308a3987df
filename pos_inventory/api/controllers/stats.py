"""
Stats Controller - Provides inventory statistics for dashboards
"""

from flask import Blueprint, jsonify
import logging

from pos_inventory.services import InventoryService

logger = logging.getLogger(__name__)

# Create blueprint
stats_bp = Blueprint('stats', __name__)


@stats_bp.route('/api/stats', methods=['GET'])
def get_inventory_stats():
    """
    Get inventory statistics for admin dashboard

    Returns:
        JSON with inventory metrics:
        - total_products: Non-deleted items
        - active_products / inactive_products: Items per status
        - low_stock_products: Items with 0 < quantity < min_stock
        - out_of_stock_products: Items with zero quantity
        - total_units: Units across all items
        - total_inventory_value: Sum of (quantity * retail_price)
    """
    stats = InventoryService().get_summary()
    stats['service'] = 'pos-inventory-service'

    logger.info(f"Stats retrieved: {stats}")
    return jsonify(stats), 200
