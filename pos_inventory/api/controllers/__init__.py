"""
Controllers package initialization
"""

# Import all blueprints for registration
from pos_inventory.api.controllers.inventory import inventory_bp
from pos_inventory.api.controllers.stats import stats_bp
from pos_inventory.api.controllers.health import health_bp

__all__ = ['inventory_bp', 'stats_bp', 'health_bp']
