import os
import pytest
from decimal import Decimal

# Set test environment variables before importing the app
os.environ['FLASK_ENV'] = 'testing'

from pos_inventory import create_app
from pos_inventory.models import db, InventoryItem


@pytest.fixture
def app():
    """Create application for the tests."""
    app = create_app('testing')

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def db_session(app):
    """Database session bound to the test app."""
    return db.session


@pytest.fixture
def sample_inventory_item(db_session):
    """Create a sample inventory item for testing."""
    return create_test_inventory_item(
        db_session, name='Whole Milk', category='Dairy', quantity=10, min_stock=5, unit='litre'
    )


# Helper functions for tests
def create_test_inventory_item(db_session, **kwargs):
    """Create a test inventory item with default values."""
    defaults = {
        'name': 'Test Item',
        'category': 'General',
        'quantity': 100,
        'min_stock': 5,
        'unit': 'pcs',
        'retail_price': Decimal('9.99'),
        'status': 'active'
    }
    defaults.update(kwargs)

    item = InventoryItem(**defaults)
    db_session.add(item)
    db_session.commit()
    return item


# Test data generators
def generate_inventory_data(**kwargs):
    """Generate inventory item request payload."""
    defaults = {
        'name': 'Espresso Beans',
        'category': 'Coffee',
        'quantity': 20,
        'min_stock': 5,
        'unit': 'kg',
        'retail_price': 24.5,
        'status': 'active'
    }
    defaults.update(kwargs)
    return defaults


# Custom assertions
def assert_inventory_response(response_data, expected_item):
    """Assert inventory item response format."""
    assert response_data['id'] == expected_item.id
    assert response_data['name'] == expected_item.name
    assert response_data['category'] == expected_item.category
    assert response_data['quantity'] == expected_item.quantity
    assert response_data['min_stock'] == expected_item.min_stock
    assert response_data['unit'] == expected_item.unit
    assert response_data['status'] == expected_item.status
    assert response_data['stock_status'] == expected_item.stock_level.value
