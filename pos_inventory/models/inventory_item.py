"""
Inventory Item Model
"""

from datetime import datetime

from sqlalchemy import DECIMAL

from pos_inventory.shared.database import db
from .enums import ItemStatus
from .stock_level import classify_stock


class InventoryItem(db.Model):
    """Stock-keeping unit tracked by the POS"""
    __tablename__ = 'inventory_items'
    __table_args__ = (
        db.CheckConstraint('quantity >= 0', name='ck_inventory_items_quantity_non_negative'),
        db.CheckConstraint('min_stock >= 0', name='ck_inventory_items_min_stock_non_negative'),
        db.CheckConstraint('retail_price >= 0', name='ck_inventory_items_retail_price_non_negative'),
    )

    id = db.Column(db.Integer, primary_key=True)
    image = db.Column(db.String(500), nullable=True)
    name = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(100), nullable=False)
    quantity = db.Column(db.Integer, default=0, nullable=False)
    min_stock = db.Column(db.Integer, default=5, nullable=False)
    unit = db.Column(db.String(50), default='', nullable=False)
    retail_price = db.Column(DECIMAL(10, 2), default=0, nullable=False)
    status = db.Column(db.String(20), default=ItemStatus.ACTIVE.value, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    deleted_at = db.Column(db.DateTime, nullable=True, index=True)

    def __repr__(self):
        return f'<InventoryItem {self.id} {self.name}>'

    @property
    def stock_level(self):
        """Derived stock level, never stored"""
        return classify_stock(self.quantity, self.min_stock)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'image': self.image,
            'name': self.name,
            'category': self.category,
            'quantity': self.quantity,
            'min_stock': self.min_stock,
            'unit': self.unit,
            'retail_price': float(self.retail_price) if self.retail_price is not None else 0.0,
            'status': self.status,
            'stock_status': self.stock_level.value,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }
