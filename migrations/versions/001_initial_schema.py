"""Initial schema: inventory_items

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19 09:00:00

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'inventory_items',
        sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
        sa.Column('image', sa.String(length=500), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('min_stock', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('unit', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('retail_price', sa.DECIMAL(precision=10, scale=2), nullable=False, server_default='0'),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('quantity >= 0', name='ck_inventory_items_quantity_non_negative'),
        sa.CheckConstraint('min_stock >= 0', name='ck_inventory_items_min_stock_non_negative'),
        sa.CheckConstraint('retail_price >= 0', name='ck_inventory_items_retail_price_non_negative'),
    )

    op.create_index('ix_inventory_items_deleted_at', 'inventory_items', ['deleted_at'])


def downgrade():
    op.drop_index('ix_inventory_items_deleted_at', table_name='inventory_items')
    op.drop_table('inventory_items')
