"""create product, cart and order tables

Revision ID: 5a1f0c2d9e7b
Revises:
Create Date: 2025-09-02 10:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '5a1f0c2d9e7b'
down_revision = None
branch_labels = None
depends_on = None

BIGINT = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade():
    op.create_table(
        'product',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('image', sa.String(500), nullable=True),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_table(
        'cart',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('session_id', sa.String(64), nullable=False, unique=True),
        sa.Column('user_id', BIGINT, nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_table(
        'cart_item',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('cart_id', BIGINT, sa.ForeignKey('cart.id', ondelete='CASCADE'), nullable=False),
        sa.Column('product_id', BIGINT, sa.ForeignKey('product.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('cart_id', 'product_id', name='uq_cart_item_cart_product'),
    )
    op.create_table(
        'order',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('session_id', sa.String(64), nullable=False),
        sa.Column('user_id', BIGINT, nullable=True),
        sa.Column(
            'status',
            sa.Enum('pending', 'processing', 'shipped', 'delivered', 'cancelled', name='order_status'),
            nullable=False,
        ),
        sa.Column('total_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('shipping_address', sa.JSON(), nullable=False),
        sa.Column('payment_method', sa.String(50), nullable=False),
        sa.Column(
            'payment_status',
            sa.Enum('pending', 'completed', 'failed', name='payment_status'),
            nullable=False,
        ),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_order_session_id', 'order', ['session_id'])
    op.create_table(
        'order_item',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('order_id', BIGINT, sa.ForeignKey('order.id', ondelete='CASCADE'), nullable=False),
        sa.Column('product_id', BIGINT, sa.ForeignKey('product.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )


def downgrade():
    op.drop_table('order_item')
    op.drop_index('ix_order_session_id', table_name='order')
    op.drop_table('order')
    op.drop_table('cart_item')
    op.drop_table('cart')
    op.drop_table('product')
    sa.Enum(name='payment_status').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='order_status').drop(op.get_bind(), checkfirst=True)
