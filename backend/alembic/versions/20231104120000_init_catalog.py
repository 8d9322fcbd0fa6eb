"""create catalog tables

Revision ID: 20231104120000
Revises:
Create Date: 2023-11-04 12:00:00

"""
from alembic import op
import sqlalchemy as sa

revision = '20231104120000'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
    ]


def upgrade():
    op.create_table(
        'stores',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('user_id', sa.String(255), nullable=False, index=True),
        sa.Column('front_end_store_url', sa.Text(), nullable=False),
        sa.Column('stripe_key', sa.Text(), nullable=False),
        *_timestamps()
    )
    op.create_table(
        'billboards',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('store_id', sa.String(36), sa.ForeignKey('stores.id'), nullable=False, index=True),
        sa.Column('label', sa.String(255), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        *_timestamps()
    )
    op.create_table(
        'categories',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('store_id', sa.String(36), sa.ForeignKey('stores.id'), nullable=False, index=True),
        sa.Column('billboard_id', sa.String(36), sa.ForeignKey('billboards.id'), nullable=False, index=True),
        sa.Column('name', sa.String(255), nullable=False),
        *_timestamps()
    )
    for table in ('colors', 'sizes'):
        op.create_table(
            table,
            sa.Column('id', sa.String(36), primary_key=True),
            sa.Column('store_id', sa.String(36), sa.ForeignKey('stores.id'), nullable=False, index=True),
            sa.Column('name', sa.String(255), nullable=False),
            sa.Column('value', sa.String(64), nullable=False),
            *_timestamps()
        )
    op.create_table(
        'products',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('store_id', sa.String(36), sa.ForeignKey('stores.id'), nullable=False, index=True),
        sa.Column('category_id', sa.String(36), sa.ForeignKey('categories.id'), nullable=False, index=True),
        sa.Column('color_id', sa.String(36), sa.ForeignKey('colors.id'), nullable=False, index=True),
        sa.Column('size_id', sa.String(36), sa.ForeignKey('sizes.id'), nullable=False, index=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps()
    )
    op.create_table(
        'product_images',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('product_id', sa.String(36), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('url', sa.Text(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps()
    )


def downgrade():
    for table in ('product_images', 'products', 'sizes', 'colors', 'categories', 'billboards', 'stores'):
        op.drop_table(table)
