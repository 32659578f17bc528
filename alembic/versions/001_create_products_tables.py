"""Create products and product_images tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create products and product_images tables."""
    # Products table
    op.create_table(
        'products',
        sa.Column('id', sa.Uuid(as_uuid=False), primary_key=True),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('price', sa.Float(), nullable=False, server_default='0'),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('slug', sa.String(500), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sizes', sa.JSON(), nullable=False),
        sa.Column('gender', sa.String(10), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )

    op.create_unique_constraint('uq_products_title', 'products', ['title'])
    op.create_unique_constraint('uq_products_slug', 'products', ['slug'])

    # Product images table
    op.create_table(
        'product_images',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('url', sa.String(1000), nullable=False),
        sa.Column('product_id', sa.Uuid(as_uuid=False),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
    )


def downgrade() -> None:
    """Drop products and product_images tables."""
    op.drop_table('product_images')
    op.drop_table('products')
