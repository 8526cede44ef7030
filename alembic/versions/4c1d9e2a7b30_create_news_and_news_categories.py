"""create_news_and_news_categories

Revision ID: 4c1d9e2a7b30
Revises:
Create Date: 2026-10-18 10:12:44.318207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1d9e2a7b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create news table and its category link table."""
    op.create_table('news',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('news_categories',
        sa.Column('news_id', sa.BigInteger(), nullable=False),
        sa.Column('category_id', sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(['news_id'], ['news.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('news_id', 'category_id')
    )

    op.create_index('idx_news_categories_category_id', 'news_categories', ['category_id'])


def downgrade() -> None:
    """Drop news tables."""
    op.drop_index('idx_news_categories_category_id', 'news_categories')
    op.drop_table('news_categories')
    op.drop_table('news')
