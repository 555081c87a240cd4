"""create games table

Revision ID: 5b1e2c7d9a40
Revises: 
Create Date: 2025-04-12 10:15:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e2c7d9a40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'games',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False, comment='主鍵，自動遞增'),
        sa.Column('title', sa.Text(), nullable=False, comment='遊戲名稱'),
        sa.Column('platform', sa.Text(), nullable=True, comment='遊戲平台'),
        sa.Column('genre', sa.Text(), nullable=True, comment='遊戲類型'),
        sa.Column('hours_played', sa.Integer(), nullable=True, comment='遊玩時數'),
        sa.Column('completed', sa.Boolean(), nullable=True, comment='是否已破關'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('games')
