"""Categories table.

Revision ID: 001
Revises:
Create Date: 2025-03-01

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(1024), nullable=False),
        sa.Column("slug", sa.String(1024), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("title", name="categories_title_key"),
    )
    op.create_index("ix_categories_slug", "categories", ["slug"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_categories_slug", table_name="categories")
    op.drop_table("categories")
