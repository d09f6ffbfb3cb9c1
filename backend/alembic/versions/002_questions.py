"""Questions table: FK categoryId -> categories.id (RESTRICT on delete, CASCADE on update).

Revision ID: 002
Revises: 001
Create Date: 2025-03-08

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("slug", sa.String(1024), nullable=False),
        sa.Column("categoryId", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["categoryId"], ["categories.id"], ondelete="RESTRICT", onupdate="CASCADE",
            name="questions_categoryId_fkey",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_questions_slug", "questions", ["slug"], unique=True)
    op.create_index("ix_questions_categoryId", "questions", ["categoryId"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_questions_categoryId", table_name="questions")
    op.drop_index("ix_questions_slug", table_name="questions")
    op.drop_table("questions")
