"""
SQLAlchemy models. Import here so Alembic and app can use them.
"""
from qbank.models.category import Category
from qbank.models.question import Question

__all__ = ["Category", "Question"]
