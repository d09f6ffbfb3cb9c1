"""
Category: titled group of questions; slug (derived from title) is the external identifier.
Deleting a category that still has questions is rejected by the FK (ON DELETE RESTRICT).
"""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qbank.database import Base


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(1024), unique=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(1024), unique=True, nullable=False, index=True)

    # passive_deletes: let the database enforce RESTRICT instead of nulling categoryId
    questions = relationship("Question", back_populates="category", passive_deletes="all")

    def __repr__(self) -> str:
        return f"<Category id={self.id} slug={self.slug!r}>"
