"""
Question: free-text question/answer pair (HTML-escaped before storage) in one category.
Column is named categoryId to match the JSON field; attribute is category_id.
"""
from sqlalchemy import Integer, String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qbank.database import Base


class Question(Base):
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(String(1024), unique=True, nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(
        "categoryId",
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    category = relationship("Category", back_populates="questions")

    def __repr__(self) -> str:
        return f"<Question id={self.id} slug={self.slug!r}>"
