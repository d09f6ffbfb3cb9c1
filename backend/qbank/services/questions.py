"""
Question service: list, lookup, create, update, delete, and questions of a category.
Question and answer text is HTML-escaped before it is stored; the slug comes from the escaped question.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from qbank.models.question import Question
from qbank.schemas.question import QuestionCreate, QuestionUpdate
from qbank.services.categories import get_category_by_slug
from qbank.services.sanitize import sanitize_text
from qbank.services.slugs import slugify

logger = logging.getLogger(__name__)

MAX_ID = 2**31 - 1


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Question %s rejected by database: %s", action, getattr(e, "orig", e))
        raise


def get_questions(db: Session) -> list[Question]:
    return db.query(Question).order_by(Question.id.asc()).all()


def get_question_by_id(db: Session, question_id: int) -> Question | None:
    # ids outside the INTEGER column range never exist
    if not 0 < question_id <= MAX_ID:
        return None
    return db.get(Question, question_id)


def create_question(db: Session, data: QuestionCreate) -> Question:
    safe_question = sanitize_text(data.question)
    question = Question(
        question=safe_question,
        answer=sanitize_text(data.answer),
        slug=slugify(safe_question),
        category_id=data.category_id,
    )
    db.add(question)
    _commit(db, "create")
    db.refresh(question)
    logger.info("Created question id=%s category_id=%s", question.id, question.category_id)
    return question


def update_question(db: Session, question_id: int, changes: QuestionUpdate) -> Question | None:
    """
    Partial update: only supplied fields change. Supplied text is escaped first and the slug
    follows the question text only when that text differs from what is stored.
    """
    existing = get_question_by_id(db, question_id)
    if existing is None:
        return None
    if changes.question is not None:
        safe_question = sanitize_text(changes.question)
        if safe_question != existing.question:
            existing.question = safe_question
            existing.slug = slugify(safe_question)
    if changes.answer is not None:
        existing.answer = sanitize_text(changes.answer)
    if changes.category_id is not None:
        existing.category_id = changes.category_id
    _commit(db, "update")
    db.refresh(existing)
    logger.info("Updated question id=%s", existing.id)
    return existing


def delete_question(db: Session, question_id: int) -> Question | None:
    existing = get_question_by_id(db, question_id)
    if existing is None:
        return None
    db.delete(existing)
    _commit(db, "delete")
    logger.info("Deleted question id=%s", question_id)
    return existing


def get_questions_by_category_slug(db: Session, slug: str) -> list[Question] | None:
    """Questions of the category at slug (id order); None when no such category, [] when it has none."""
    category = get_category_by_slug(db, slug)
    if category is None:
        return None
    return (
        db.query(Question)
        .filter(Question.category_id == category.id)
        .order_by(Question.id.asc())
        .all()
    )
