"""
Category service: list, lookup by slug, create, update, delete.
Every function takes the request's Session; not-found is returned as None, never raised.
Uniqueness (title, slug) and RESTRICT on delete are left to the database: IntegrityError propagates.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from qbank.models.category import Category
from qbank.schemas.category import CategoryCreate, CategoryUpdate
from qbank.services.slugs import slugify

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Category %s rejected by database: %s", action, getattr(e, "orig", e))
        raise


def get_categories(db: Session, limit: int = DEFAULT_LIMIT, offset: int = 0) -> list[Category]:
    """Page of categories ordered by id; offset is the number of rows to skip."""
    return db.query(Category).order_by(Category.id.asc()).offset(offset).limit(limit).all()


def get_category_by_slug(db: Session, slug: str) -> Category | None:
    return db.query(Category).filter(Category.slug == slug).first()


def create_category(db: Session, data: CategoryCreate) -> Category:
    category = Category(title=data.title, slug=slugify(data.title))
    db.add(category)
    _commit(db, "create")
    db.refresh(category)
    logger.info("Created category id=%s slug=%s", category.id, category.slug)
    return category


def update_category(db: Session, slug: str, changes: CategoryUpdate) -> Category | None:
    """
    Apply changes to the category currently at slug. Title falls back to the stored one;
    slug is recomputed only when the title actually changes.
    """
    existing = get_category_by_slug(db, slug)
    if existing is None:
        return None
    title = changes.title if changes.title is not None else existing.title
    if title != existing.title:
        existing.title = title
        existing.slug = slugify(title)
    _commit(db, "update")
    db.refresh(existing)
    logger.info("Updated category id=%s slug=%s (was %s)", existing.id, existing.slug, slug)
    return existing


def delete_category(db: Session, slug: str) -> Category | None:
    """Delete and return the category at slug; fails with IntegrityError while questions reference it."""
    existing = get_category_by_slug(db, slug)
    if existing is None:
        return None
    db.delete(existing)
    _commit(db, "delete")
    logger.info("Deleted category id=%s slug=%s", existing.id, slug)
    return existing
