"""
Categories API: list, get/patch/delete by slug, create, and the questions of a category.
Slug is the external identifier; not-found is 404, invalid bodies are 400.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from qbank.api.deps import invalid_data, json_body
from qbank.config import settings
from qbank.database import get_db
from qbank.schemas.category import CategoryResponse
from qbank.schemas.question import QuestionResponse
from qbank.services import categories as category_service
from qbank.services import questions as question_service
from qbank.services.validation import Invalid, validate_category_for_create, validate_category_for_update

router = APIRouter(prefix="/categories", tags=["categories"])
logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND_MSG = "Category not found"


def _not_found(slug: str) -> HTTPException:
    logger.debug("Category not found: slug=%s", slug)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CATEGORY_NOT_FOUND_MSG)


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """List categories by id, one page of limit rows after skipping offset."""
    rows = category_service.get_categories(db, limit=limit, offset=offset)
    return [CategoryResponse.model_validate(c) for c in rows]


@router.get("/{slug}", response_model=CategoryResponse)
def get_category(slug: str, db: Session = Depends(get_db)):
    category = category_service.get_category_by_slug(db, slug)
    if category is None:
        raise _not_found(slug)
    return CategoryResponse.model_validate(category)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(body: Any = Depends(json_body), db: Session = Depends(get_db)):
    """Create a category from {title}; slug is derived from the title."""
    result = validate_category_for_create(body)
    if isinstance(result, Invalid):
        raise invalid_data(result)
    created = category_service.create_category(db, result.data)
    return CategoryResponse.model_validate(created)


@router.patch("/{slug}", response_model=CategoryResponse)
def update_category(slug: str, body: Any = Depends(json_body), db: Session = Depends(get_db)):
    """Update the category at slug; a new title also moves it to a new slug."""
    result = validate_category_for_update(body)
    if isinstance(result, Invalid):
        raise invalid_data(result)
    updated = category_service.update_category(db, slug, result.data)
    if updated is None:
        raise _not_found(slug)
    return CategoryResponse.model_validate(updated)


@router.delete("/{slug}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_category(slug: str, db: Session = Depends(get_db)):
    """Delete the category at slug. Categories that still have questions cannot be deleted (500)."""
    deleted = category_service.delete_category(db, slug)
    if deleted is None:
        raise _not_found(slug)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{slug}/questions", response_model=list[QuestionResponse])
def list_category_questions(slug: str, db: Session = Depends(get_db)):
    """Questions of one category; 404 when the category is missing, [] when it has none."""
    rows = question_service.get_questions_by_category_slug(db, slug)
    if rows is None:
        raise _not_found(slug)
    return [QuestionResponse.model_validate(q) for q in rows]
