"""
Questions API: list, get/patch/delete by numeric id, create.
Non-numeric ids fail parameter validation (400); not-found is 404.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from qbank.api.deps import invalid_data, json_body
from qbank.database import get_db
from qbank.schemas.question import QuestionResponse
from qbank.services import questions as question_service
from qbank.services.validation import Invalid, validate_question_for_create, validate_question_for_update

router = APIRouter(prefix="/questions", tags=["questions"])
logger = logging.getLogger(__name__)

QUESTION_NOT_FOUND_MSG = "Question not found"


def _not_found(question_id: int) -> HTTPException:
    logger.debug("Question not found: id=%s", question_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=QUESTION_NOT_FOUND_MSG)


@router.get("", response_model=list[QuestionResponse])
def list_questions(db: Session = Depends(get_db)):
    return [QuestionResponse.model_validate(q) for q in question_service.get_questions(db)]


@router.get("/{question_id}", response_model=QuestionResponse)
def get_question(question_id: int, db: Session = Depends(get_db)):
    question = question_service.get_question_by_id(db, question_id)
    if question is None:
        raise _not_found(question_id)
    return QuestionResponse.model_validate(question)


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
def create_question(body: Any = Depends(json_body), db: Session = Depends(get_db)):
    """Create a question from {question, answer, categoryId}. Unknown categoryId fails in the database (500)."""
    result = validate_question_for_create(body)
    if isinstance(result, Invalid):
        raise invalid_data(result)
    created = question_service.create_question(db, result.data)
    return QuestionResponse.model_validate(created)


@router.patch("/{question_id}", response_model=QuestionResponse)
def update_question(question_id: int, body: Any = Depends(json_body), db: Session = Depends(get_db)):
    """Partial update: any subset of question, answer, categoryId."""
    result = validate_question_for_update(body)
    if isinstance(result, Invalid):
        raise invalid_data(result)
    updated = question_service.update_question(db, question_id, result.data)
    if updated is None:
        raise _not_found(question_id)
    return QuestionResponse.model_validate(updated)


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_question(question_id: int, db: Session = Depends(get_db)):
    deleted = question_service.delete_question(db, question_id)
    if deleted is None:
        raise _not_found(question_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
