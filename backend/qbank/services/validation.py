"""
Payload validation for create/update requests.
Each validate_* takes parsed JSON (any shape) and returns Valid(data) or Invalid(field_errors);
nothing is raised and nothing touches the database.
"""
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from qbank.schemas.category import CategoryCreate, CategoryUpdate
from qbank.schemas.question import QuestionCreate, QuestionUpdate

T = TypeVar("T", bound=BaseModel)

# Key for errors not tied to a field (e.g. body is a list, not an object)
ROOT_ERROR_KEY = "_root"


@dataclass(frozen=True)
class Valid(Generic[T]):
    data: T
    success: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Invalid:
    field_errors: dict[str, list[str]]
    success: bool = field(default=False, init=False)


def _field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by top-level field name (alias, as sent by the client)."""
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        key = str(loc[0]) if loc else ROOT_ERROR_KEY
        msg = err.get("msg", "Invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        errors.setdefault(key, []).append(msg)
    return errors


def _validate(schema: type[T], data: Any) -> Valid[T] | Invalid:
    try:
        return Valid(schema.model_validate(data))
    except ValidationError as e:
        return Invalid(_field_errors(e))


def validate_category_for_create(data: Any) -> Valid[CategoryCreate] | Invalid:
    return _validate(CategoryCreate, data)


def validate_category_for_update(data: Any) -> Valid[CategoryUpdate] | Invalid:
    return _validate(CategoryUpdate, data)


def validate_question_for_create(data: Any) -> Valid[QuestionCreate] | Invalid:
    return _validate(QuestionCreate, data)


def validate_question_for_update(data: Any) -> Valid[QuestionUpdate] | Invalid:
    return _validate(QuestionUpdate, data)
