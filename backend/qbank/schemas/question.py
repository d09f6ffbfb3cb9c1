"""
Question request/response schemas. JSON uses categoryId; Python attributes use category_id.
"""
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StringConstraints, field_validator

TEXT_MIN_LENGTH = 3
TEXT_MAX_LENGTH = 1024

QuestionText = Annotated[
    str,
    StringConstraints(strict=True, min_length=TEXT_MIN_LENGTH, max_length=TEXT_MAX_LENGTH),
]


class QuestionCreate(BaseModel):
    question: QuestionText
    answer: QuestionText
    category_id: StrictInt = Field(alias="categoryId")


class QuestionUpdate(BaseModel):
    question: QuestionText | None = None
    answer: QuestionText | None = None
    category_id: StrictInt | None = Field(default=None, alias="categoryId")

    @field_validator("question", "answer", "category_id", mode="before")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


class QuestionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    question: str
    answer: str
    slug: str
    category_id: int = Field(alias="categoryId")
