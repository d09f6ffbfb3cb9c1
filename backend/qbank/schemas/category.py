"""
Category request/response schemas.
"""
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, field_validator

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 1024

Title = Annotated[
    str,
    StringConstraints(strict=True, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH),
]


class CategoryCreate(BaseModel):
    title: Title


class CategoryUpdate(BaseModel):
    title: Title | None = None

    @field_validator("title", mode="before")
    @classmethod
    def title_not_null(cls, v):
        # Omit the field to keep the current title; null is not a title
        if v is None:
            raise ValueError("title cannot be null")
        return v


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
