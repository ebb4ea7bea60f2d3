from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, field_validator

from app.services.text import make_slug


class CategoryCreate(BaseModel):
    """Form fields accepted when creating a category; the icon arrives as a file."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]

    @field_validator("name")
    @classmethod
    def name_must_yield_slug(cls, v: str) -> str:
        if not make_slug(v):
            raise ValueError("name must contain at least one letter or digit")
        return v


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category_id: int
    name: str
    slug: str
    icon: str
    created_at: datetime
