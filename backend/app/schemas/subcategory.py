from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PositiveInt, StringConstraints


class SubcategoryCreate(BaseModel):
    category_id: PositiveInt
    sub_category_name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]


class SubcategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    subcategory_id: int
    category_id: int
    sub_category_name: str
    icon: str
    created_at: datetime
