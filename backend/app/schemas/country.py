from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

CountryName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]


class CountryCreate(BaseModel):
    """Form fields accepted when creating a country; the flag arrives as a file."""

    name: CountryName


class CountryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    country_id: int
    name: str
    flag: str
    created_at: datetime


class CountryNameOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
