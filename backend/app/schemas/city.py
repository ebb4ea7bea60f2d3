from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PositiveInt, StringConstraints

from app.schemas.country import CountryNameOut
from app.schemas.state import StateNameOut


class CityCreate(BaseModel):
    country_id: PositiveInt
    state_id: PositiveInt
    city_name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]


class CityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    city_id: int
    country_id: int
    state_id: int
    city_name: str
    created_at: datetime


class CityWithParentsOut(CityOut):
    country: CountryNameOut
    state: StateNameOut
