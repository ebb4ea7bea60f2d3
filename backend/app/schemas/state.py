from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, PositiveInt, StringConstraints

from app.schemas.country import CountryNameOut


class StateCreate(BaseModel):
    country_id: PositiveInt
    state_name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
    short_name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=10)]
    gst: Optional[Annotated[str, StringConstraints(strip_whitespace=True, max_length=20)]] = None


class StateOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    state_id: int
    country_id: int
    state_name: str
    short_name: str
    gst: Optional[str] = None
    created_at: datetime


class StateWithCountryOut(StateOut):
    country: CountryNameOut


class StateNameOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    state_name: str


class StateGroupOut(BaseModel):
    """States of one country, de-duplicated in first-seen order."""

    country: str
    states: List[str]
    shortnames: List[str]
