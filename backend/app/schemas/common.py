from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResponseDto(BaseModel):
    """Uniform envelope returned by every service operation."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    message: str
    data: Optional[Any] = None
    error: Optional[Any] = None
