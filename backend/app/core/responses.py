"""Builders for the ``{statusCode, message, data, error}`` response envelope."""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.core.messages import get_response_message
from app.schemas.common import ResponseDto


def success_response(status_code: int, message_key: str, data: Any = None) -> ResponseDto:
    return ResponseDto(
        status_code=status_code,
        message=get_response_message(message_key),
        data=data,
    )


def error_response(
    status_code: int, message_key: str, error: BaseException | None = None
) -> ResponseDto:
    details = None
    if error is not None:
        details = {"type": type(error).__name__, "detail": str(error)}
    return ResponseDto(
        status_code=status_code,
        message=get_response_message(message_key),
        error=details,
    )


def as_json_response(dto: ResponseDto) -> JSONResponse:
    """Render the envelope with its ``statusCode`` as the HTTP status."""

    content: dict[str, Any] = {"statusCode": dto.status_code, "message": dto.message}
    if dto.data is not None:
        content["data"] = jsonable_encoder(dto.data)
    if dto.error is not None:
        content["error"] = jsonable_encoder(dto.error)
    return JSONResponse(status_code=dto.status_code, content=content)
