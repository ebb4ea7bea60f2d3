"""Helpers for turning multipart form input into typed service arguments."""

from typing import TypeVar

from fastapi import UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from app.core.config import settings
from app.utils.security import ImageUpload

ModelT = TypeVar("ModelT", bound=BaseModel)


def form_payload(model: type[ModelT], **fields) -> ModelT:
    """Validate form fields against ``model``; failures become the usual 422."""

    try:
        return model(**fields)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


async def read_image_upload(file: UploadFile) -> ImageUpload:
    # One byte past the limit is enough for validation to reject it.
    content = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    await file.close()
    return ImageUpload(
        filename=file.filename or "",
        content=content,
        content_type=file.content_type,
    )
