"""Security helpers for validating user-supplied image files."""

from __future__ import annotations

import os
from dataclasses import dataclass

from loguru import logger

from app.core.config import settings

JPEG_SIGNATURE = b"\xff\xd8\xff"
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

_SIGNATURES = {
    "jpg": JPEG_SIGNATURE,
    "jpeg": JPEG_SIGNATURE,
    "png": PNG_SIGNATURE,
}


class UnsupportedImageError(ValueError):
    """Raised when an uploaded file is not an acceptable image."""

    def __init__(self, message_key: str, reason: str):
        super().__init__(reason)
        self.message_key = message_key


@dataclass(slots=True)
class ImageUpload:
    """An uploaded image held in memory until it is pushed to storage."""

    filename: str
    content: bytes
    content_type: str | None = None

    @property
    def extension(self) -> str:
        return os.path.splitext(self.filename or "")[1].lstrip(".").lower()


def validate_image_upload(image: ImageUpload) -> str:
    """Check size, extension and leading bytes; return the normalized extension.

    The extension must be one of ``settings.ASSET_ALLOWED_FORMATS`` and the
    payload has to start with the matching JPEG or PNG signature, so a renamed
    file of another type is rejected before it reaches storage.
    """

    size = len(image.content)
    if size == 0:
        raise UnsupportedImageError("INVALID_IMAGE_FORMAT", "empty file")
    if size > settings.MAX_UPLOAD_BYTES:
        raise UnsupportedImageError(
            "IMAGE_TOO_LARGE", f"{size} bytes exceeds {settings.MAX_UPLOAD_BYTES}"
        )

    extension = image.extension
    allowed = {fmt.lower() for fmt in settings.ASSET_ALLOWED_FORMATS}
    if extension not in allowed:
        raise UnsupportedImageError(
            "INVALID_IMAGE_FORMAT", f"extension {extension or '<none>'!r} not allowed"
        )

    signature = _SIGNATURES.get(extension)
    if signature is not None and not image.content.startswith(signature):
        logger.bind(filename=image.filename, extension=extension).warning(
            "image_signature_mismatch"
        )
        raise UnsupportedImageError(
            "INVALID_IMAGE_FORMAT", f"content is not a valid {extension} image"
        )
    return extension
