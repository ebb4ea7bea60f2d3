"""Unit-of-work helpers shared by every catalog service operation."""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db_errors import is_duplicate_entry
from app.core.logging import operation_ctx_var
from app.core.responses import error_response, success_response
from app.schemas.common import ResponseDto
from app.services.uploader import AssetUploader, UploadedAsset
from app.utils.security import ImageUpload, UnsupportedImageError, validate_image_upload


class ServiceError(Exception):
    """A domain failure that maps directly onto an error envelope."""

    def __init__(self, status_code: int, message_key: str):
        super().__init__(message_key)
        self.status_code = status_code
        self.message_key = message_key


def ensure_valid_image(image: ImageUpload) -> None:
    try:
        validate_image_upload(image)
    except UnsupportedImageError as exc:
        raise ServiceError(400, exc.message_key) from exc


async def run_operation(
    session: AsyncSession,
    operation: Callable[[], Awaitable[Any]],
    *,
    name: str,
    success_key: str,
    duplicate_key: str | None = None,
) -> ResponseDto:
    """Await ``operation`` and translate its outcome into a response envelope.

    Whatever goes wrong, the session is rolled back before the error envelope
    is returned, so nothing from a failed operation is ever committed. Log
    records emitted while the operation runs carry its ``name``.
    """

    token = operation_ctx_var.set(name)
    try:
        return await _execute(session, operation, success_key, duplicate_key)
    finally:
        operation_ctx_var.reset(token)


async def _execute(
    session: AsyncSession,
    operation: Callable[[], Awaitable[Any]],
    success_key: str,
    duplicate_key: str | None,
) -> ResponseDto:
    try:
        data = await operation()
        if session.in_transaction():
            # Reads run in an implicit transaction; end it so the session is reusable.
            await session.commit()
    except ServiceError as exc:
        await session.rollback()
        logger.bind(status=exc.status_code, key=exc.message_key).info("service_rejected")
        return error_response(exc.status_code, exc.message_key)
    except IntegrityError as exc:
        await session.rollback()
        if duplicate_key and is_duplicate_entry(exc):
            logger.bind(key=duplicate_key).info("service_duplicate_race")
            return error_response(400, duplicate_key)
        logger.exception("service_failed")
        return error_response(500, "SOMETHING_WRONG", error=exc)
    except Exception as exc:
        await session.rollback()
        logger.exception("service_failed")
        return error_response(500, "SOMETHING_WRONG", error=exc)

    logger.bind(key=success_key).info("service_succeeded")
    return success_response(200, success_key, data)


async def write_with_asset(
    session: AsyncSession,
    uploader: AssetUploader,
    image: ImageUpload,
    folder: str,
    write: Callable[[UploadedAsset], Awaitable[Any]],
) -> Any:
    """Upload ``image`` outside any transaction, then run ``write`` in one.

    The caller has already run its duplicate/parent checks; the read
    transaction they opened is closed before the network call so no
    connection is held while storage is busy. ``write`` must repeat those
    checks because another request may have committed in between. If the
    write fails for any reason the uploaded asset is discarded.
    """

    await session.rollback()
    asset = await uploader.upload(image, folder)
    try:
        async with session.begin():
            return await write(asset)
    except Exception:
        await uploader.discard(asset)
        raise
