"""Client for the external object storage that hosts flags and icons."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, Protocol

import anyio
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from loguru import logger

from app.core.concurrency import run_in_thread_limited
from app.core.config import settings
from app.utils.security import ImageUpload


class AssetUploadError(RuntimeError):
    """The storage service did not return a usable public URL."""


@dataclass(slots=True)
class UploadedAsset:
    url: str
    public_id: str | None = None


class AssetUploader(Protocol):
    @property
    def configured(self) -> bool: ...

    async def upload(self, image: ImageUpload, folder: str) -> UploadedAsset: ...

    async def discard(self, asset: UploadedAsset) -> None: ...


class CloudinaryUploader:
    """Uploads through the Cloudinary SDK.

    The SDK is blocking, so every call runs in a bounded worker thread and is
    abandoned after ``timeout`` seconds. A stalled storage call therefore
    surfaces as :class:`AssetUploadError` instead of holding the request open.
    """

    def __init__(
        self,
        cloud_name: str | None,
        api_key: str | None,
        api_secret: str | None,
        *,
        upload_prefix: str,
        timeout: float,
        allowed_formats: list[str],
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.upload_prefix = upload_prefix.rstrip("/")
        self.timeout = timeout
        self.allowed_formats = allowed_formats

    @classmethod
    def from_settings(cls) -> "CloudinaryUploader":
        return cls(
            settings.CLOUDINARY_CLOUD_NAME,
            settings.CLOUDINARY_API_KEY,
            settings.CLOUDINARY_API_SECRET,
            upload_prefix=settings.ASSET_UPLOAD_PREFIX,
            timeout=settings.ASSET_UPLOAD_TIMEOUT_SEC,
            allowed_formats=settings.ASSET_ALLOWED_FORMATS,
        )

    @property
    def configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def _options(self) -> dict[str, Any]:
        # Passed on every call instead of cloudinary.config() so instances stay independent.
        return {
            "cloud_name": self.cloud_name,
            "api_key": self.api_key,
            "api_secret": self.api_secret,
            "upload_prefix": self.upload_prefix,
            "timeout": self.timeout,
        }

    def _upload_sync(self, image: ImageUpload, folder: str) -> dict:
        return cloudinary.uploader.upload(
            io.BytesIO(image.content),
            filename=image.filename,
            folder=folder,
            allowed_formats=self.allowed_formats,
            **self._options(),
        )

    def _destroy_sync(self, public_id: str) -> dict:
        return cloudinary.uploader.destroy(public_id, **self._options())

    async def _run(self, func, *args) -> dict:
        try:
            with anyio.fail_after(self.timeout):
                return await run_in_thread_limited(func, *args)
        except TimeoutError as exc:
            raise AssetUploadError(f"storage call timed out after {self.timeout}s") from exc
        except CloudinaryError as exc:
            raise AssetUploadError(f"storage call failed: {exc}") from exc

    async def upload(self, image: ImageUpload, folder: str) -> UploadedAsset:
        if not self.configured:
            raise AssetUploadError("object storage credentials are not configured")

        payload = await self._run(self._upload_sync, image, folder)
        url = payload.get("secure_url")
        if not url:
            raise AssetUploadError("storage response did not include secure_url")

        asset = UploadedAsset(url=url, public_id=payload.get("public_id"))
        logger.bind(folder=folder, public_id=asset.public_id).info("asset_uploaded")
        return asset

    async def discard(self, asset: UploadedAsset) -> None:
        """Best-effort removal of an asset whose database row was never written."""

        if not asset.public_id or not self.configured:
            return
        try:
            payload = await self._run(self._destroy_sync, asset.public_id)
        except AssetUploadError as exc:
            logger.bind(public_id=asset.public_id, error=str(exc)).warning(
                "asset_discard_failed"
            )
            return
        # "not found" means there is nothing left to clean up.
        logger.bind(public_id=asset.public_id, result=payload.get("result")).info(
            "asset_discarded"
        )
