"""Shared FastAPI dependencies."""

from app.services.uploader import AssetUploader, CloudinaryUploader

_uploader = CloudinaryUploader.from_settings()


def get_uploader() -> AssetUploader:
    """Return the process-wide storage client; tests override this dependency."""

    return _uploader
