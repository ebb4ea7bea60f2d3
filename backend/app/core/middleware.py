"""ASGI middleware: request correlation/access logging and upload size guard."""

from __future__ import annotations

import time
import uuid

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import settings
from app.core.logging import request_id_ctx_var
from app.core.responses import as_json_response, error_response

_MAX_REQUEST_ID_LEN = 64
_MULTIPART_OVERHEAD = 64 * 1024


def _request_id(request: Request) -> str:
    incoming = request.headers.get("X-Request-ID", "").strip()
    if incoming and len(incoming) <= _MAX_REQUEST_ID_LEN:
        return incoming
    return uuid.uuid4().hex


class RequestContextLogMiddleware(BaseHTTPMiddleware):
    """Tags every log record with a request ID and writes one access record per request."""

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        request_id = _request_id(request)
        request.state.request_id = request_id
        request_token = request_id_ctx_var.set(request_id)
        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            status_code = response.status_code if response else 500
            access = logger.bind(
                method=request.method,
                path=request.url.path,
                client=request.client.host if request.client else None,
                status=status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            if status_code >= 500:
                access.warning("request_completed")
            else:
                access.info("request_completed")
            request_id_ctx_var.reset(request_token)


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared body cannot hold an acceptable image."""

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        content_length = request.headers.get("content-length")
        if content_length is not None:
            try:
                declared = int(content_length)
            except ValueError:
                return as_json_response(error_response(400, "INVALID_CONTENT_LENGTH"))
            # Multipart framing adds a little on top of the file itself.
            if declared > settings.MAX_UPLOAD_BYTES + _MULTIPART_OVERHEAD:
                logger.bind(path=request.url.path, content_length=declared).warning(
                    "request_too_large"
                )
                return as_json_response(error_response(413, "IMAGE_TOO_LARGE"))

        return await call_next(request)
