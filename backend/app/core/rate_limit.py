"""Per-client throttling of the image upload endpoints using SlowAPI."""

from fastapi import FastAPI, Request
from loguru import logger
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.core.config import settings
from app.core.responses import as_json_response, error_response

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

# Applied to every route that pushes a file to object storage.
upload_rate_limit = limiter.limit(settings.ASSET_UPLOAD_RATE)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.bind(path=request.url.path, limit=str(exc.detail)).warning("rate_limited")
    return as_json_response(error_response(429, "TOO_MANY_REQUESTS"))


def init_rate_limiter(app: FastAPI) -> None:
    """Attach the rate limiter and exception handler to the FastAPI app."""

    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
