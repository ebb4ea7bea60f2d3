"""Application entry point for the Geo Catalog API service."""

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.categories import router as categories_router
from app.api.routes.cities import router as cities_router
from app.api.routes.countries import router as countries_router
from app.api.routes.states import router as states_router
from app.api.routes.subcategories import router as subcategories_router
from app.core.config import settings
from app.core.db import get_session
from app.core.deps import get_uploader
from app.core.logging import setup_logging
from app.core.middleware import BodySizeLimitMiddleware, RequestContextLogMiddleware
from app.core.rate_limit import init_rate_limiter
from app.services.uploader import AssetUploader

setup_logging()

app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

init_rate_limiter(app)

app.add_middleware(RequestContextLogMiddleware)


def _cors_origins() -> list[str]:
    if settings.ENV == "prod":
        if not settings.CORS_ALLOWED_ORIGINS:
            raise RuntimeError("CORS_ALLOWED_ORIGINS must be configured for prod")
        return settings.CORS_ALLOWED_ORIGINS
    return settings.CORS_ALLOWED_ORIGINS or ["http://localhost:5173"]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

app.add_middleware(BodySizeLimitMiddleware)


@app.get("/api/healthz", tags=["system"], summary="Liveness probe")
def healthz() -> dict[str, str]:
    """Simple liveness probe that load balancers and monitors can call."""

    return {"status": "ok"}


@app.get("/api/readyz", tags=["system"], summary="Readiness probe")
async def readyz(
    session: AsyncSession = Depends(get_session),
    uploader: AssetUploader = Depends(get_uploader),
):
    try:
        await session.execute(text("SELECT 1"))
    except Exception:
        raise HTTPException(status_code=503, detail="Database not reachable")
    # Uploads fail until storage credentials are set; report it without failing the probe.
    return {"ready": True, "storage_configured": uploader.configured}


app.include_router(countries_router, prefix="/api")
app.include_router(states_router, prefix="/api")
app.include_router(cities_router, prefix="/api")
app.include_router(categories_router, prefix="/api")
app.include_router(subcategories_router, prefix="/api")
