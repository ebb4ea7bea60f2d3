"""Application configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed settings exposed via dependency injection throughout the app."""

    # Read .env with BOM tolerance; case-sensitive keys
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=True,
    )

    APP_NAME: str = "Geo Catalog API"
    ENV: str = "dev"  # dev | staging | prod
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ALLOWED_ORIGINS: list[str] = Field(default_factory=list)

    # DB
    DB_HOST: str = "127.0.0.1"
    DB_PORT: int = 3306
    DB_USER: str = "appadmin"
    DB_PASSWORD: str = ""  # set via env/.env
    DB_NAME: str = "geo_catalog"
    # Full SQLAlchemy URL; takes precedence over the DB_* parts when set.
    DB_URL: str | None = None
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600

    # Maximum allowed upload size for user-supplied files.
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024  # 5 MB
    ASSET_ALLOWED_FORMATS: list[str] = Field(
        default_factory=lambda: ["jpg", "jpeg", "png"]
    )

    # Cloudinary-compatible object storage
    # API host used by the SDK; the /v1_1/<cloud>/image/<action> path is appended by it.
    ASSET_UPLOAD_PREFIX: str = "https://api.cloudinary.com"
    CLOUDINARY_CLOUD_NAME: str | None = Field(default=None, description="Cloud name")
    CLOUDINARY_API_KEY: str | None = Field(default=None, description="API key")
    CLOUDINARY_API_SECRET: str | None = Field(default=None, description="API secret")
    COUNTRY_FLAG_FOLDER: str = "uploads"
    CATEGORY_ICON_FOLDER: str = "upload"
    # Upper bound for a single upload round-trip, including the wait for a worker slot.
    ASSET_UPLOAD_TIMEOUT_SEC: float = 30
    # Controls how many uploads may block worker threads at the same time.
    ASSET_MAX_CONCURRENCY: int = 4

    # Rate limit for upload endpoints. See app.core.rate_limit.limiter for syntax.
    ASSET_UPLOAD_RATE: str = "10/minute"
    RATE_LIMIT_ENABLED: bool = True

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        return (
            f"mysql+aiomysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4"
        )


settings = Settings()
