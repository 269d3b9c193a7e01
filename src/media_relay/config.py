"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    storage_bucket: str = "images"
    allowed_origin: str = "http://localhost:3000"
    upload_timeout_seconds: float = Field(default=30.0, gt=0)
    database_timeout_seconds: float = Field(default=10.0, gt=0)
    notification_send_timeout_seconds: float = Field(default=5.0, gt=0)
    bcrypt_rounds: int = Field(default=12, ge=10, le=31)
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse the comma-separated CORS origin setting."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    return [origin.strip() for origin in cleaned.split(",") if origin.strip()]
