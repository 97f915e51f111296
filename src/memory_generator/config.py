"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_image_model: str = "dall-e-3"
    openai_image_size: str = "1024x1024"
    openai_image_quality: str = "standard"
    uploads_dir: Path = Path("uploads")
    uploads_url_prefix: str = "/uploads"
    ar_sessions_file: Path = Path("ar-sessions/sessions.json")
    public_dir: Path = Path("public")
    ar_sessions_limit: int = 1000
    max_photo_bytes: int = 5 * 1024 * 1024
    max_photos_per_request: int = 10
    cors_allow_origins: str = "*"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse comma-separated CORS origins; empty or "*" allows any origin."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins = [chunk.strip() for chunk in cleaned.split(",")]
    return [origin for origin in origins if origin] or ["*"]
