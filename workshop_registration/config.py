"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Workshop Registration"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Google Sheets (service account JSON path)
    google_sheets_credentials: str | None = Field(default=None)

    # Outbound webhook (shared across workshops)
    webhook_user: str = Field(default="")
    webhook_pass: str = Field(default="")
    webhook_timeout_seconds: float = Field(default=10.0, gt=0)
    webhook_retry_attempts: int = Field(
        default=3,
        ge=1,
        description="Delivery attempts on transport errors before giving up",
    )

    # Default workshop, overridable per deployment
    sheet_id_bizz_club_sm: str = Field(default="")
    stripe_member_bizz_club_sm: str = Field(default="")
    stripe_standard_bizz_club_sm: str = Field(default="")
    webhook_url_bizz_club_sm: str = Field(default="")

    # Optional JSON file with additional workshops keyed by slug
    workshops_file: Path | None = Field(default=None)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
