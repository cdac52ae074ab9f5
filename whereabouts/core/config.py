"""Application configuration settings."""

import typing as t

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Whereabouts"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./whereabouts.db"
    database_echo: bool = False

    # IANA zone used for "today" and for naive range bounds
    timezone: str = "UTC"

    # CORS
    cors_origins: t.List[str] = ["*"]

    # Insert a few locations, residents and scans on an empty database
    seed_demo_data: bool = False


SETTINGS = Settings()
