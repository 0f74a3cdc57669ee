"""Test harness configuration using Pydantic Settings."""

import tempfile
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Harness settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Host platform
    host_url: str = ""  # Empty disables the live e2e suite
    host_api_key: str = ""
    host_email: str = ""
    host_password: str = ""
    host_timeout_seconds: float = 60.0

    # Preview plugin
    preview_plugin: str = "camera_raw_previews"
    thumbnail_width: int = 100
    thumbnail_height: int = 100

    # Fixtures
    fixture_cache_dir: str = ""  # Empty means the platform temp dir
    fixture_timeout_seconds: float = 120.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # console or json

    @field_validator("host_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("console", "json"):
            raise ValueError(f"log_format must be 'console' or 'json', got {v!r}")
        return v

    @property
    def host_configured(self) -> bool:
        return bool(self.host_url)

    @property
    def has_user_credentials(self) -> bool:
        return bool(self.host_email and self.host_password)

    @property
    def cache_dir(self) -> Path:
        """Directory holding downloaded fixtures."""
        return Path(self.fixture_cache_dir or tempfile.gettempdir())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
