"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Deployment
    environment: str = "production"  # "development" exposes error details in 500 bodies

    # Email delivery
    email_backend: Literal["console", "smtp"] = "console"
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_use_tls: bool = True
    mail_from: str = "noreply@prereg.local"
    admin_email: str = ""  # Empty disables the admin notification email

    # Client state
    storage_dir: str = ".prereg"  # One JSON file per durable slot
    api_base_url: str = "http://localhost:8000"
    request_timeout_seconds: float = 10.0

    @property
    def is_development(self) -> bool:
        """True when running with development diagnostics enabled."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
