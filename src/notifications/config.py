"""Service configuration — read once from the environment at startup.

Values come from environment variables, optionally layered over a
``.env.<ENVIRONMENT>`` file in the working directory.
"""

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=f".env.{os.getenv('ENVIRONMENT', 'local')}",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    environment: str = "development"
    port: int = 3005

    # Upstream catalog/order/user API
    brewery_api_url: str = "http://localhost:5089"
    http_timeout_seconds: float = Field(default=10.0, gt=0)

    # Mail channel
    email_adapter: str = "fake"  # "fake" or "smtp"
    email_user: str = ""
    email_pass: str = ""
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    send_timeout_seconds: float = Field(default=30.0, gt=0)

    # Internal recipient for low-stock alerts
    admin_email: str = "inventory-admin@brewery.local"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (loaded on first use)."""
    return Settings()
