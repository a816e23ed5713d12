# backend/studio_scheduler/core/config.py
import logging
import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


def is_running_tests() -> bool:
    """
    Detect if code is running under pytest.

    PYTEST_CURRENT_TEST is set automatically by pytest during test runs, and is
    not expected to be present in production environments.
    """
    return os.getenv("PYTEST_CURRENT_TEST") is not None


# Load .env file only if not in CI
if not os.getenv("CI"):
    env_path = Path(__file__).parent.parent.parent / ".env"  # Goes up to backend/.env
    logger.debug(f"[CONFIG] Looking for .env at: {env_path}")
    load_dotenv(env_path)


class Settings(BaseSettings):
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database
    database_url: str = Field(
        default="sqlite:///./studio_scheduler.db",
        alias="DATABASE_URL",
        description="SQLAlchemy URL of the relational store",
    )
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    # Email
    email_provider: Literal["console", "resend"] = Field(
        default="console",
        alias="EMAIL_PROVIDER",
        description="Email provider name",
    )
    resend_api_key: str | None = Field(
        default=None,
        alias="RESEND_API_KEY",
        description="API key for Resend provider (optional)",
    )
    email_from: str | None = Field(
        default=None,
        alias="EMAIL_FROM",
        description="Sender address for confirmation emails",
    )
    default_director_phone: str = Field(
        default="778-681-9306",
        alias="DEFAULT_DIRECTOR_PHONE",
        description="Contact number printed when a director has no phone on file",
    )

    # Time handling
    local_timezone: str = Field(
        default="America/Los_Angeles",
        alias="LOCAL_TIMEZONE",
        description="Civil time zone used for 'today' and for display",
    )

    # Legacy flags for backward compatibility
    is_testing: bool = Field(default=False, alias="IS_TESTING")

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("CI") else None,
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = (value or "INFO").strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return normalized

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def get_database_url(self) -> str:
        """Return the URL the engine should bind to."""
        return self.database_url

    def get_email_sender(self) -> Optional[str]:
        """Return the configured sender, or None when sending is not configured."""
        sender = (self.email_from or "").strip()
        return sender or None


settings = Settings()
