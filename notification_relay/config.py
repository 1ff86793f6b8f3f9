"""Relay configuration management."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RelaySettings(BaseSettings):
    """Centralised relay settings derived from environment variables.

    Provider credentials are optional at load time so the HTTP server and the
    SMS function can start independently; a missing credential surfaces as a
    failure result when the matching channel is used.
    """

    email_user: str | None = Field(default=None, description="SMTP login user.")
    email_pass: SecretStr | None = Field(default=None, description="SMTP password.")
    email_from: str | None = Field(
        default=None,
        description="Default sender address. Falls back to EMAIL_USER.",
    )
    smtp_host: str = Field(default="smtp.gmail.com")
    smtp_port: int = Field(default=587, ge=1, le=65535)
    smtp_use_ssl: bool = Field(
        default=False,
        description="Use implicit TLS (SMTPS) instead of STARTTLS.",
    )
    smtp_timeout_seconds: float = Field(default=10.0, gt=0)
    smtp_verify_on_startup: bool = Field(default=True)

    textbelt_key: SecretStr | None = Field(default=None, description="SMS gateway API key.")
    textbelt_url: str = Field(default="https://textbelt.com/text")
    sms_timeout_seconds: float = Field(default=10.0, gt=0)

    app_host: str = Field(default="0.0.0.0", alias="HOST")
    app_port: int = Field(default=3000, ge=1, le=65535, alias="PORT")
    service_name: str = Field(default="Notification Relay Email Server")
    brand_name: str = Field(default="Notification Relay")

    log_level: str = Field(default="INFO")
    log_dir: Path | None = Field(default=None)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        valid = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        upper = value.upper()
        if upper not in valid:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(valid))}")
        return upper

    @field_validator("email_user", "email_from", "textbelt_key", "email_pass", mode="before")
    @classmethod
    def blank_as_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def default_sender(self) -> str | None:
        return self.email_from or self.email_user

    @property
    def smtp_configured(self) -> bool:
        return bool(self.email_user and self.email_pass)


@lru_cache()
def get_settings() -> RelaySettings:
    """Return cached settings instance so it can be reused across the relay."""

    settings = RelaySettings()
    if settings.log_dir is not None:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
    return settings
