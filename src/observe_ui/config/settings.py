"""UI test settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """OpenObserve UI test configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application under test
    base_url: str = Field(
        default="http://localhost:5080",
        validation_alias=AliasChoices("base_url", "zo_base_url"),
        description="OpenObserve UI base URL",
    )

    # Root account
    root_user_email: str = Field(
        default="",
        validation_alias=AliasChoices("root_user_email", "zo_root_user_email"),
        description="Root user email, also the visible text of the profile button",
    )
    root_user_password: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("root_user_password", "zo_root_user_password"),
        description="Root user password",
    )

    # Browser
    action_timeout_ms: int = Field(
        default=15_000,
        gt=0,
        validation_alias=AliasChoices("action_timeout_ms", "ui_action_timeout_ms"),
        description="Timeout for a single click or assertion",
    )
    navigation_timeout_ms: int = Field(
        default=60_000,
        gt=0,
        validation_alias=AliasChoices("navigation_timeout_ms", "ui_navigation_timeout_ms"),
        description="Timeout for page navigation",
    )
    headless: bool = Field(
        default=True,
        validation_alias=AliasChoices("headless", "ui_headless"),
        description="Run the browser without a window",
    )

    # Logging
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format and drop a trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
