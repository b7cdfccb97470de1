"""Logger configuration using pydantic-settings."""

import os
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("none", "error", "warning", "info", "debug", "trace", "verbose")


class Settings(BaseSettings):
    """Logger settings sourced from the environment.

    Configuration priority (highest to lowest):
    1. Environment variables (prefixed with ``SINKLOG_``)
    2. .env.{ENVIRONMENT} file (e.g., .env.production)
    3. .env file (shared defaults)
    4. Field defaults in this class
    """

    model_config = SettingsConfigDict(
        env_prefix="SINKLOG_",
        env_file=(
            ".env",
            f".env.{os.getenv('ENVIRONMENT', 'development')}",
        ),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Default logger
    logger_default_name: str = Field(
        default="sinklog",
        description="Name of the default logger created by a logging context",
    )
    log_level: str = Field(
        default="info",
        description="Level of the default logger (none, error, warning, info, debug, trace)",
    )
    log_to_file_system: bool = True
    log_to_console: bool = True
    logger_cut_prefix: bool = True

    # Log files
    persist_local_logs: bool = Field(
        default=False,
        description="Keep log files when a context asks to clear them without override",
    )
    log_directory: str | None = Field(
        default=None,
        description="Base directory for log files (defaults to <package dir>/logs)",
    )

    # Data store input limits
    datastore_key_length_limit: int = Field(
        default=50,
        description="Maximum length of data store names, scopes and keys",
    )

    # Internal diagnostics
    diagnostics_log_level: str = "WARNING"
    diagnostics_log_format: Literal["console", "json"] = "console"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the default logger level is a valid option."""
        v_lower = v.lower()
        if v_lower not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}")
        return v_lower

    @field_validator("diagnostics_log_level")
    @classmethod
    def validate_diagnostics_log_level(cls, v: str) -> str:
        """Validate diagnostics log level is a valid option."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"diagnostics_log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("datastore_key_length_limit")
    @classmethod
    def validate_key_length_limit(cls, v: int) -> int:
        """Validate key length limit is positive."""
        if v < 1:
            raise ValueError("datastore_key_length_limit must be at least 1")
        return v


def get_settings() -> Settings:
    """Get a settings instance.

    Settings are cheap to build, so callers that need a stable view should
    keep the instance they were handed instead of calling this repeatedly.
    """
    return Settings()
