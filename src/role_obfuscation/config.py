"""Centralized configuration using Pydantic Settings.

All settings can be overridden via environment variables, e.g.:

- AUTHENTICATION_ROLE_ANONYMIZED_IN_LOGGING=true
- AUTHENTICATION_ROLE_REDACTED_IN_LOGGING=true
- LOG_LEVEL=DEBUG
- LOG_FORMAT=console
"""

from __future__ import annotations

import os
import warnings
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from role_obfuscation.domain.enums import ObfuscationPolicy

# Skip reading .env file during testing to use code defaults
ENV_FILE = None if os.environ.get("TESTING") else ".env"
ENV_FILE_ENCODING = "utf-8"


class RoleLoggingSettings(BaseSettings):
    """How authentication roles are rendered in logs.

    Redaction wins when both switches are enabled.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTHENTICATION_ROLE_",
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
        frozen=True,
    )

    anonymized_in_logging: bool = Field(
        default=False,
        description="Replace roles with their Base64 SHA-256 digest in logs",
    )
    redacted_in_logging: bool = Field(
        default=False,
        description="Replace roles with [REDACTED] in logs",
    )

    @property
    def policy(self) -> ObfuscationPolicy:
        """Resolved obfuscation policy."""
        return ObfuscationPolicy.from_flags(
            redact_enabled=self.redacted_in_logging,
            anonymize_enabled=self.anonymized_in_logging,
        )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum log level",
    )
    format: Literal["json", "console"] = Field(
        default="json",
        description="Log output format",
    )
    include_timestamp: bool = Field(default=True)
    include_caller: bool = Field(default=True)


class Settings(BaseSettings):
    """Root settings combining all configuration groups."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        env_nested_delimiter="__",
        extra="ignore",
    )

    role: RoleLoggingSettings = Field(default_factory=RoleLoggingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @model_validator(mode="after")
    def validate_consistency(self) -> Settings:
        """Validate cross-field consistency."""
        if self.role.anonymized_in_logging and self.role.redacted_in_logging:
            warnings.warn(
                "Both role anonymization and redaction are enabled; roles will be redacted",
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton."""
    return Settings()


def get_role_settings() -> RoleLoggingSettings:
    """Get role logging settings."""
    return get_settings().role
