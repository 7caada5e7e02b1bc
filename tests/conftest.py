"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import os

import pytest

# Set TESTING mode BEFORE any app imports to prevent .env file loading.
os.environ["TESTING"] = "1"

# Clear environment variables BEFORE any imports that might use Pydantic Settings
_ENV_VARS_TO_CLEAR = [
    "AUTHENTICATION_ROLE_ANONYMIZED_IN_LOGGING",
    "AUTHENTICATION_ROLE_REDACTED_IN_LOGGING",
    "ROLE__ANONYMIZED_IN_LOGGING",
    "ROLE__REDACTED_IN_LOGGING",
    "LOG_FORMAT",
    "LOG_LEVEL",
    "LOG_INCLUDE_TIMESTAMP",
    "LOG_INCLUDE_CALLER",
]

for _var in _ENV_VARS_TO_CLEAR:
    os.environ.pop(_var, None)


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear environment variables that might be set by a developer shell.

    Also clears any cached settings to force re-read of defaults.
    """
    for var in _ENV_VARS_TO_CLEAR:
        monkeypatch.delenv(var, raising=False)

    from role_obfuscation.config import get_settings  # noqa: PLC0415

    get_settings.cache_clear()


@pytest.fixture(scope="session")
def sample_roles() -> list[str]:
    """Return roles covering plain, empty, whitespace, non-ASCII and lone-surrogate text."""
    return [
        "alice",
        "bob",
        "",
        " ",
        "admin@example.com",
        "CN=proxy,OU=pulsar,O=example",
        "ünïcødé",
        "user-\udcff",
    ]
