"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from statekit.config import ValueSettings, get_settings

    # Load from environment variables (STATEKIT_*)
    settings = get_settings()

    # Or override with explicit values
    settings = ValueSettings(assert_namespace="store")

    # Pick up changed environment variables
    get_settings.cache_clear()
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ValueSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the value utilities.

    Attributes:
        assert_namespace: Marker prefixed to PreconditionError messages,
            rendered as "[<namespace>] <message>".
        warn_on_lossy_copy: Warn when deep_copy() flattens a date, pattern
            or attribute-carrying object into a plain dict.

    Environment Variables:
        STATEKIT_ASSERT_NAMESPACE
        STATEKIT_WARN_ON_LOSSY_COPY
    """

    model_config = SettingsConfigDict(
        env_prefix="STATEKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    assert_namespace: str = "statekit"
    warn_on_lossy_copy: bool = True


@lru_cache(maxsize=1)
def get_settings() -> ValueSettings:
    """Get the process-wide settings, loaded once from the environment."""
    return ValueSettings()
