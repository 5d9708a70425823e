"""Configuration module using Pydantic Settings.

Usage:
    from statekit.config import get_settings

    namespace = get_settings().assert_namespace
"""

from statekit.config.settings import ValueSettings, get_settings

__all__ = [
    "ValueSettings",
    "get_settings",
]
