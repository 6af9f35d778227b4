"""Configuration module using Pydantic Settings.

Provides typed configuration for accessors with environment variable support.

Usage:
    from objreflect.config import ReflectionSettings

    settings = ReflectionSettings(path_separator="/", include_private=False)
"""

from objreflect.config.settings import ReflectionSettings, get_settings

__all__ = [
    "ReflectionSettings",
    "get_settings",
]
