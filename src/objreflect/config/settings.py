"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for accessors.

Usage:
    from objreflect.config import ReflectionSettings

    # Load from environment variables (OBJREFLECT_*)
    settings = ReflectionSettings()

    # Or override with explicit values
    settings = ReflectionSettings(path_separator="/")
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReflectionSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for Reflection accessors.

    Attributes:
        path_separator: Separator between path segments.
        include_private: Whether names starting with "_" count as members.

    Environment Variables:
        OBJREFLECT_PATH_SEPARATOR
        OBJREFLECT_INCLUDE_PRIVATE
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJREFLECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    path_separator: str = Field(default=".", min_length=1)
    include_private: bool = True


@lru_cache(maxsize=1)
def get_settings() -> ReflectionSettings:
    """Process-wide default settings, read from the environment once."""
    return ReflectionSettings()
