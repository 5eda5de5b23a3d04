"""Configuration management for fontprofile.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, environment variables,
or defaults, and is resolved once into an immutable ProfileSettings value.

Key classes:
- IdentityConfig: Identifier namespace and organization
- OutputConfig: Output location and optional document fields
- LoggingConfig: Logging settings
- ProfileSettings: Main build settings
"""

from fontprofile.config.settings import (
    DEFAULT_FONT_DIRECTORY,
    DEFAULT_PRODUCT_NAME,
    ENV_DIRECTORY,
    ENV_PRODUCT_NAME,
    ENV_VERSION,
    FontIdentifierStyle,
    IdentityConfig,
    LoggingConfig,
    OutputConfig,
    ProfileSettings,
    resolve_settings,
    settings_from_env,
)

__all__ = [
    "DEFAULT_FONT_DIRECTORY",
    "DEFAULT_PRODUCT_NAME",
    "ENV_DIRECTORY",
    "ENV_PRODUCT_NAME",
    "ENV_VERSION",
    "FontIdentifierStyle",
    "IdentityConfig",
    "LoggingConfig",
    "OutputConfig",
    "ProfileSettings",
    "resolve_settings",
    "settings_from_env",
]
