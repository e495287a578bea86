"""Configuration management for paramshape.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- StyleConfig: Fill and stroke settings, queried by shapes
- LoggingConfig: Logging settings
- ParamShapeSettings: Main application settings
"""

from paramshape.config.settings import (
    LoggingConfig,
    ParamShapeSettings,
    StyleConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "ParamShapeSettings",
    "StyleConfig",
    "get_default_settings",
]
