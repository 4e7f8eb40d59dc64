"""Configuration management for ringselect.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Tolerances for geometric predicates
- SelectionConfig: Ring selection settings
- LoggingConfig: Logging settings
- RingSelectSettings: Main application settings
"""

from ringselect.config.settings import (
    GeometryConfig,
    LoggingConfig,
    RingSelectSettings,
    SelectionConfig,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "RingSelectSettings",
    "SelectionConfig",
    "get_default_settings",
]
