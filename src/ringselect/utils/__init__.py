"""Utility functions for ringselect.

This module provides:

- Logging setup and configuration
- Selection statistics tracking
"""

from ringselect.utils.logging import (
    SelectionLogger,
    SelectionStats,
    configure_logging,
)

__all__ = [
    "SelectionLogger",
    "SelectionStats",
    "configure_logging",
]
