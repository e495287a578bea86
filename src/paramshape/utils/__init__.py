"""Utility functions for paramshape.

This module provides logging setup and configuration.
"""

from paramshape.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
