"""Utility modules for lexicolor.

Provides:
- logger: get_logger for namespaced logging
"""

from lexicolor.utils.logger import get_logger

__all__ = ["get_logger"]
