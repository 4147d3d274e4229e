"""Utility modules for marklet.

Provides:
- logger: get_logger for namespaced logging
"""

from marklet.utils.logger import get_logger

__all__ = ["get_logger"]
