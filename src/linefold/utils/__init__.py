"""Utility modules for Linefold.

Provides:
- text: escape_html, format_attributes, wrap_tag for markup output
- logger: get_logger for logging
"""

from linefold.utils.logger import get_logger
from linefold.utils.text import escape_html, format_attributes, wrap_tag

__all__ = [
    "escape_html",
    "format_attributes",
    "get_logger",
    "wrap_tag",
]
