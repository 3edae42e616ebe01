"""Minimal logging utilities for Linefold.

Provides a simple get_logger function that wraps the standard library logging.
Linefold never installs handlers; applications decide where records go.

Example:
    >>> from linefold.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Froze section %d", 1)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "linefold." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'linefold.mymodule'
    """
    if not (name == "linefold" or name.startswith("linefold.")):
        name = f"linefold.{name}"
    return logging.getLogger(name)
