"""Minimal logging utilities for join_lazy_fmt.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from join_lazy_fmt.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering join")
"""

from __future__ import annotations

import logging

_ROOT = "join_lazy_fmt"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "join_lazy_fmt." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'join_lazy_fmt.mymodule'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
