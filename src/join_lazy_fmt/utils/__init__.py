"""Utility modules for join_lazy_fmt.

Provides:
- logger: get_logger for logging
"""

from join_lazy_fmt.utils.logger import get_logger

__all__ = [
    "get_logger",
]
