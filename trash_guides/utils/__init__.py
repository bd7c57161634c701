"""TRaSH Guides client utilities."""

from .logging import get_logger, setup_logging, setup_logging_from_dict
from .rate_limit import RateLimiter

__all__ = [
    "get_logger",
    "setup_logging",
    "setup_logging_from_dict",
    "RateLimiter",
]
