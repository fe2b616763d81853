"""
bundler-utils utilities.

Logging, retry, deadline and polling helpers shared by the other modules.
"""

from bundler_utils.utils.deadline import with_deadline
from bundler_utils.utils.helpers import map_of, to_int, to_str
from bundler_utils.utils.logging import (
    configure_logging,
    disable_logging,
    enable_debug,
    get_logger,
    set_level,
)
from bundler_utils.utils.polling import sleep, wait_for
from bundler_utils.utils.retry import RetryConfig, calculate_delay, retry_async

__all__ = [
    # Structured logging
    "get_logger",
    "configure_logging",
    "set_level",
    "disable_logging",
    "enable_debug",
    # Timing
    "sleep",
    "wait_for",
    "with_deadline",
    # Retry
    "RetryConfig",
    "calculate_delay",
    "retry_async",
    # Conversions
    "map_of",
    "to_int",
    "to_str",
]
