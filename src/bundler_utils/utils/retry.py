"""
Retry helpers for flaky network calls.

Exponential backoff with optional full jitter. Used around third-party
HTTP lookups, which the bundler never retried before.
"""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from bundler_utils.utils.logging import get_logger

T = TypeVar("T")

_logger = get_logger(__name__)


@dataclass(frozen=True)
class RetryConfig:
    """
    Retry behaviour for ``retry_async``.

    Example:
        ```python
        config = RetryConfig(
            max_attempts=3,
            base_delay_ms=500,
            retryable_errors=(httpx.TransportError,),
        )
        ```
    """

    max_attempts: int = 3
    """Total attempts, the first call included."""

    base_delay_ms: int = 1000
    """Delay before the first retry, in milliseconds."""

    max_delay_ms: int = 30000
    """Upper bound for a single delay, in milliseconds."""

    jitter: bool = True
    """Pick a random delay between 0 and the computed backoff."""

    exponential_base: float = 2.0

    retryable_errors: Tuple[Type[Exception], ...] = field(
        default_factory=lambda: (Exception,)
    )
    """Exception types that trigger another attempt."""


def calculate_delay(attempt: int, config: RetryConfig) -> float:
    """
    Backoff delay before retry number ``attempt`` (zero-based).

    Returns:
        Delay in seconds
    """
    delay_ms = min(
        config.base_delay_ms * (config.exponential_base ** attempt),
        config.max_delay_ms,
    )
    if config.jitter:
        delay_ms = random.uniform(0, delay_ms)
    return delay_ms / 1000


async def retry_async(
    fn: Callable[[], Awaitable[T]],
    config: Optional[RetryConfig] = None,
) -> T:
    """
    Await ``fn()`` until it succeeds or attempts run out.

    Errors outside ``config.retryable_errors`` propagate immediately.

    Raises:
        The last retryable error once every attempt failed
    """
    config = config or RetryConfig()
    attempts = max(config.max_attempts, 1)

    for attempt in range(attempts - 1):
        try:
            return await fn()
        except config.retryable_errors as e:
            delay = calculate_delay(attempt, config)
            _logger.debug(
                "Retrying after error",
                extra={"attempt": attempt + 1, "delay_s": delay, "error": str(e)},
            )
            await asyncio.sleep(delay)

    # last attempt: any error propagates
    return await fn()
