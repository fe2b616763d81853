"""
Run an awaitable with a deadline.

The operation is cancelled when the deadline passes, so sockets held by
an in-flight request are released instead of lingering in the background.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

from bundler_utils.errors import DeadlineExceededError
from bundler_utils.utils.logging import get_logger

T = TypeVar("T")

_logger = get_logger(__name__)


async def with_deadline(
    fn: Callable[[], Awaitable[T]],
    timeout_ms: int,
    operation: Optional[str] = None,
) -> T:
    """
    Await ``fn()``, cancelling it after ``timeout_ms`` milliseconds.

    Args:
        fn: Zero-argument callable returning the awaitable to run
        timeout_ms: Deadline in milliseconds
        operation: Name used in the error message (defaults to fn's name)

    Returns:
        Result of the awaitable

    Raises:
        DeadlineExceededError: If the deadline passed first. The
            underlying operation has been cancelled.
        TimeoutError: Raised by the operation itself before the deadline,
            for example a WaitTimeoutError. Propagates unchanged.

    Example:
        ```python
        data = await with_deadline(lambda: client.get(url), 14_000, operation=url)
        ```
    """
    name = operation or getattr(fn, "__name__", repr(fn))
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout_ms / 1000
    try:
        return await asyncio.wait_for(fn(), timeout=timeout_ms / 1000)
    except asyncio.TimeoutError as e:
        # a TimeoutError raised by the operation itself before the deadline
        if loop.time() < deadline:
            raise
        _logger.warning(
            "Deadline exceeded",
            extra={"operation": name, "timeout_ms": timeout_ms},
        )
        raise DeadlineExceededError(name, timeout_ms) from e
