"""
Sleeping and polling helpers.
"""

from __future__ import annotations

import asyncio
import inspect
import time
from typing import Awaitable, Callable, Optional, TypeVar, Union

from bundler_utils.constants import WAIT_INTERVAL_MS, WAIT_TIMEOUT_MS
from bundler_utils.errors import WaitTimeoutError
from bundler_utils.utils.logging import get_logger

T = TypeVar("T")

_logger = get_logger(__name__)


async def sleep(sleep_time_ms: float) -> None:
    """Sleep for ``sleep_time_ms`` milliseconds."""
    await asyncio.sleep(sleep_time_ms / 1000)


async def wait_for(
    func: Callable[[], Union[Optional[T], Awaitable[Optional[T]]]],
    timeout_ms: int = WAIT_TIMEOUT_MS,
    interval_ms: int = WAIT_INTERVAL_MS,
) -> T:
    """
    Poll ``func`` until it returns something other than ``None``.

    ``func`` may be a plain function or a coroutine function. It is
    always called at least once. The deadline is fixed on entry and
    checked after every attempt, so a slow ``func`` still gets its
    final call.

    Args:
        func: Condition to poll
        timeout_ms: Give up after this many milliseconds
        interval_ms: Pause between attempts

    Returns:
        The first non-None value returned by ``func``

    Raises:
        WaitTimeoutError: If the deadline passed without a result
    """
    end_time = time.monotonic() + timeout_ms / 1000
    while True:
        ret = func()
        if inspect.isawaitable(ret):
            ret = await ret
        if ret is not None:
            return ret
        if time.monotonic() > end_time:
            name = getattr(func, "__qualname__", None) or repr(func)
            _logger.debug("Polling timed out", extra={"func": name, "timeout_ms": timeout_ms})
            raise WaitTimeoutError(f"Timed out waiting for {name}", timeout_ms=timeout_ms)
        await sleep(interval_ms)
