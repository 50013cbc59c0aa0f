"""Completion polling for submitted ingestion work.

Feeds and contents are processed asynchronously by the platform. Tools only
report a single done/not-done observation; waiting is up to the caller, and
``poll_until_done`` is the loop a caller (the CLI ``wait`` command) uses.
Recurring feeds never report done and must not be polled this way.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from enum import Enum

from loguru import logger

from graphlit_mcp.utils.duration import duration_seconds
from graphlit_mcp.utils.exceptions import TimeoutError


class CompletionState(Enum):
    PENDING = "pending"
    DONE = "done"


def completion_state(done: bool | None) -> CompletionState:
    return CompletionState.DONE if done else CompletionState.PENDING


async def poll_until_done(
    check: Callable[[], Awaitable[bool | None]],
    *,
    interval: str = "PT5S",
    timeout: str = "PT10M",
    operation: str = "completion poll",
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> CompletionState:
    """
    Call ``check`` every ``interval`` until it reports done.

    Raises:
        TimeoutError: when ``timeout`` elapses first.
    """
    interval_s = duration_seconds(interval, field="interval")
    timeout_s = duration_seconds(timeout, field="timeout")
    deadline = clock() + timeout_s
    attempts = 0
    while True:
        attempts += 1
        state = completion_state(await check())
        if state is CompletionState.DONE:
            logger.debug(f"{operation} finished after {attempts} check(s)")
            return state
        if clock() + interval_s > deadline:
            raise TimeoutError(operation, timeout_s)
        await sleep(interval_s)
