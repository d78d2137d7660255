"""
Periodic background jobs.

The raid expiry sweep is the main consumer: it registers a plain callable
here and gets back an :class:`asyncio.Task` that keeps invoking it on the
running event loop until the bot shuts down. Jobs run on the same loop as
command handling, so a job that never awaits cannot interleave with a
command mid-operation.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Awaitable, Callable, Union

logger = logging.getLogger(__name__)

Job = Callable[[], Union[Awaitable[None], None]]


async def startup(task_fn: Job, interval: float, *, name: str = "maintenance") -> asyncio.Task:
    """
    Schedule ``task_fn`` to run every ``interval`` seconds.

    ``task_fn`` may be a coroutine function or a plain function. A failing
    cycle is logged and the loop carries on with the next one.
    """

    async def _periodic() -> None:
        await asyncio.sleep(interval)  # first run after one full interval
        while True:
            try:
                result = task_fn()
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("%s cycle failed", name)
            await asyncio.sleep(interval)

    logger.info("Scheduling %s every %ss", name, interval)
    return asyncio.create_task(_periodic(), name=name)


async def shutdown(task: asyncio.Task | None) -> None:
    """
    Cancel a job started with :func:`startup` and wait for it to finish.

    ``None`` and already-finished tasks are accepted.
    """

    if not task:
        return

    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        pass
