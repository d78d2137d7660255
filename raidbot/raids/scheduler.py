"""Schedule the periodic raid expiry sweep."""

from __future__ import annotations

import asyncio
import logging

from raidbot.maintenance import startup as _startup, shutdown as _shutdown
from raidbot.config import raids
from .registry import RaidRegistry

logger = logging.getLogger(__name__)

_sweep_task: asyncio.Task | None = None


async def start(
    interval: float | None = None, *, registry: RaidRegistry | None = None
) -> asyncio.Task:
    """Start sweeping expired raids every ``interval`` seconds.

    Calling again while the sweep is running returns the existing task.
    """
    global _sweep_task

    interval = interval or raids.SWEEP_INTERVAL
    registry = registry or RaidRegistry()

    if not _sweep_task or _sweep_task.done():
        def _sweep() -> None:
            evicted = registry.sweep()
            if evicted:
                logger.info("Expiry sweep removed %d raid(s)", len(evicted))

        logger.info("Starting raid expiry sweep (interval=%ss)", interval)
        _sweep_task = await _startup(_sweep, interval, name="raid-expiry-sweep")

    return _sweep_task


async def stop() -> None:
    """Cancel the sweep task if running."""
    global _sweep_task

    if _sweep_task:
        await _shutdown(_sweep_task)
        _sweep_task = None
        logger.info("Stopped raid expiry sweep")
