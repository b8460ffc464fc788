"""Concurrency utilities for Critical Inliner."""

import asyncio
import logging
from typing import Any, Awaitable, Iterable, List

logger = logging.getLogger(__name__)

async def gather_all(awaitables: Iterable[Awaitable[Any]]) -> List[Any]:
    """Run awaitables as tasks on the current loop and wait for all of them.

    Tasks start in iteration order. If one fails, the others are cancelled and
    the first error is raised, so callers never observe a partial result.

    Args:
        awaitables: Coroutines or futures to run

    Returns:
        Results in the same order as the awaitables
    """
    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    if not tasks:
        return []
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.debug(f"Cancelled {len(pending)} pending task(s) after a failure")
            await asyncio.gather(*pending, return_exceptions=True)
        raise

def run_sync(awaitable: Awaitable[Any]) -> Any:
    """Run a coroutine to completion on a new event loop."""
    return asyncio.run(awaitable)

# Exported functions
__all__ = ['gather_all', 'run_sync']
