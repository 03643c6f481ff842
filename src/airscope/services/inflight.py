"""Coalescing of concurrent identical requests."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InFlightRegistry:
    """Shares one running task between callers asking for the same key.

    The first caller for a key starts the work; later callers await the same
    task until it finishes. Callers await the task through ``asyncio.shield``
    so one caller being cancelled does not cancel the shared work.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, asyncio.Task[Any]] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def _forget(self, key: str, task: asyncio.Task[Any]) -> None:
        if self._tasks.get(key) is task:
            del self._tasks[key]

    async def run(self, key: str, factory: Callable[[], Awaitable[T]]) -> T:
        """Run ``factory()`` unless a task for ``key`` is already running.

        Args:
            key: Identity of the request (typically its cache key)
            factory: Zero-argument callable returning the awaitable to run

        Returns:
            The result of the shared task
        """
        task = self._tasks.get(key)
        if task is None:
            task = asyncio.ensure_future(factory())
            self._tasks[key] = task
            task.add_done_callback(lambda done: self._forget(key, done))
        else:
            logger.debug("Joining in-flight request for %s", key)
        return await asyncio.shield(task)
