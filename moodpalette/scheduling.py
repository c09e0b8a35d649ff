"""
Cancelable repeating tasks on the asyncio loop. Used for detector polling and the
particle animation loop. Starting a task cancels its previous run first, so each
RepeatingTask has at most one live run.
"""
import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)


class RepeatingTask:
    """
    Calls `callback` every `interval` seconds until cancelled. The callback may be a
    plain function or a coroutine function; a coroutine is awaited before the next
    sleep, so runs of the callback never overlap.

    cancel() may be called from inside the callback: the current callback finishes
    and no further tick is scheduled.
    """

    def __init__(
        self,
        callback: Callable[[], Any | Awaitable[Any]],
        interval: float,
        *,
        name: str = "repeating-task",
    ):
        self.callback = callback
        self.interval = interval
        self.name = name
        self._task: asyncio.Task | None = None
        self._generation = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Cancel any previous run, then schedule a fresh one. Needs a running event loop."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._generation += 1
        self._task = loop.create_task(self._run(self._generation), name=self.name)
        logger.debug("%s started (interval %.3fs)", self.name, self.interval)

    def cancel(self) -> None:
        """Stop all future ticks. Safe to call when not running."""
        self._generation += 1
        task, self._task = self._task, None
        if task is None or task.done():
            return
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        if task is not current:
            task.cancel()
        logger.debug("%s cancelled", self.name)

    async def _run(self, generation: int) -> None:
        while generation == self._generation:
            await asyncio.sleep(self.interval)
            if generation != self._generation:
                break
            try:
                result = self.callback()
                if inspect.isawaitable(result):
                    await result
            except Exception:
                # One bad tick (e.g. a detector hiccup) must not kill the loop
                logger.exception("%s tick failed", self.name)
