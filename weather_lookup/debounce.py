# ABOUTME: Cancellable delayed call used to debounce suggestion lookups.
# ABOUTME: Wraps an asyncio TimerHandle that is always cancelled before being replaced.

import asyncio
from collections.abc import Awaitable, Callable


class Debouncer:
    """Runs the most recently scheduled coroutine function once `delay` seconds pass quietly.

    Only the timer is cancellable. Once it fires the call runs as its own task
    and is allowed to finish even if a newer call gets scheduled.
    """

    def __init__(self, delay: float):
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._running: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        """True while a call is scheduled but has not fired yet."""
        return self._handle is not None

    def schedule(self, func: Callable[[], Awaitable[None]]) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, func)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, func: Callable[[], Awaitable[None]]) -> None:
        self._handle = None
        task = asyncio.ensure_future(func())
        self._running.add(task)
        task.add_done_callback(self._running.discard)

    async def wait(self) -> None:
        """Wait for the scheduled call to fire and for every fired call to finish.

        Exceptions raised by the fired calls are re-raised here.
        """
        loop = asyncio.get_running_loop()
        while self._handle is not None or self._running:
            if self._handle is not None:
                await asyncio.sleep(max(self._handle.when() - loop.time(), 0))
                continue
            done, _ = await asyncio.wait(set(self._running))
            for task in done:
                if not task.cancelled():
                    task.result()
