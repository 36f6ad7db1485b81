"""Cancellable periodic task driving the game loop."""

import asyncio
import inspect
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class PeriodicTicker:
    """Calls ``callback`` every ``interval_ms`` milliseconds on the running loop.

    Changing the period cancels the pending sleep and starts a fresh one, so any
    partially elapsed interval is discarded. A callback that is already running
    is never interrupted, whether ``cancel`` or ``reschedule`` comes from inside
    it or from another task; the old loop exits once the callback has returned.
    """

    def __init__(self, callback: Callable):
        self._callback = callback
        self._task: Optional[asyncio.Task] = None
        self._in_callback: Optional[asyncio.Task] = None
        self.interval_ms: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._task is not None

    def start(self, interval_ms: int):
        self.cancel()
        self.interval_ms = interval_ms
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(interval_ms))

    def reschedule(self, interval_ms: int):
        self.start(interval_ms)

    def cancel(self):
        task, self._task = self._task, None
        if task is not None and task is not self._in_callback:
            task.cancel()

    async def _run(self, interval_ms: int):
        me = asyncio.current_task()
        while True:
            await asyncio.sleep(interval_ms / 1000)
            self._in_callback = me
            try:
                result = self._callback()
                if inspect.isawaitable(result):
                    await result
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("Tick callback failed, stopping ticker")
                if self._task is me:
                    self._task = None
                return
            finally:
                if self._in_callback is me:
                    self._in_callback = None
            if self._task is not me:
                return
