"""Session timers."""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

TimerCallback = Callable[[], Awaitable[None]]


class TimerPurpose(str, Enum):
    """What a scheduled timer is for. One live timer per purpose."""

    START = "start"  # delay before the first round
    ROUND = "round"  # players choosing cards
    WINNER = "winner"  # judge choosing the winner
    STOP = "stop"  # not enough players, stop if nobody joins


class Scheduler:
    """Owns a session's timers, keyed by purpose.

    Scheduling a purpose replaces any timer already running for it. A callback
    that cancels or re-arms its own purpose runs to completion; the old loop
    just exits afterwards.
    """

    def __init__(self):
        self._tasks: dict[TimerPurpose, asyncio.Task] = {}

    def call_later(self, purpose: TimerPurpose, delay: float, callback: TimerCallback) -> None:
        """Run ``callback`` once after ``delay`` seconds."""
        self.cancel(purpose)
        self._tasks[purpose] = asyncio.create_task(self._run_later(purpose, delay, callback))

    def call_every(self, purpose: TimerPurpose, interval: float, callback: TimerCallback) -> None:
        """Run ``callback`` every ``interval`` seconds until cancelled."""
        self.cancel(purpose)
        self._tasks[purpose] = asyncio.create_task(self._run_every(purpose, interval, callback))

    def cancel(self, purpose: TimerPurpose) -> bool:
        """Cancel the timer for ``purpose``. Returns False if none was running."""
        task = self._tasks.pop(purpose, None)
        if task is None:
            return False
        if task is not asyncio.current_task():
            task.cancel()
        return True

    def cancel_all(self) -> None:
        for purpose in list(self._tasks):
            self.cancel(purpose)

    def is_active(self, purpose: TimerPurpose) -> bool:
        task = self._tasks.get(purpose)
        return task is not None and not task.done()

    @property
    def active(self) -> set[TimerPurpose]:
        return {purpose for purpose in self._tasks if self.is_active(purpose)}

    def _owns(self, purpose: TimerPurpose) -> bool:
        return self._tasks.get(purpose) is asyncio.current_task()

    async def _run_later(self, purpose: TimerPurpose, delay: float, callback: TimerCallback) -> None:
        try:
            await asyncio.sleep(delay)
            if not self._owns(purpose):
                return
            del self._tasks[purpose]
            await callback()
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception("%s timer callback failed", purpose.value)

    async def _run_every(self, purpose: TimerPurpose, interval: float, callback: TimerCallback) -> None:
        try:
            while self._owns(purpose):
                await asyncio.sleep(interval)
                if not self._owns(purpose):
                    break
                await callback()
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception("%s timer callback failed", purpose.value)
