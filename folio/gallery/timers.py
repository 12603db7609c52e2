"""Cancellable timers: schedulers, debouncers and one-shot flags."""

import asyncio
import heapq
import itertools
from collections.abc import Callable
from typing import Any, Optional, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback after a delay in seconds."""

    def call_later(self, delay: float, callback: Callable[[], Any]) -> TimerHandle: ...


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], Any]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class ManualHandle:
    def __init__(self, due: float, callback: Callable[[], Any]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Deterministic scheduler driven by ``advance()``.

    Callbacks run in due order; a callback scheduled while advancing runs in
    the same call if it falls due before the new time.
    """

    def __init__(self):
        self.now = 0.0
        self._queue: list[tuple[float, int, ManualHandle]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], Any]) -> ManualHandle:
        handle = ManualHandle(self.now + max(delay, 0.0), callback)
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running due callbacks.

        Returns:
            Number of callbacks run.
        """
        target = self.now + seconds
        ran = 0

        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = due
            handle.callback()
            ran += 1

        self.now = target
        return ran

    def run_all(self) -> int:
        """Run every pending callback regardless of its due time."""
        ran = 0
        while self.pending:
            ran += self.advance(max(h.due for _, _, h in self._queue) - self.now)
        return ran


class Debouncer:
    """Run a callback once a quiet period has passed since the last trigger.

    Each trigger cancels the pending call before scheduling a new one, so at
    most one call is pending. The arguments of the last trigger win.
    """

    def __init__(self, scheduler: Scheduler, delay: float, callback: Callable[..., Any]):
        self._scheduler = scheduler
        self.delay = delay
        self._callback = callback
        self._handle: Optional[TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self, *args: Any) -> None:
        self.cancel()
        self._handle = self._scheduler.call_later(self.delay, lambda: self._fire(args))

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, args: tuple) -> None:
        self._handle = None
        self._callback(*args)


class OneShotFlag:
    """Two-state flag: pending until fired, then fired for good."""

    def __init__(self):
        self._fired = False

    @property
    def pending(self) -> bool:
        return not self._fired

    def fire(self) -> bool:
        """Mark as fired. Returns True only for the first call."""
        if self._fired:
            return False
        self._fired = True
        return True
