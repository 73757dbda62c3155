"""Interval gate backed by a single event-loop timer handle."""

import asyncio


class TimerClosed(Exception):
    """Raised by IntervalTimer.wait() once the timer has been closed."""


class IntervalTimer:
    """
    Opens at most once per interval for a single waiter.

    - The timer is armed only while someone awaits wait(); nothing is
      scheduled between calls, so unconsumed ticks never queue up.
    - Each deadline is measured from the previous release, so two
      releases are never closer than the interval.
    - close() is synchronous: the pending handle is cancelled before it
      returns and no callback fires afterwards.
    """

    def __init__(self, interval: float):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        self.interval = interval
        self.ticks = 0
        self._handle: asyncio.TimerHandle | None = None
        self._waiter: asyncio.Future | None = None
        self._last_release: float | None = None
        self._closed = False

    @property
    def armed(self) -> bool:
        """True while a timer callback is scheduled on the loop."""
        return self._handle is not None and not self._handle.cancelled()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def last_release(self) -> float | None:
        """Loop time of the most recent tick, or None before the first."""
        return self._last_release

    def _fire(self) -> None:
        self._handle = None
        if self._waiter is not None and not self._waiter.done():
            self._waiter.set_result(None)

    def _disarm(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    async def wait(self) -> int:
        """
        Block until the next tick and return its 1-based number.

        Raises TimerClosed if the timer is (or becomes) closed.
        """
        if self._closed:
            raise TimerClosed("timer is closed")
        if self._waiter is not None:
            raise RuntimeError("IntervalTimer supports a single waiter")

        loop = asyncio.get_running_loop()
        start = self._last_release if self._last_release is not None else loop.time()
        deadline = start + self.interval

        # call_at may run up to one clock resolution early; re-arm until due
        while True:
            if self._closed:
                raise TimerClosed("timer is closed")
            self._waiter = loop.create_future()
            self._handle = loop.call_at(deadline, self._fire)
            try:
                await self._waiter
            finally:
                self._waiter = None
                self._disarm()
            if loop.time() >= deadline:
                break

        if self._closed:
            raise TimerClosed("timer is closed")
        self._last_release = loop.time()
        self.ticks += 1
        return self.ticks

    def close(self) -> None:
        """Cancel any pending tick and reject future waits. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._disarm()
        if self._waiter is not None and not self._waiter.done():
            self._waiter.set_exception(TimerClosed("timer is closed"))
