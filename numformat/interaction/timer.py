"""
Single-slot cancellable timer for transient feedback.
"""

import asyncio
from typing import Any, Callable, Optional

Scheduler = Callable[[float, Callable[[], None]], Any]


class FeedbackTimer:
    """
    Fires a callback once, a fixed delay after the latest start().
    Starting again cancels the pending handle instead of stacking a second one.
    """

    def __init__(self, delay_ms: int, scheduler: Optional[Scheduler] = None):
        self.delay_ms = delay_ms
        self._scheduler = scheduler
        self._handle: Optional[Any] = None

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self, callback: Callable[[], None]):
        """(Re)start the timer. Any pending callback is dropped."""
        self.cancel()

        def fire():
            self._handle = None
            callback()

        scheduler = self._scheduler or asyncio.get_running_loop().call_later
        self._handle = scheduler(self.delay_seconds, fire)

    def cancel(self):
        """Cancel the pending callback, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
