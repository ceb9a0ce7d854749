"""
Timing utility for throttling work inside a fast-ticking loop
"""

import time
from typing import Callable


class OnceInMs:
    """
    Timer that lets an action run at most once per interval.

    The monitor loop ticks every few hundred milliseconds so it can react to
    a stop request quickly, but only polls the metrics endpoint when the
    poll interval has elapsed.

    Example:
        poller = OnceInMs(5000)
        while running:
            if poller.should_execute():
                poll()
            time.sleep(0.1)
    """

    def __init__(self, interval_ms: int, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Monotonic time source in seconds (injectable for tests)
        """
        self.interval_ms = interval_ms
        self.interval = interval_ms / 1000.0
        self._clock = clock
        self.last_execution = None

    def should_execute(self) -> bool:
        """True (and restart the interval) if the interval has passed; first call is always True"""
        current = self._clock()
        if self.last_execution is None or current - self.last_execution >= self.interval:
            self.last_execution = current
            return True
        return False
