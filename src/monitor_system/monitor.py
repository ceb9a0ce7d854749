"""
Resource monitor - poll, render, wait; flash red when polling fails
"""

import time
from typing import Callable, Optional, TYPE_CHECKING

from metrics_system import MetricsError
from utils import OnceInMs

from .bar_renderer import render_bar
from .config import MonitorConfig

if TYPE_CHECKING:
    from led_system import LedBar
    from metrics_system import MetricsClient
    from utils import ClassLogger

FAILURE_FLASHES = 2
FAILURE_COLOR = "FF0000"

# Loop granularity; bounds how long a stop request waits
TICK_MS = 100


class ResourceMonitor:
    """
    Main monitor loop.

    Responsibilities:
    - Own the LedBar lifecycle (setup before the loop, cleanup after)
    - Poll the metrics source once per poll interval
    - Render the utilization bar, or flash red on failure
    - Stop promptly and cleanly when stop() is called (e.g. from a signal handler)
    """

    def __init__(self,
                 led_bar: 'LedBar',
                 metrics_client: 'MetricsClient',
                 config: MonitorConfig,
                 logger: 'ClassLogger',
                 sleep: Callable[[float], None] = time.sleep,
                 clock: Callable[[], float] = time.monotonic):
        """
        Args:
            led_bar: Strip to draw on (not yet set up)
            metrics_client: Anything with percentage_of_allocated_resource(resource, max)
            config: Validated monitor configuration
            logger: ClassLogger instance for logging
            sleep: Sleep function in seconds (injectable for tests)
            clock: Monotonic clock in seconds (injectable for tests)
        """
        self.led_bar = led_bar
        self.metrics_client = metrics_client
        self.config = config
        self.logger = logger
        self._sleep = sleep
        self._poller = OnceInMs(config.poll_interval_ms, clock)
        # Only ever cleared; a stop() before run() ends the loop before the first poll
        self.running = True
        self.poll_count = 0
        self.failure_count = 0

    def stop(self) -> None:
        """Request the loop to end after the current step (signal safe)"""
        self.running = False

    def run(self) -> None:
        """Set up the strip, loop until stopped, then clean up"""
        self.led_bar.setup()
        try:
            self._sleep(self.config.startup_delay_ms / 1000.0)
            self.logger.info(
                f"Monitoring '{self.config.resource}' every {self.config.poll_interval_ms}ms"
            )
            while self.running:
                if self._poller.should_execute():
                    self.poll_once()
                self._sleep(TICK_MS / 1000.0)
        except Exception as e:
            self.logger.error(f"Monitor loop error: {e}", exception=e)
            raise
        finally:
            self.running = False
            self.led_bar.cleanup()
            self.logger.info(f"Monitor stopped after {self.poll_count} polls ({self.failure_count} failed)")

    def poll_once(self) -> Optional[int]:
        """
        One poll + render step.

        Returns:
            Number of lit pixels, or None when the poll failed
        """
        self.poll_count += 1
        resource = self.config.resource
        try:
            fraction = self.metrics_client.percentage_of_allocated_resource(
                resource, self.config.max_allocations
            )
        except MetricsError as e:
            self.failure_count += 1
            self.logger.warning(f"Could not read {resource}: {e}")
            self.led_bar.flash_all(FAILURE_FLASHES, FAILURE_COLOR)
            return None

        lit = render_bar(self.led_bar.buffer, fraction, self.config.brightness)
        self.logger.info(f"{resource}: {fraction:f} -> {lit}")
        self.led_bar.show()
        return lit
