"""
Shared test fixtures - loggers, simulated hardware and a fake clock.

Nothing here touches GPIO or the network.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from led_system import FrameEncoder, LedBar, PixelBuffer, SimulatedBitPort  # noqa: E402
from utils import HybridLogger  # noqa: E402


class FakeClock:
    """Monotonic clock that only moves when sleep() is called"""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeMetricsClient:
    """Returns (or raises) queued results in order, repeating the last one.

    on_exhausted is called on every call from the last queued result onwards.
    """

    def __init__(self, results, clock=None):
        self.results = list(results)
        self.clock = clock
        self.calls = []
        self.call_times = []
        self.on_exhausted = None
        self.closed = False

    def percentage_of_allocated_resource(self, resource, max_allocations):
        self.calls.append((resource, max_allocations))
        if self.clock is not None:
            self.call_times.append(self.clock())
        result = self.results[min(len(self.calls), len(self.results)) - 1]
        if len(self.calls) >= len(self.results) and self.on_exhausted:
            self.on_exhausted()
        if isinstance(result, Exception):
            raise result
        return result

    def close(self):
        self.closed = True


@pytest.fixture
def hybrid_logger(tmp_path):
    main_logger = HybridLogger("test", log_dir=str(tmp_path / "logs"))
    yield main_logger
    main_logger.cleanup()


@pytest.fixture
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def port():
    """Opened simulated port"""
    sim = SimulatedBitPort()
    sim.open()
    return sim


@pytest.fixture
def buffer():
    return PixelBuffer()


@pytest.fixture
def encoder(port):
    return FrameEncoder(port)


@pytest.fixture
def led_bar(logger, clock):
    """LedBar on an unopened simulated port, sleeping on the fake clock"""
    return LedBar(SimulatedBitPort(), logger, brightness=0.5, sleep=clock.sleep)
