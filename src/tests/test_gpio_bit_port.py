"""
Tests for GPIOBitPort against a fake RPi.GPIO module (no hardware needed).
"""

import pytest

from led_system import FrameEncoder, PixelBuffer
from led_system import gpio_bit_port
from led_system.gpio_bit_port import GPIOBitPort


class FakeGPIO:
    BCM = "BCM"
    OUT = "OUT"
    HIGH = 1
    LOW = 0

    def __init__(self):
        self.calls = []
        self.levels = {}
        self.fail_setup = False

    def setmode(self, mode):
        self.calls.append(("setmode", mode))

    def setwarnings(self, flag):
        self.calls.append(("setwarnings", flag))

    def setup(self, pin, direction, initial=None):
        if self.fail_setup:
            raise RuntimeError("No access to /dev/mem")
        self.calls.append(("setup", pin, direction, initial))

    def output(self, pin, level):
        self.levels[pin] = level
        self.calls.append(("output", pin, level))

    def cleanup(self, pins=None):
        self.calls.append(("cleanup", pins))


@pytest.fixture
def fake_gpio(monkeypatch):
    fake = FakeGPIO()
    monkeypatch.setattr(gpio_bit_port, "GPIO", fake)
    return fake


class TestGPIOBitPort:

    def test_open_configures_outputs(self, fake_gpio, logger):
        port = GPIOBitPort(logger)
        port.open()

        assert ("setmode", "BCM") in fake_gpio.calls
        assert ("setup", 23, "OUT", 0) in fake_gpio.calls
        assert ("setup", 24, "OUT", 0) in fake_gpio.calls

    def test_lines_drive_pins(self, fake_gpio, logger):
        port = GPIOBitPort(logger, data_pin=17, clock_pin=27)
        port.open()
        port.data.set_high()
        port.clock.set_low()
        assert fake_gpio.levels == {17: 1, 27: 0}

    def test_close_releases_only_our_pins(self, fake_gpio, logger):
        port = GPIOBitPort(logger)
        port.open()
        port.close()
        port.close()
        assert fake_gpio.calls.count(("cleanup", [23, 24])) == 1

    def test_close_before_open_does_nothing(self, fake_gpio, logger):
        GPIOBitPort(logger).close()
        assert not any(call[0] == "cleanup" for call in fake_gpio.calls)

    def test_setup_failure_propagates(self, fake_gpio, logger):
        fake_gpio.fail_setup = True
        with pytest.raises(RuntimeError, match="/dev/mem"):
            GPIOBitPort(logger).open()

    def test_render_pulses_clock(self, fake_gpio, logger):
        port = GPIOBitPort(logger)
        port.open()
        FrameEncoder(port).render(PixelBuffer())
        clock_highs = [c for c in fake_gpio.calls if c == ("output", 24, 1)]
        assert len(clock_highs) == 40 * 8 + 4

    def test_missing_library(self, monkeypatch, logger):
        monkeypatch.setattr(gpio_bit_port, "GPIO", None)
        with pytest.raises(ImportError, match="--simulate"):
            GPIOBitPort(logger)
