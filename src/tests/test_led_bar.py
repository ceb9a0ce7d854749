"""
Tests for LedBar lifecycle: setup/cleanup ordering and exactly-once semantics.
"""

import pytest

from led_system import BrightnessRangeError, LedBar, SimulatedBitPort


class TestSetup:

    def test_setup_opens_port_and_plays_startup(self, led_bar):
        led_bar.setup()

        assert led_bar.port.is_open
        assert led_bar.port.frame_count == 14
        assert led_bar.is_open

    def test_setup_twice_opens_once(self, led_bar):
        led_bar.setup()
        led_bar.setup()
        assert led_bar.port.open_count == 1

    def test_no_startup_animation(self, logger, clock):
        bar = LedBar(SimulatedBitPort(), logger, show_anim_on_start=False, sleep=clock.sleep)
        bar.setup()
        assert bar.port.frame_count == 0
        assert clock.sleeps == []

    def test_invalid_brightness(self, logger):
        with pytest.raises(BrightnessRangeError):
            LedBar(SimulatedBitPort(), logger, brightness=1.5)

    def test_initial_brightness_applied(self, led_bar):
        assert all(p.brightness_level == 16 for p in led_bar.buffer)


class TestCleanup:

    def test_cleanup_plays_shutdown_clears_and_closes(self, led_bar):
        led_bar.setup()
        port = led_bar.port
        port.reset()

        led_bar.cleanup()

        # 15 shutdown frames + 1 clear frame
        assert port.frame_count == 16
        last = port.pixels(port.last_frame())
        assert all(pixel[:3] == (0, 0, 0) for pixel in last)
        assert not port.is_open
        assert port.close_count == 1

    def test_cleanup_runs_once(self, led_bar):
        led_bar.setup()
        led_bar.cleanup()
        led_bar.cleanup()
        assert led_bar.port.close_count == 1

    def test_cleanup_without_setup_is_noop(self, led_bar):
        led_bar.cleanup()
        assert led_bar.port.close_count == 0

    def test_flags_disable_exit_frames(self, logger, clock):
        bar = LedBar(SimulatedBitPort(), logger, show_anim_on_start=False,
                     show_anim_on_exit=False, clear_on_exit=False, sleep=clock.sleep)
        bar.setup()
        bar.cleanup()
        assert bar.port.frame_count == 0
        assert bar.port.close_count == 1

    def test_port_closed_even_if_render_fails(self, led_bar, monkeypatch):
        led_bar.setup()

        def broken(buffer):
            raise RuntimeError("gpio write failed")

        monkeypatch.setattr(led_bar.encoder, "render", broken)
        with pytest.raises(RuntimeError):
            led_bar.cleanup()
        assert led_bar.port.close_count == 1
        assert not led_bar.is_open

    def test_context_manager(self, logger, clock):
        port = SimulatedBitPort()
        with LedBar(port, logger, sleep=clock.sleep) as bar:
            bar.buffer.set_pixel_hex(0, "00FF00")
            bar.show()
            assert port.is_open
        assert not port.is_open
        assert port.frame_count == 14 + 1 + 16


class TestShow:

    def test_show_renders_buffer(self, led_bar):
        led_bar.setup()
        led_bar.buffer.set_pixel_hex(2, "FFA500")
        led_bar.show()
        assert led_bar.port.pixels(led_bar.port.last_frame())[2] == (255, 165, 0, 16)

    def test_flash_all(self, led_bar):
        led_bar.setup()
        led_bar.port.reset()
        led_bar.flash_all(2, "FF0000")
        assert led_bar.port.frame_count == 4
