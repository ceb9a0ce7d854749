"""
Animation sequencer - fixed startup/shutdown choreography and flashing

Each animation is a blocking sequence of (mutate buffer, render, sleep)
steps. Animations are not interruptible once started.
"""

import time
from typing import Callable, List, Optional, Tuple

from .frame_encoder import FrameEncoder
from .pixel import parse_hex_color
from .pixel_buffer import NUM_PIXELS, PixelBuffer

GREEN = (0, 255, 0)
RED = (255, 0, 0)
BLACK = (0, 0, 0)

RAMP_STEPS = 10
RAMP_STEP_SIZE = 0.05
RAMP_DELAY_MS = 70
SWEEP_DELAY_MS = 80
FLASH_DELAY_MS = 30

# Outer pixels of the left half; each is paired with its mirror 7 - offset
SWEEP_OFFSETS = (0, 1, 2)
CENTER_PIXELS = (3, 4)


class AnimationSequencer:
    """
    Plays animations on a PixelBuffer through a FrameEncoder.

    Usage:
        sequencer = AnimationSequencer(buffer, encoder)
        sequencer.startup_sweep()
        sequencer.flash_all(2, "FF0000")
        sequencer.shutdown_sweep()
    """

    def __init__(self,
                 buffer: PixelBuffer,
                 encoder: FrameEncoder,
                 logger=None,
                 sleep: Callable[[float], None] = time.sleep):
        """
        Args:
            buffer: Pixel buffer to mutate
            encoder: Encoder used for every render step
            logger: Optional ClassLogger
            sleep: Sleep function taking seconds (injectable for tests)
        """
        self.buffer = buffer
        self.encoder = encoder
        self._logger = logger
        self._sleep = sleep

    def _show(self, delay_ms: int = 0) -> None:
        self.encoder.render(self.buffer)
        if delay_ms:
            self._sleep(delay_ms / 1000.0)

    @staticmethod
    def _ramp_levels() -> List[float]:
        return [step * RAMP_STEP_SIZE for step in range(1, RAMP_STEPS + 1)]

    def startup_sweep(self) -> None:
        """Green center pair fades in, then grows outwards to the ends"""
        if self._logger:
            self._logger.debug("Startup sweep")
        self.buffer.clear()
        for index in CENTER_PIXELS:
            self.buffer.set_pixel(index, *GREEN)

        for level in self._ramp_levels():
            self.buffer.set_brightness(level)
            self._show(RAMP_DELAY_MS)

        for offset in reversed(SWEEP_OFFSETS):
            self.buffer.set_pixel(offset, *GREEN)
            self.buffer.set_pixel(NUM_PIXELS - 1 - offset, *GREEN)
            self._show(SWEEP_DELAY_MS)

        self.buffer.clear()
        self._show()

    def shutdown_sweep(self) -> None:
        """Full red bar shrinks to the center, then fades out"""
        if self._logger:
            self._logger.debug("Shutdown sweep")
        self.buffer.set_all(*RED)
        self._show(SWEEP_DELAY_MS)

        for offset in SWEEP_OFFSETS:
            self.buffer.set_pixel(offset, *BLACK)
            self.buffer.set_pixel(NUM_PIXELS - 1 - offset, *BLACK)
            self._show(SWEEP_DELAY_MS)

        for level in reversed(self._ramp_levels()):
            self.buffer.set_brightness(level)
            self._show(RAMP_DELAY_MS)

        self.buffer.clear()
        self._show()

    def flash(self, target: Optional[int], times: int, hex_color: str) -> None:
        """
        Flash one pixel (target=index) or the whole strip (target=None).

        The color is parsed before anything is touched, so a malformed color
        raises HexColorError with the buffer unchanged.
        """
        color = parse_hex_color(hex_color)
        targets = self._targets(target)
        if self._logger:
            label = "all pixels" if target is None else f"pixel {target}"
            self._logger.debug(f"Flash {label} {times}x #{hex_color}")

        for index in targets:
            self.buffer.set_pixel(index, *color)

        for _ in range(times):
            self._set_brightness(targets, 1.0)
            self._show(FLASH_DELAY_MS)
            self._set_brightness(targets, 0.0)
            self._show(FLASH_DELAY_MS)

    def flash_pixel(self, index: int, times: int, hex_color: str) -> None:
        self.flash(index, times, hex_color)

    def flash_all(self, times: int, hex_color: str) -> None:
        self.flash(None, times, hex_color)

    def _targets(self, target: Optional[int]) -> Tuple[int, ...]:
        if target is None:
            return tuple(range(NUM_PIXELS))
        self.buffer[target]  # raises IndexError when out of range
        return (target,)

    def _set_brightness(self, targets: Tuple[int, ...], level: float) -> None:
        if len(targets) == NUM_PIXELS:
            self.buffer.set_brightness(level)
        else:
            for index in targets:
                self.buffer.set_pixel_brightness(index, level)
