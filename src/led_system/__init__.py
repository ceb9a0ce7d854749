#!/usr/bin/env python3
"""
LED System - Blinkt (APA102) strip control over two GPIO lines

Components:

- Pixel / PixelBuffer: the 8-pixel model (color + 5-bit brightness)
- BitPort: abstract data + clock output; GPIOBitPort (RPi.GPIO) and
  SimulatedBitPort (no hardware) implement it
- FrameEncoder: bit-serial frame protocol
- AnimationSequencer: startup/shutdown sweeps and flashing
- LedBar: lifecycle owner tying the pieces together

Usage:
    from led_system import LedBar, GPIOBitPort

    bar = LedBar(GPIOBitPort(logger), logger, brightness=0.5)
    bar.setup()
    bar.buffer.set_pixel_hex(0, "00FF00")
    bar.show()
    bar.cleanup()
"""

from .errors import BrightnessRangeError, HexColorError
from .pixel import Pixel, brightness_to_level, parse_hex_color
from .pixel_buffer import PixelBuffer, NUM_PIXELS
from .interfaces import BitPort, OutputLine, DATA_PIN, CLOCK_PIN
from .frame_encoder import FrameEncoder, frame_bytes
from .gpio_bit_port import GPIOBitPort
from .simulated_bit_port import SimulatedBitPort
from .sequencer import AnimationSequencer
from .led_bar import LedBar

__all__ = [
    'BrightnessRangeError',
    'HexColorError',
    'Pixel',
    'brightness_to_level',
    'parse_hex_color',
    'PixelBuffer',
    'NUM_PIXELS',
    'BitPort',
    'OutputLine',
    'DATA_PIN',
    'CLOCK_PIN',
    'FrameEncoder',
    'frame_bytes',
    'GPIOBitPort',
    'SimulatedBitPort',
    'AnimationSequencer',
    'LedBar',
]
