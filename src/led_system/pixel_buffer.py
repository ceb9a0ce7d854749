#!/usr/bin/env python3
"""
PixelBuffer - in-memory state of the 8-pixel strip

Mutations only touch the buffer; nothing reaches the LEDs until the buffer
is rendered through a FrameEncoder.
"""
from typing import Iterator, Optional, Tuple

from .pixel import (
    DEFAULT_BRIGHTNESS_LEVEL,
    Pixel,
    brightness_to_level,
    parse_hex_color,
    validate_channel,
)

NUM_PIXELS = 8


class PixelBuffer:
    """Fixed sequence of exactly 8 pixels, index-addressed 0..7

    Usage:
        buffer = PixelBuffer(brightness=0.5)
        buffer.set_pixel(0, 255, 0, 0)
        buffer.set_pixel_hex(7, "FFA500")
        buffer.set_brightness(0.2)
        buffer[0].rgb            # (255, 0, 0)
    """

    def __init__(self, brightness: Optional[float] = None) -> None:
        """
        Args:
            brightness: Initial brightness for every pixel (0.0-1.0).
                        None keeps the raw default level (10).

        Raises:
            BrightnessRangeError: brightness outside 0.0-1.0
        """
        level = DEFAULT_BRIGHTNESS_LEVEL if brightness is None else brightness_to_level(brightness)
        self._pixels = tuple(Pixel(brightness_level=level) for _ in range(NUM_PIXELS))

    def _check_index(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < NUM_PIXELS):
            raise IndexError(f"pixel index out of range: {index!r} (valid: 0-{NUM_PIXELS - 1})")
        return index

    def __getitem__(self, index: int) -> Pixel:
        return self._pixels[self._check_index(index)]

    def __len__(self) -> int:
        return NUM_PIXELS

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self._pixels)

    def snapshot(self) -> Tuple[Pixel, ...]:
        """Independent copy of all pixels (for logging and comparisons)"""
        return tuple(pixel.copy() for pixel in self._pixels)

    def set_pixel(self, index: int, r: int, g: int, b: int) -> 'PixelBuffer':
        """Set color channels of one pixel; brightness is unchanged"""
        pixel = self[index]
        validate_channel("red", r)
        validate_channel("green", g)
        validate_channel("blue", b)
        pixel.red, pixel.green, pixel.blue = r, g, b
        return self

    def set_pixel_hex(self, index: int, hex_color: str) -> 'PixelBuffer':
        """Set one pixel from 'RRGGBB'; buffer is untouched if parsing fails"""
        self._check_index(index)
        r, g, b = parse_hex_color(hex_color)
        return self.set_pixel(index, r, g, b)

    def set_all(self, r: int, g: int, b: int) -> 'PixelBuffer':
        for index in range(NUM_PIXELS):
            self.set_pixel(index, r, g, b)
        return self

    def set_all_hex(self, hex_color: str) -> 'PixelBuffer':
        r, g, b = parse_hex_color(hex_color)
        return self.set_all(r, g, b)

    def set_brightness(self, brightness: float) -> 'PixelBuffer':
        """Set brightness (0.0-1.0) of all pixels"""
        level = brightness_to_level(brightness)
        for pixel in self._pixels:
            pixel.brightness_level = level
        return self

    def set_pixel_brightness(self, index: int, brightness: float) -> 'PixelBuffer':
        """Set brightness (0.0-1.0) of one pixel"""
        pixel = self[index]
        pixel.brightness_level = brightness_to_level(brightness)
        return self

    def clear(self) -> 'PixelBuffer':
        """All pixels to black; brightness is kept"""
        return self.set_all(0, 0, 0)

    def __repr__(self) -> str:
        return f"PixelBuffer([{', '.join(str(p) for p in self._pixels)}])"
