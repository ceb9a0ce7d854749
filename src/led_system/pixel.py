"""
Pixel record and value conversions for APA102-style pixels

A pixel carries 8-bit red/green/blue channels plus the peripheral's native
5-bit global brightness (0-31). User-facing brightness is a float 0.0-1.0.
"""
import math
import re
from dataclasses import dataclass
from typing import Tuple

from .errors import BrightnessRangeError, HexColorError

MIN_BRIGHTNESS = 0.0
MAX_BRIGHTNESS = 1.0
MAX_BRIGHTNESS_LEVEL = 31

# Raw level used when the caller gives no brightness
DEFAULT_BRIGHTNESS_LEVEL = 10

_HEX_COLOR = re.compile(r'[0-9A-Fa-f]{6}')


def brightness_to_level(brightness: float) -> int:
    """
    Convert user brightness (0.0-1.0) to the raw 5-bit level.

    Raises:
        BrightnessRangeError: brightness outside 0.0-1.0 (never clamped)
    """
    if not (MIN_BRIGHTNESS <= brightness <= MAX_BRIGHTNESS):
        raise BrightnessRangeError(brightness, MIN_BRIGHTNESS, MAX_BRIGHTNESS)
    # Ties round up (0.5 -> 1), not to even
    return int(math.floor(brightness * MAX_BRIGHTNESS_LEVEL + 0.5))


def parse_hex_color(color: str) -> Tuple[int, int, int]:
    """
    Parse 'RRGGBB' (case-insensitive, no leading '#') into (r, g, b).

    Raises:
        HexColorError: not exactly 6 hex digits
    """
    if not isinstance(color, str) or not _HEX_COLOR.fullmatch(color):
        raise HexColorError(f"Invalid hex color {color!r} - expected 6 hex digits like 'FF8000'")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def validate_channel(name: str, value: int) -> int:
    """Check a color channel is an int in 0-255"""
    if isinstance(value, bool) or not isinstance(value, int) or not (0 <= value <= 255):
        raise ValueError(f"{name} must be an int 0-255, got {value!r}")
    return value


@dataclass
class Pixel:
    """One LED: color channels (0-255) and raw brightness level (0-31)"""
    red: int = 0
    green: int = 0
    blue: int = 0
    brightness_level: int = DEFAULT_BRIGHTNESS_LEVEL

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue

    def copy(self) -> 'Pixel':
        return Pixel(self.red, self.green, self.blue, self.brightness_level)

    def __str__(self) -> str:
        return f"Pixel({self.red}, {self.green}, {self.blue}, L{self.brightness_level})"
