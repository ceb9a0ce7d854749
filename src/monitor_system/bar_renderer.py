"""
Maps a utilization fraction onto the 8-pixel bar
"""

from led_system import NUM_PIXELS, PixelBuffer

GREEN = "00FF00"
ORANGE = "FFA500"
RED = "FF0000"
OFF = "000000"

# Last two pixels warn: orange, then red
WARNING_COLORS = {6: ORANGE, 7: RED}


def bar_color(index: int) -> str:
    return WARNING_COLORS.get(index, GREEN)


def lit_pixel_count(fraction: float) -> int:
    """Number of lit pixels: int(fraction * 8), clamped to 0-8"""
    return max(0, min(NUM_PIXELS, int(fraction * NUM_PIXELS)))


def render_bar(buffer: PixelBuffer, fraction: float, brightness: float) -> int:
    """
    Fill the buffer with a bar for fraction (does not render).

    Lit pixels get the configured brightness and their bar color; the rest
    are black with brightness 0.

    Returns:
        Number of lit pixels
    """
    lit = lit_pixel_count(fraction)
    for index in range(NUM_PIXELS):
        if index < lit:
            buffer.set_pixel_brightness(index, brightness)
            buffer.set_pixel_hex(index, bar_color(index))
        else:
            buffer.set_pixel_brightness(index, 0.0)
            buffer.set_pixel_hex(index, OFF)
    return lit
