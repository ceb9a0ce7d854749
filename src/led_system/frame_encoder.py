#!/usr/bin/env python3
"""
Frame Encoder - serializes a PixelBuffer to the APA102 bit-serial protocol

Frame layout (every render is a full-buffer encode):
    start frame   4 x 0x00
    per pixel     (0b11100000 | level), blue, green, red
    end frame     4 x 0x00
    latch         data low + 4 bare clock pulses

Bytes are shifted out MSB first, one clock pulse per bit.
"""
from typing import Iterable, List

from .interfaces import BitPort
from .pixel_buffer import PixelBuffer

# 0b11100000 - the three marker bits in front of the 5-bit brightness
PIXEL_HEADER = 0xE0

START_FRAME = bytes(4)
END_FRAME = bytes(4)

# Extra clock pulses to push the last pixel through the shift registers
LATCH_PULSES = 4


def pixel_word(red: int, green: int, blue: int, brightness_level: int) -> bytes:
    """Four wire bytes of one pixel"""
    return bytes((PIXEL_HEADER | brightness_level, blue, green, red))


def frame_bytes(buffer: PixelBuffer) -> bytes:
    """
    Byte payload of one frame (start frame, 8 pixel words, end frame).

    The latch pulses carry no data bits and are not part of the payload.
    """
    payload = bytearray(START_FRAME)
    for pixel in buffer:
        payload += pixel_word(pixel.red, pixel.green, pixel.blue, pixel.brightness_level)
    payload += END_FRAME
    return bytes(payload)


def byte_to_bits(value: int) -> List[int]:
    """MSB-first bits of one byte"""
    return [(value >> k) & 1 for k in range(7, -1, -1)]


class FrameEncoder:
    """Drives a BitPort with the frame of a PixelBuffer

    Usage:
        encoder = FrameEncoder(port)
        encoder.render(buffer)
    """

    def __init__(self, port: BitPort, logger=None) -> None:
        """
        Args:
            port: Opened two-wire output to drive
            logger: Optional ClassLogger; frames are logged at DEBUG
        """
        self._port = port
        self._logger = logger
        self.render_count = 0

    def render(self, buffer: PixelBuffer) -> None:
        """Write the whole buffer to the strip"""
        payload = frame_bytes(buffer)
        self.write_bytes(payload)
        self.latch()
        self.render_count += 1
        if self._logger:
            self._logger.debug(f"Frame #{self.render_count}: {payload.hex()}")

    def write_bytes(self, values: Iterable[int]) -> None:
        for value in values:
            self.write_byte(value)

    def write_byte(self, value: int) -> None:
        """Shift out one byte, MSB first"""
        data = self._port.data
        clock = self._port.clock
        for bit in byte_to_bits(value):
            data.write(bit)
            clock.set_high()
            clock.set_low()

    def latch(self) -> None:
        """Data low, then bare clock pulses"""
        clock = self._port.clock
        self._port.data.set_low()
        for _ in range(LATCH_PULSES):
            clock.set_high()
            clock.set_low()
