"""
Simulated Bit Port - hardware-free BitPort that decodes what it is sent

Plays the role of the strip's shift register: the data line is sampled on
every rising clock edge. Used by --simulate runs and by the test suite.
"""

from typing import List, Optional, Tuple

from .frame_encoder import LATCH_PULSES
from .interfaces import BitPort, OutputLine
from .pixel_buffer import NUM_PIXELS

FRAME_PAYLOAD_BYTES = 4 + NUM_PIXELS * 4 + 4
FRAME_CLOCK_PULSES = FRAME_PAYLOAD_BYTES * 8 + LATCH_PULSES


class SimulatedLine(OutputLine):
    """Output line that remembers its level and notifies the port on change"""

    def __init__(self, name: str, port: 'SimulatedBitPort'):
        self.name = name
        self.level = 0
        self._port = port

    def set_high(self) -> None:
        self._port._on_write(self, 1)

    def set_low(self) -> None:
        self._port._on_write(self, 0)


class SimulatedBitPort(BitPort):
    """
    Records sampled bits and splits them into frames.

    Each render of an 8-pixel buffer is 40 payload bytes plus 4 latch pulses,
    so the recorded bit stream can be cut into fixed-size frames.
    """

    def __init__(self, logger=None):
        """
        Args:
            logger: Optional ClassLogger; decoded frames are logged at DEBUG
        """
        self._logger = logger
        self._data = SimulatedLine("data", self)
        self._clock = SimulatedLine("clock", self)
        self.bits: List[int] = []
        self.is_open = False
        self.open_count = 0
        self.close_count = 0

    @property
    def data(self) -> OutputLine:
        return self._data

    @property
    def clock(self) -> OutputLine:
        return self._clock

    def open(self) -> None:
        self.is_open = True
        self.open_count += 1
        if self._logger:
            self._logger.info("Simulated bit port opened (no GPIO access)")

    def close(self) -> None:
        self.is_open = False
        self.close_count += 1
        if self._logger:
            self._logger.info(f"Simulated bit port closed after {self.frame_count} frames")

    def _on_write(self, line: SimulatedLine, level: int) -> None:
        if not self.is_open:
            raise RuntimeError(f"write to {line.name} line while port is closed")
        rising_clock = line is self._clock and level == 1 and self._clock.level == 0
        line.level = level
        if rising_clock:
            self.bits.append(self._data.level)
            if self._logger and len(self.bits) % FRAME_CLOCK_PULSES == 0:
                payload, _tail = self.frames()[-1]
                self._logger.debug(f"[SIM] frame {self.frame_count}: {payload.hex()}")

    @property
    def frame_count(self) -> int:
        return len(self.bits) // FRAME_CLOCK_PULSES

    def frames(self) -> List[Tuple[bytes, List[int]]]:
        """Complete frames as (payload bytes, latch bits)"""
        decoded = []
        for number in range(self.frame_count):
            start = number * FRAME_CLOCK_PULSES
            frame_bits = self.bits[start:start + FRAME_CLOCK_PULSES]
            payload = bytes(
                _bits_to_byte(frame_bits[i:i + 8])
                for i in range(0, FRAME_PAYLOAD_BYTES * 8, 8)
            )
            decoded.append((payload, frame_bits[FRAME_PAYLOAD_BYTES * 8:]))
        return decoded

    def last_frame(self) -> Optional[bytes]:
        frames = self.frames()
        return frames[-1][0] if frames else None

    def pixels(self, payload: bytes) -> List[Tuple[int, int, int, int]]:
        """Decode a payload into (red, green, blue, level) per pixel"""
        result = []
        for index in range(NUM_PIXELS):
            header, blue, green, red = payload[4 + index * 4:8 + index * 4]
            result.append((red, green, blue, header & 0x1F))
        return result

    def reset(self) -> None:
        """Forget recorded bits"""
        self.bits = []


def _bits_to_byte(bits: List[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value
