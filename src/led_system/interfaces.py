#!/usr/bin/env python3
"""
Bit Port Interface - Abstract two-wire (data + clock) output

Defines the contract the frame encoder drives. Implementations can wrap
RPi.GPIO, a simulator, or any other way of toggling two digital lines.
"""
from abc import ABC, abstractmethod

# BCM pin numbers of the Blinkt data and clock lines
DATA_PIN = 23
CLOCK_PIN = 24


class OutputLine(ABC):
    """A single digital output line

    Writes are unbuffered: the line has the new level when the call returns.
    """

    @abstractmethod
    def set_high(self) -> None:
        """Drive the line high"""
        pass

    @abstractmethod
    def set_low(self) -> None:
        """Drive the line low"""
        pass

    def write(self, bit: int) -> None:
        """Drive the line to a bit value (non-zero = high)"""
        if bit:
            self.set_high()
        else:
            self.set_low()


class BitPort(ABC):
    """Two independently settable output lines used for bit-serial output

    Lifecycle:
        port.open()               # configure both lines as outputs
        port.data.set_high()      # ... drive lines ...
        port.clock.set_high()
        port.clock.set_low()
        port.close()              # release the lines

    open() and close() are each called exactly once by the owner (LedBar).
    Failures reported by the physical layer propagate as exceptions.
    """

    @property
    @abstractmethod
    def data(self) -> OutputLine:
        """The data line"""
        pass

    @property
    @abstractmethod
    def clock(self) -> OutputLine:
        """The clock line"""
        pass

    @abstractmethod
    def open(self) -> None:
        """Configure both lines as outputs"""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release both lines"""
        pass
