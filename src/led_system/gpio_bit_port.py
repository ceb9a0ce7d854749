"""
GPIO-based bit port implementation using RPi.GPIO
"""

from .interfaces import BitPort, OutputLine, DATA_PIN, CLOCK_PIN
from utils.gpio_utils import describe_pin

try:
    import RPi.GPIO as GPIO
except ImportError:
    # Handle gracefully for development on non-Pi systems
    GPIO = None


class GPIOLine(OutputLine):
    """One BCM pin configured as output"""

    def __init__(self, pin: int):
        self.pin = pin

    def set_high(self) -> None:
        GPIO.output(self.pin, GPIO.HIGH)

    def set_low(self) -> None:
        GPIO.output(self.pin, GPIO.LOW)


class GPIOBitPort(BitPort):
    """
    Data + clock lines on the Raspberry Pi header.

    Errors raised by RPi.GPIO (RuntimeError when /dev/gpiomem is not
    accessible, for example) are logged and propagated to the caller.
    """

    def __init__(self, logger, data_pin: int = DATA_PIN, clock_pin: int = CLOCK_PIN):
        """
        Args:
            logger: ClassLogger instance for logging
            data_pin: BCM pin of the data line
            clock_pin: BCM pin of the clock line

        Raises:
            ImportError: If RPi.GPIO is not available
        """
        if GPIO is None:
            raise ImportError("RPi.GPIO not available - run on Raspberry Pi or use --simulate")

        self._logger = logger
        self._data = GPIOLine(data_pin)
        self._clock = GPIOLine(clock_pin)
        self._initialized = False

    @property
    def data(self) -> OutputLine:
        return self._data

    @property
    def clock(self) -> OutputLine:
        return self._clock

    @property
    def pins(self):
        return [self._data.pin, self._clock.pin]

    def open(self) -> None:
        """Configure data and clock pins as outputs (BCM numbering)"""
        try:
            GPIO.setmode(GPIO.BCM)
            GPIO.setwarnings(False)
            for pin in self.pins:
                GPIO.setup(pin, GPIO.OUT, initial=GPIO.LOW)
            self._initialized = True
            self._logger.info(
                f"GPIO bit port ready: data={describe_pin(self._data.pin)}, clock={describe_pin(self._clock.pin)}"
            )
        except Exception as e:
            self._logger.error(f"GPIO bit port setup failed: {e}", exception=e)
            raise

    def close(self) -> None:
        """Release our two pins (other pins of the process are untouched)"""
        if not self._initialized:
            return
        try:
            GPIO.cleanup(self.pins)
        except Exception as e:
            self._logger.error(f"GPIO bit port cleanup failed: {e}", exception=e)
            raise
        finally:
            self._initialized = False
        self._logger.info("GPIO bit port released")
