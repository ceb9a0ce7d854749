"""
LED system exceptions
"""


class HexColorError(ValueError):
    """Color string is not exactly 6 hex digits (recoverable)"""


class BrightnessRangeError(ValueError):
    """
    Brightness outside 0.0-1.0.

    This is a configuration/programmer error, not a runtime condition: nothing
    inside the packages catches it, and the CLI entry point turns it into a
    CRITICAL log line and a non-zero process exit.
    """

    def __init__(self, value: float, minimum: float, maximum: float):
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Supplied brightness was {value!r} - value should be between: {minimum!r} and {maximum!r}"
        )
