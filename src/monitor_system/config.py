"""
Monitor configuration
"""

from dataclasses import dataclass

from led_system import CLOCK_PIN, DATA_PIN, brightness_to_level
from metrics_system import ALLOCATIONS, RESOURCES
from utils import is_valid_gpio


@dataclass
class MonitorConfig:
    """Main monitor configuration"""

    # What to show
    resource: str = ALLOCATIONS
    max_allocations: int = 8       # Full bar at this many running allocations
    brightness: float = 0.5        # 0.0-1.0, brightness of lit bar pixels

    # Timing
    poll_interval_ms: int = 5000
    startup_delay_ms: int = 100

    # Strip behaviour
    show_anim_on_start: bool = True
    show_anim_on_exit: bool = True
    clear_on_exit: bool = True

    # Hardware
    data_pin: int = DATA_PIN
    clock_pin: int = CLOCK_PIN
    simulate: bool = False         # Use SimulatedBitPort instead of GPIO

    # Logging
    log_dir: str = "logs"
    verbose: bool = False

    def validate(self) -> None:
        """
        Basic validation of configuration

        Raises:
            BrightnessRangeError: brightness outside 0.0-1.0 (fatal)
            ValueError: any other invalid setting
        """
        brightness_to_level(self.brightness)

        if self.resource not in RESOURCES:
            raise ValueError(f"Unknown resource '{self.resource}' (expected one of: {', '.join(RESOURCES)})")

        if self.max_allocations <= 0:
            raise ValueError(f"Max allocations must be positive, got {self.max_allocations}")

        if self.poll_interval_ms <= 0:
            raise ValueError("Poll interval must be positive")

        if self.startup_delay_ms < 0:
            raise ValueError("Startup delay cannot be negative")

        for name, pin in (("data", self.data_pin), ("clock", self.clock_pin)):
            if not is_valid_gpio(pin):
                raise ValueError(f"{name.capitalize()} GPIO pin {pin} out of valid range (0-27)")

        if self.data_pin == self.clock_pin:
            raise ValueError(f"Data and clock must use different GPIO pins, both are {self.data_pin}")
