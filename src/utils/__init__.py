"""
Utilities package - logging, GPIO pin helpers and loop timing
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter
from .gpio_utils import gpio_to_physical, is_valid_gpio, describe_pin, GPIO_TO_PHYSICAL
from .once_in_ms import OnceInMs

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
    'gpio_to_physical',
    'is_valid_gpio',
    'describe_pin',
    'GPIO_TO_PHYSICAL',
    'OnceInMs'
]
