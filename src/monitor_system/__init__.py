"""
Monitor System - polls resource utilization and draws it on the LED bar
"""

from .config import MonitorConfig
from .bar_renderer import render_bar, lit_pixel_count, bar_color
from .monitor import ResourceMonitor

__all__ = [
    "MonitorConfig",
    "render_bar",
    "lit_pixel_count",
    "bar_color",
    "ResourceMonitor",
]
