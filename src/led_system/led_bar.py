"""
LedBar - owns the buffer, the port and the animations for one strip

Lifecycle:
    bar = LedBar(port, logger, brightness=0.5)
    bar.setup()          # open port, startup sweep
    bar.buffer.set_pixel_hex(0, "00FF00")
    bar.show()
    bar.cleanup()        # shutdown sweep, clear, close port
"""

import time
from typing import Callable, Optional

from .frame_encoder import FrameEncoder
from .interfaces import BitPort
from .pixel_buffer import PixelBuffer
from .sequencer import AnimationSequencer


class LedBar:
    """8-pixel strip with explicit setup/cleanup"""

    def __init__(self,
                 port: BitPort,
                 logger,
                 brightness: Optional[float] = None,
                 show_anim_on_start: bool = True,
                 show_anim_on_exit: bool = True,
                 clear_on_exit: bool = True,
                 sleep: Callable[[float], None] = time.sleep):
        """
        Args:
            port: Two-wire output (not yet opened)
            logger: ClassLogger instance for logging
            brightness: Initial brightness 0.0-1.0 (None = raw default level)
            show_anim_on_start: Play the startup sweep in setup()
            show_anim_on_exit: Play the shutdown sweep in cleanup()
            clear_on_exit: Blank the strip in cleanup()
            sleep: Sleep function in seconds (injectable for tests)

        Raises:
            BrightnessRangeError: brightness outside 0.0-1.0
        """
        self.port = port
        self.logger = logger
        self.buffer = PixelBuffer(brightness)
        self.encoder = FrameEncoder(port, logger)
        self.sequencer = AnimationSequencer(self.buffer, self.encoder, logger, sleep)
        self.show_anim_on_start = show_anim_on_start
        self.show_anim_on_exit = show_anim_on_exit
        self.clear_on_exit = clear_on_exit
        self._is_open = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    def setup(self) -> None:
        """Open the port and play the startup animation"""
        if self._is_open:
            return
        self.port.open()
        self._is_open = True
        self.logger.info("LED bar ready")
        if self.show_anim_on_start:
            self.sequencer.startup_sweep()

    def show(self) -> None:
        """Render the current buffer"""
        self.encoder.render(self.buffer)

    def flash_all(self, times: int, hex_color: str) -> None:
        self.sequencer.flash_all(times, hex_color)

    def flash_pixel(self, index: int, times: int, hex_color: str) -> None:
        self.sequencer.flash_pixel(index, times, hex_color)

    def cleanup(self) -> None:
        """Shutdown animation, blank the strip and release the port (runs once)"""
        if not self._is_open:
            return
        try:
            if self.show_anim_on_exit:
                self.sequencer.shutdown_sweep()
            if self.clear_on_exit:
                self.buffer.clear()
                self.show()
        finally:
            self._is_open = False
            self.port.close()
            self.logger.info(f"LED bar closed after {self.encoder.render_count} frames")

    def __enter__(self) -> 'LedBar':
        self.setup()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()
