"""Main render loop driving the overlay."""

import logging
import signal
import threading
import time
from datetime import datetime
from typing import Callable, Optional

from rich.console import Console

from ..collectors.system_collector import SystemCollector
from ..config.config import Config
from ..core.frame import Frame
from ..core.shared_data import SharedDataStore
from .keyboard_handler import KeyboardHandler
from .renderer import Renderer
from .terminal import TerminalSession

logger = logging.getLogger(__name__)

TICK_INTERVAL = 0.1  # seconds
QUIT_KEY = "q"


class DisplayManager:
    """Owns the terminal and redraws the overlay every tick until 'q'."""

    def __init__(
        self,
        config: Config,
        console: Optional[Console] = None,
        keyboard: Optional[KeyboardHandler] = None,
        system_collector: Optional[SystemCollector] = None,
        clock: Callable[[], datetime] = datetime.now,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the display manager."""
        self.config = config
        self.console = console or Console(highlight=False)
        self.keyboard = keyboard or KeyboardHandler()
        self.system_collector = system_collector or SystemCollector()
        self.renderer = Renderer(self.console)
        self.clock = clock
        self.sleep = sleep
        self.exit_requested = False

    def run_display(self, shared_data: SharedDataStore, max_ticks: Optional[int] = None) -> Frame:
        """Run the render loop; returns the last frame drawn."""
        previous_handler = self._install_sigterm_handler()
        frame = Frame.initial()
        try:
            with TerminalSession(self.console, self.keyboard):
                while not self.exit_requested:
                    if max_ticks is not None and frame.tick >= max_ticks:
                        break
                    frame = self._tick(frame, shared_data)
        finally:
            if previous_handler is not None:
                signal.signal(signal.SIGTERM, previous_handler)
        logger.info(
            "Display stopped after %d ticks, %d weather updates",
            frame.tick, shared_data.weather_updates
        )
        return frame

    def _tick(self, frame: Frame, shared_data: SharedDataStore) -> Frame:
        """Sample, draw, check for quit, then sleep out the rest of the tick."""
        started = time.monotonic()

        frame = frame.advance(
            now=self.clock(),
            metrics=self.system_collector.collect(),
            weather=shared_data.get_weather(),
        )
        self.renderer.render(frame)

        if self.keyboard.poll_key(0) == QUIT_KEY:
            logger.info("Quit key pressed")
            self.exit_requested = True
            return frame

        elapsed = time.monotonic() - started
        self.sleep(max(0.0, TICK_INTERVAL - elapsed))
        return frame

    def _install_sigterm_handler(self):
        # signal handlers can only be set from the main thread
        if threading.current_thread() is not threading.main_thread():
            return None

        def exit_handler(signum, frame):
            self.exit_requested = True

        return signal.signal(signal.SIGTERM, exit_handler)
