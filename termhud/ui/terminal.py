"""Scoped ownership of the terminal: alternate screen, cursor and raw mode."""
import logging

from rich.console import Console

from ..errors import TerminalError
from .keyboard_handler import KeyboardHandler

logger = logging.getLogger(__name__)


class TerminalSession:
    """Context manager that puts the terminal in overlay mode.

    Entering enables raw input, switches to the alternate screen and hides
    the cursor. Leaving undoes all three on every exit path.
    """

    def __init__(self, console: Console, keyboard: KeyboardHandler):
        """Initialize the session."""
        self.console = console
        self.keyboard = keyboard
        self.active = False

    def __enter__(self) -> "TerminalSession":
        try:
            self.keyboard.enable_raw_mode()
            self.console.set_alt_screen(True)
            self.console.show_cursor(False)
        except BaseException:
            self.restore(raise_errors=False)
            raise
        self.active = True
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        # Don't let a teardown error mask the one already propagating
        self.restore(raise_errors=exc_type is None)
        return False

    def restore(self, raise_errors: bool = True):
        """Leave the alternate screen, drop raw mode and show the cursor."""
        first_error = None
        for step in (self._leave_alt_screen, self.keyboard.restore_terminal, self._show_cursor):
            try:
                step()
            except (TerminalError, OSError) as e:
                logger.error("Terminal restore step failed: %s", e)
                first_error = first_error or e
        self.active = False

        if first_error is not None and raise_errors:
            if isinstance(first_error, TerminalError):
                raise first_error
            raise TerminalError(f"Cannot restore terminal: {first_error}") from first_error

    def _leave_alt_screen(self):
        self.console.set_alt_screen(False)

    def _show_cursor(self):
        self.console.show_cursor(True)
