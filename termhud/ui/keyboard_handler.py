"""Keyboard input handler for simple key commands."""
import os
import select
import sys
import termios
import tty
from collections import deque
from typing import List, Optional

from ..errors import TerminalError

ESCAPE = "\x1b"


class KeyboardHandler:
    """Raw-mode stdin with non-blocking single key polling."""

    def __init__(self, stream=None):
        """Initialize the keyboard handler."""
        self.stream = stream if stream is not None else sys.stdin
        self.old_settings = None
        self._pending = deque()

    def is_tty(self) -> bool:
        try:
            return self.stream.isatty()
        except (AttributeError, ValueError):
            return False

    def enable_raw_mode(self):
        """Setup terminal for raw input. No-op when stdin is not a TTY."""
        if not self.is_tty() or self.old_settings is not None:
            return
        try:
            fd = self.stream.fileno()
            self.old_settings = termios.tcgetattr(fd)
            tty.setraw(fd)
        except (termios.error, OSError) as e:
            raise TerminalError(f"Cannot enable raw mode: {e}") from e

    def restore_terminal(self):
        """Restore terminal to original settings."""
        if self.old_settings is None:
            return
        settings, self.old_settings = self.old_settings, None
        try:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, settings)
        except (termios.error, OSError) as e:
            raise TerminalError(f"Cannot restore terminal mode: {e}") from e

    def poll_key(self, timeout: float = 0.0) -> Optional[str]:
        """Return the next pressed key, or None if nothing is waiting.

        An escape sequence (arrow keys etc.) comes back as one key.
        """
        if not self._pending:
            self._read_available(timeout)
        return self._pending.popleft() if self._pending else None

    def _read_available(self, timeout: float):
        if not self.is_tty():
            return
        fd = self.stream.fileno()
        if not select.select([fd], [], [], timeout)[0]:
            return
        chunk = os.read(fd, 64).decode("utf-8", errors="ignore")
        self._pending.extend(split_keys(chunk))


def split_keys(chunk: str) -> List[str]:
    """Split raw input into keys; each escape sequence stays one key.

    CSI and SS3 sequences (ESC [ or ESC O) run up to their final byte in
    0x40-0x7E; any other ESC takes exactly one following character.
    """
    keys = []
    i = 0
    while i < len(chunk):
        if chunk[i] != ESCAPE:
            keys.append(chunk[i])
            i += 1
            continue

        end = i + 1
        if end < len(chunk) and chunk[end] in "[O":
            end += 1
            while end < len(chunk) and not "\x40" <= chunk[end] <= "\x7e":
                end += 1
            end += 1
        elif end < len(chunk):
            end += 1
        keys.append(chunk[i:end])
        i = end
    return keys
