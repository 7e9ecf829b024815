"""Access to basic information about the terminal the output goes to."""

from __future__ import annotations

import shutil
import sys

CHAR_WIDTH_WINDOWS = 0.714
CHAR_WIDTH_OTHER = 0.5


class TerminalError(RuntimeError):
    """Raised when the terminal cannot be detected."""


class TerminalAccessor:
    """Reports the character aspect and screen size of the current terminal."""

    def is_windows(self) -> bool:
        """Return True when running on Windows."""
        return sys.platform == "win32"

    def char_width(self) -> float:
        """Return the width of a character cell relative to its height."""
        return CHAR_WIDTH_WINDOWS if self.is_windows() else CHAR_WIDTH_OTHER

    def screen_size(self) -> tuple[int, int]:
        """Return the terminal size as (columns, lines).

        Raises TerminalError when standard output is not a terminal.
        """
        stream = sys.stdout
        try:
            is_tty = stream is not None and stream.isatty()
        except (AttributeError, ValueError):
            is_tty = False
        if not is_tty:
            raise TerminalError("can not detect the terminal")
        size = shutil.get_terminal_size()
        return size.columns, size.lines