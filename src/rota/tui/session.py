"""Terminal session lifecycle.

Scoped ownership of the controlling terminal: raw input, alternate screen and
hidden cursor on entry; the saved mode, primary screen and visible cursor
on every exit path.

Modified: 2026-10-18
"""

import logging
import os
import sys
import termios
import tty
from typing import Optional, TextIO

from ..core.exceptions import TerminalError

logger = logging.getLogger(__name__)

ENTER_SEQUENCE = "\x1b[?1049h\x1b[?25l"  # alternate screen, hide cursor
LEAVE_SEQUENCE = "\x1b[?25h\x1b[?1049l"  # show cursor, primary screen


class TerminalSession:
    """Context manager that owns the terminal for the life of the app.

    Example:
        with TerminalSession():
            app.run()
    """

    def __init__(self, stdin: Optional[TextIO] = None, output: Optional[TextIO] = None):
        """Initialize the session.

        Args:
            stdin: Input stream attached to the terminal (default sys.stdin)
            output: Stream escape sequences are written to; defaults to the
                stream Textual draws on (sys.__stderr__)
        """
        self.stdin = stdin or sys.stdin
        self.output = output or sys.__stderr__
        self._fd: Optional[int] = None
        self._saved_attrs = None
        self.active = False

    def acquire(self) -> None:
        """Switch the terminal to raw mode on the alternate screen.

        Raises:
            TerminalError: If stdin is not a terminal
        """
        try:
            fd = self.stdin.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise TerminalError(f"No terminal attached to stdin: {e}") from e

        if not os.isatty(fd):
            raise TerminalError("Rota needs an interactive terminal (stdin is not a tty)")

        try:
            self._saved_attrs = termios.tcgetattr(fd)
        except termios.error as e:
            raise TerminalError(f"Cannot read terminal attributes: {e}") from e

        self._fd = fd
        self.active = True
        tty.setraw(fd, termios.TCSANOW)
        self._write(ENTER_SEQUENCE)
        logger.debug("Terminal session acquired")

    def release(self) -> None:
        """Restore the terminal. Safe to call more than once."""
        if not self.active:
            return
        self.active = False

        try:
            self._write(LEAVE_SEQUENCE)
        finally:
            if self._fd is not None and self._saved_attrs is not None:
                try:
                    termios.tcsetattr(self._fd, termios.TCSAFLUSH, self._saved_attrs)
                except termios.error as e:
                    logger.error(f"Could not restore terminal attributes: {e}")
        logger.debug("Terminal session released")

    def _write(self, sequence: str) -> None:
        self.output.write(sequence)
        self.output.flush()

    def __enter__(self) -> "TerminalSession":
        try:
            self.acquire()
        except BaseException:
            self.release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
