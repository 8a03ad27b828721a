"""Single-key input from the controlling terminal."""

import logging
import os
import select
import sys
import time
from typing import Optional, TextIO

try:
    import termios
    import tty
    _HAS_TERMIOS = True
except ImportError:
    _HAS_TERMIOS = False

logger = logging.getLogger(__name__)

ESC = "\x1b"
CTRL_C = "\x03"


class KeyReader:
    """Puts stdin in cbreak mode and reads one key at a time.

    Without a TTY (or termios) it degrades to a plain sleep, so the dashboard
    still runs, just without key handling.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdin
        self._old_settings = None
        self.enabled = False

    def __enter__(self) -> "KeyReader":
        if _HAS_TERMIOS and self.stream.isatty():
            fd = self.stream.fileno()
            try:
                self._old_settings = termios.tcgetattr(fd)
                tty.setcbreak(fd)
                self.enabled = True
            except (termios.error, OSError) as e:
                logger.warning(f"Keyboard input unavailable: {e}")
        return self

    def __exit__(self, *exc_info) -> None:
        if self._old_settings is not None:
            try:
                termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._old_settings)
            except (termios.error, OSError) as e:
                logger.error(f"Could not restore terminal settings: {e}")
            self._old_settings = None
        self.enabled = False

    def read_key(self, timeout: float) -> Optional[str]:
        """Wait up to timeout seconds for one key; None if none arrived."""
        timeout = max(timeout, 0.0)
        if not self.enabled:
            time.sleep(timeout)
            return None

        fd = self.stream.fileno()
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        try:
            data = os.read(fd, 1)
        except OSError:
            return None
        key = data.decode("utf-8", errors="ignore")
        if key == ESC and select.select([fd], [], [], 0)[0]:
            # Escape sequence (arrow keys etc.), not a bare Esc
            os.read(fd, 16)
            return None
        return key or None
