"""Terminal abstraction: where frames are written and how big the screen is.

Provides a ``Terminal`` protocol and a concrete ``FileTerminal`` backed by a
text stream (normally ``sys.stdout``).  The writer asks for the size before
every render since the window may have been resized in between.
"""

from __future__ import annotations

import os
import sys
from typing import Protocol, TextIO

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

CURSOR_UP_FMT = "\x1b[{}A"
CURSOR_DOWN_FMT = "\x1b[{}B"
CURSOR_COLUMN_FMT = "\x1b[{}G"
ERASE_DOWN = "\r\x1b[J"
STYLE_RESET = "\x1b[m"
STYLE_SET_FMT = "\x1b[m\x1b[{}m"


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal output."""

    def write(self, data: str) -> None: ...

    def size(self) -> tuple[int, int]:
        """Return ``(columns, rows)``."""
        ...


# ---------------------------------------------------------------------------
# FileTerminal implementation
# ---------------------------------------------------------------------------


class FileTerminal:
    """Terminal backed by a text stream.

    The size is queried from the stream's file descriptor on every call;
    streams that are not terminals report *default_size*.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        default_size: tuple[int, int] = (80, 24),
    ) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._default_size = default_size

    def size(self) -> tuple[int, int]:
        try:
            ts = os.get_terminal_size(self._stream.fileno())
        except (AttributeError, ValueError, OSError):
            return self._default_size
        return ts.columns, ts.lines

    def write(self, data: str) -> None:
        """Write *data* and flush; errors propagate to the caller."""
        self._stream.write(data)
        self._stream.flush()
