"""Virtual terminal for testing -- implements the Terminal protocol in-memory.

This module provides a ``VirtualTerminal`` class that satisfies the
``termline.terminal.Terminal`` protocol without performing any real I/O.
All output is captured in a buffer for assertions.
"""

from __future__ import annotations


class VirtualTerminal:
    """In-memory terminal that records all writes for test inspection.

    Parameters
    ----------
    rows:
        Number of terminal rows (height).
    columns:
        Number of terminal columns (width).
    """

    def __init__(self, rows: int = 24, columns: int = 80) -> None:
        self.rows = rows
        self.columns = columns
        self._buffer: list[str] = []
        self.size_queries = 0
        self.fail_with: OSError | None = None

    # -- Terminal protocol --------------------------------------------------

    def size(self) -> tuple[int, int]:
        self.size_queries += 1
        return self.columns, self.rows

    def write(self, data: str) -> None:
        """Append *data* to the internal buffer, or fail if asked to."""
        if self.fail_with is not None:
            raise self.fail_with
        self._buffer.append(data)

    # -- Test helpers -------------------------------------------------------

    @property
    def output(self) -> str:
        """Return everything written to the terminal as a single string."""
        return "".join(self._buffer)

    @property
    def writes(self) -> list[str]:
        """Each individual ``write`` call, in order."""
        return list(self._buffer)

    @property
    def write_count(self) -> int:
        """Return the number of individual ``write`` calls made."""
        return len(self._buffer)

    def resize(self, rows: int | None = None, columns: int | None = None) -> None:
        """Change terminal dimensions.

        If *rows* or *columns* is ``None`` the corresponding dimension
        is left unchanged.
        """
        if rows is not None:
            self.rows = rows
        if columns is not None:
            self.columns = columns
