"""Keeping the terminal in sync with the editor state.

Every update erases the region drawn last time and draws the new frame in
full, then puts the cursor on the dot.  The region is found by moving up
from where the cursor was left, which is the dot of the previous frame.
"""

from __future__ import annotations

import logging

from termline.buffer import Buffer, Pos
from termline.composer import compose_frame
from termline.settings import RenderSettings
from termline.state import EditorState
from termline.terminal import (
    CURSOR_COLUMN_FMT,
    CURSOR_DOWN_FMT,
    CURSOR_UP_FMT,
    ERASE_DOWN,
    STYLE_RESET,
    STYLE_SET_FMT,
    Terminal,
)

logger = logging.getLogger(__name__)


def delta_pos(from_: Pos, to: Pos) -> str:
    """Escape sequence that moves the cursor from *from_* to *to*."""
    out: list[str] = []
    if from_.line < to.line:
        out.append(CURSOR_DOWN_FMT.format(to.line - from_.line))
    elif from_.line > to.line:
        out.append(CURSOR_UP_FMT.format(from_.line - to.line))
    out.append(CURSOR_COLUMN_FMT.format(to.col + 1))
    return "".join(out)


def render_buffer(buf: Buffer, old_dot_line: int = 0) -> str:
    """Build the output that replaces the previous frame with *buf*.

    *old_dot_line* is the line of the previous frame the cursor was left on.
    """
    out: list[str] = []

    if old_dot_line > 0:
        out.append(CURSOR_UP_FMT.format(old_dot_line))
    out.append(ERASE_DOWN)

    style = ""
    for i, line in enumerate(buf.lines):
        if i > 0:
            out.append("\n")
        for cell in line:
            if cell.width > 0 and cell.style != style:
                out.append(STYLE_SET_FMT.format(cell.style))
                style = cell.style
            out.append(cell.char)
    if style:
        out.append(STYLE_RESET)

    cursor = buf.cursor()
    if cursor.col == buf.width:
        # The terminal keeps the cursor on the last column of a full line.
        cursor = Pos(cursor.line, cursor.col - 1)
    out.append(delta_pos(cursor, buf.dot))
    return "".join(out)


class Writer:
    """The part of the editor responsible for updating the screen.

    Render calls must not overlap; the writer does no locking.
    """

    def __init__(
        self, terminal: Terminal, settings: RenderSettings | None = None
    ) -> None:
        self.terminal = terminal
        self.settings = settings or RenderSettings()
        self.old_buf = Buffer(0)
        # Rows of the completion grid in the last frame.
        self.completion_lines = 0

    def commit_buffer(self, buf: Buffer) -> None:
        """Update the terminal display to reflect *buf*.

        The output is written in one go; if writing fails the error
        propagates and the previous frame stays the baseline.
        """
        data = render_buffer(buf, self.old_buf.dot.line)
        self.terminal.write(data)
        self._append_write_log(data)
        self.old_buf = buf

    def refresh(self, state: EditorState) -> None:
        """Redraw the line editor for *state*."""
        width, height = self.terminal.size()
        frame = compose_frame(state, width, height, self.settings)
        if frame is None:
            return
        logger.debug(
            "Rendering %d lines on a %dx%d terminal, dot at %s",
            len(frame.buffer), width, height, frame.buffer.dot,
        )
        self.completion_lines = frame.completion_lines
        self.commit_buffer(frame.buffer)

    def _append_write_log(self, data: str) -> None:
        path = self.settings.write_log_path
        if not path:
            return
        try:
            with open(path, "a", encoding="utf-8", newline="") as f:
                f.write(data)
        except OSError as e:
            logger.warning("Cannot append to write log %s: %s", path, e)
