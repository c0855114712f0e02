"""Listings shown below the input line: completion grid and navigation panes."""

from __future__ import annotations

import logging
import math

from termline.buffer import Buffer
from termline.state import Completion, Navigation
from termline.styles import Styles
from termline.utils import trim_to_width, visible_width
from termline.window import find_window, trim_to_window

logger = logging.getLogger(__name__)

COMPLETION_MARGIN = 2
NAVIGATION_MARGIN = 1


def grid_shape(widths: list[int], width: int, margin: int) -> tuple[int, int, int]:
    """Decide the shape of a candidate grid.

    Returns ``(column_width, columns, rows)`` for candidates of display
    *widths* laid out in a buffer *width* columns wide.
    """
    col_width = max(widths, default=0)
    cols = (width + margin) // (col_width + margin)
    if cols == 0:
        cols = 1
    rows = math.ceil(len(widths) / cols)
    return col_width, cols, rows


def render_completion_listing(
    comp: Completion,
    width: int,
    height: int,
    styles: Styles,
    margin: int = COMPLETION_MARGIN,
) -> tuple[Buffer | None, int]:
    """Lay out the completion candidates in multiple columns.

    Candidates fill the grid column by column.  Only the rows that fit in
    *height* are drawn, chosen so the row of the current candidate stays
    visible.  Returns the buffer (``None`` when there are no candidates)
    and the total number of rows in the grid.
    """
    cands = comp.candidates
    n = len(cands)
    if n == 0:
        return None, 0

    texts = [cands[k].text for k in range(n)]
    col_width, cols, rows = grid_shape([visible_width(t) for t in texts], width, margin)
    col_width = min(col_width, width)

    current_row = comp.current % rows if comp.current >= 0 else 0
    low, high = find_window(rows, current_row, height)
    logger.debug(
        "Completion grid %dx%d (column width %d), showing rows [%d, %d)",
        rows, cols, col_width, low, high,
    )

    b = Buffer(width)
    for i in range(low, high):
        if i > low:
            b.newline()
        for j in range(cols):
            k = j * rows + i
            if k >= n:
                break
            if j > 0:
                b.write_padding(margin, "")
            style = styles.current_completion if k == comp.current else ""
            text = trim_to_width(texts[k], col_width)
            b.writes(text, style)
            b.write_padding(col_width - visible_width(text), style)
    return b, rows


def render_navigation_listing(
    nav: Navigation,
    width: int,
    height: int,
    styles: Styles,
    margin: int = NAVIGATION_MARGIN,
) -> Buffer:
    """Lay out the parent and current directory side by side.

    Each pane is scrolled independently so its selected entry stays
    visible.
    """
    filenames, low = trim_to_window(nav.current.names, nav.current.selected, height)
    parent_filenames, parent_low = trim_to_window(
        nav.parent.names, nav.parent.selected, height
    )

    # TODO: size the two panes by their contents instead of splitting the
    # screen in half.
    parent_width = min((width + margin) // 2, max(0, width - margin))
    current_width = width - margin - parent_width

    b = Buffer(width)
    for i in range(max(len(filenames), len(parent_filenames))):
        if i > 0:
            b.newline()

        text = parent_filenames[i] if i < len(parent_filenames) else ""
        style = styles.selected_file if i + parent_low == nav.parent.selected else ""
        _write_padded(b, text, parent_width, style)
        # No room for the current pane; a row must never wrap.
        if current_width <= 0:
            continue
        b.write_padding(margin, "")

        if i < len(filenames):
            style = styles.selected_file if i + low == nav.current.selected else ""
            _write_padded(b, filenames[i], current_width, style)
    return b


def _write_padded(b: Buffer, text: str, width: int, style: str) -> None:
    text = trim_to_width(text, width)
    b.writes(text, style)
    b.write_padding(width - visible_width(text), style)
