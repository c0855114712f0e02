"""Composing one full frame of the line editor from an editor state.

The frame is the input line followed by the mode line, the tips and the
listing, each only when there is something to show and room to show it.
The input line always has priority; the lower regions are dropped first
when the terminal is short.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from termline.buffer import Buffer
from termline.listing import render_completion_listing, render_navigation_listing
from termline.settings import RenderSettings
from termline.state import EditorState
from termline.styles import Styles
from termline.utils import byte_slice, trim_to_width, utf8_len, visible_width
from termline.window import find_window

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """A composed frame plus facts about it the key loop wants back."""

    buffer: Buffer
    # Number of rows in the completion grid, 0 when none was laid out.
    completion_lines: int = 0


def lines(*bufs: Buffer | None) -> int:
    """Total number of lines in *bufs*, ignoring absent ones."""
    return sum(len(b) for b in bufs if b is not None)


def render_input_line(state: EditorState, width: int, styles: Styles) -> Buffer:
    """Render prompt, input text and right prompt, recording the dot."""
    b = Buffer(width, newline_when_full=True)

    b.writes(state.prompt, styles.prompt)

    if b.line() == 0 and b.col * 2 < b.width:
        b.indent = b.col

    comp = state.completion
    if comp is not None and not 0 <= comp.current < len(comp.candidates):
        comp = None
    hist = state.history if state.mode == "history" else None
    hist_stop = len(state.history.prefix.encode("utf-8")) if hist else -1

    # i keeps track of the number of bytes written.
    i = 0
    inserted = False
    suppress = False

    def at_offset() -> bool:
        """Handle what happens at byte offset i; False to stop writing."""
        nonlocal inserted, suppress
        if comp is not None and not inserted and i == comp.start:
            # Put the current candidate in place of the text being
            # completed, so the dot lands right after it.
            attr = styles.for_token(comp.type)
            for part in comp.candidates[comp.current].parts:
                b.writes(part.text, attr + styles.completed if part.completed else attr)
            inserted = suppress = True
        if i == hist_stop:
            return False
        if i == state.dot:
            b.dot = b.cursor()
        return True

    chars = (
        (ch, styles.for_token(token.type)) for token in state.tokens for ch in token.text
    )
    if at_offset():
        for ch, style in chars:
            if not (suppress and i < comp.end):
                b.write(ch, style)
            i += utf8_len(ch)
            if not at_offset():
                break

    if hist is not None:
        # Show the rest of the history item, if there is one, and put the
        # cursor at the end of what is shown.
        if 0 <= hist.current < len(hist.items):
            item = hist.items[hist.current]
            b.writes(item[len(hist.prefix):], styles.completed_history)
        b.dot = b.cursor()

    padding = b.width - b.col - visible_width(state.rprompt)
    if state.rprompt and padding >= 1:
        b.newline_when_full = False
        b.write_padding(padding, "")
        b.writes(state.rprompt, styles.rprompt)

    return b


def mode_text(state: EditorState) -> str:
    """The text of the mode line, empty in insert mode."""
    if state.mode == "command":
        return "Command"
    if state.mode == "completion" and state.completion is not None:
        comp = state.completion
        return f"Completing {byte_slice(state.line, comp.start, comp.end)}"
    if state.mode == "navigation":
        return "Navigating"
    if state.mode == "history" and state.history is not None:
        return f"History #{state.history.current}"
    return ""


def render_mode_line(state: EditorState, width: int, styles: Styles) -> Buffer | None:
    text = mode_text(state)
    if not text:
        return None
    b = Buffer(width)
    b.writes(trim_to_width(text, width), styles.mode)
    return b


def render_tips(state: EditorState, width: int, styles: Styles) -> Buffer | None:
    if not state.tips:
        return None
    b = Buffer(width)
    # Tips are expected to be single lines.
    b.writes(trim_to_width(", ".join(state.tips), width), styles.tip)
    return b


def compose_frame(
    state: EditorState,
    width: int,
    height: int,
    settings: RenderSettings | None = None,
) -> Frame | None:
    """Compose the frame for *state* on a *width* x *height* terminal.

    Returns ``None`` when the terminal has no room at all.
    """
    settings = settings or RenderSettings()
    styles = settings.styles
    if width <= 0 or height <= 0:
        logger.debug("Terminal is %dx%d, nothing to render", width, height)
        return None

    buf_line = render_input_line(state, width, styles)
    buf_mode = render_mode_line(state, width, styles)
    buf_tips = render_tips(state, width, styles)
    buf_listing: Buffer | None = None
    completion_lines = 0

    used = lines(buf_line)
    if height < used:
        # Not even the input line fits; show the lines around the dot.
        low, high = find_window(used, buf_line.dot.line, height)
        logger.debug("Input line has %d lines, showing [%d, %d)", used, low, high)
        buf_line.trim_to_lines(low, high)
        return Frame(buf_line)

    if buf_mode is not None:
        if used + lines(buf_mode) <= height:
            used += lines(buf_mode)
        else:
            logger.debug("No room for the mode line")
            buf_mode = None
    if buf_tips is not None:
        if used + lines(buf_tips) <= height:
            used += lines(buf_tips)
        else:
            logger.debug("No room for tips")
            buf_tips = None

    listing_height = height - used
    if listing_height > 0:
        if state.completion is not None:
            buf_listing, completion_lines = render_completion_listing(
                state.completion,
                width,
                listing_height,
                styles,
                margin=settings.completion_margin,
            )
        elif state.navigation is not None:
            buf_listing = render_navigation_listing(
                state.navigation,
                width,
                listing_height,
                styles,
                margin=settings.navigation_margin,
            )

    buf = buf_line
    buf.extend(buf_mode)
    buf.extend(buf_tips)
    buf.extend(buf_listing)
    return Frame(buf, completion_lines)
