"""termline: screen rendering for an interactive shell line editor."""

# Screen buffer
from termline.buffer import Buffer, Cell, Pos

# Frame composition
from termline.composer import Frame, compose_frame

# Listings
from termline.listing import (
    grid_shape,
    render_completion_listing,
    render_navigation_listing,
)

# Configuration
from termline.settings import RenderSettings, SettingsError

# Editor state snapshot
from termline.state import (
    Candidate,
    CandidatePart,
    Completion,
    EditorState,
    HistoryState,
    Mode,
    NavColumn,
    Navigation,
    Token,
)
from termline.styles import Styles

# Terminal interface and implementations
from termline.terminal import FileTerminal, Terminal

# Utilities
from termline.utils import char_width, trim_to_width, visible_width

# Values shared with the evaluator
from termline.values import IndexOutOfRange, List, ListIndexError, NeedIntegerIndex

# Windowing
from termline.window import find_window, trim_to_window

# Writer
from termline.writer import Writer, delta_pos

__all__ = [
    # Buffer
    "Buffer",
    "Cell",
    "Pos",
    # Composer
    "Frame",
    "compose_frame",
    # Listings
    "grid_shape",
    "render_completion_listing",
    "render_navigation_listing",
    # Settings
    "RenderSettings",
    "SettingsError",
    # State
    "Candidate",
    "CandidatePart",
    "Completion",
    "EditorState",
    "HistoryState",
    "Mode",
    "NavColumn",
    "Navigation",
    "Token",
    "Styles",
    # Terminal
    "FileTerminal",
    "Terminal",
    # Utilities
    "char_width",
    "trim_to_width",
    "visible_width",
    # Values
    "IndexOutOfRange",
    "List",
    "ListIndexError",
    "NeedIntegerIndex",
    # Windowing
    "find_window",
    "trim_to_window",
    # Writer
    "Writer",
    "delta_pos",
]
