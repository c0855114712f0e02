"""Choosing which part of a long list fits into a limited number of lines."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def find_window(total: int, selected: int, max_lines: int) -> tuple[int, int]:
    """Find a window of at most *max_lines* lines around *selected*.

    Returns a half-open range ``(low, high)`` into a list of *total* lines.
    The window is centered on *selected* unless that would run past either
    end of the list, in which case it is flush with that end.
    """
    if total <= max_lines:
        return 0, total
    if max_lines <= 0:
        return 0, 0

    low = selected - max_lines // 2
    high = low + max_lines
    if low < 0:
        # Near the top of the list, move the window down
        low = 0
        high = max_lines
    elif high > total:
        # Near the bottom of the list, move the window up
        high = total
        low = total - max_lines
    return low, high


def trim_to_window(
    items: Sequence[T], selected: int, max_lines: int
) -> tuple[list[T], int]:
    """Return the visible part of *items* and the index of its first element."""
    low, high = find_window(len(items), selected, max_lines)
    return [items[i] for i in range(low, high)], low
