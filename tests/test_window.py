"""Tests for the window selector."""

from __future__ import annotations

from termline.window import find_window, trim_to_window


class TestFindWindow:
    def test_everything_fits(self) -> None:
        assert find_window(5, 3, 10) == (0, 5)
        assert find_window(10, 9, 10) == (0, 10)

    def test_empty_list(self) -> None:
        assert find_window(0, 0, 10) == (0, 0)

    def test_centered_on_selection(self) -> None:
        assert find_window(100, 50, 10) == (45, 55)

    def test_flush_with_top(self) -> None:
        assert find_window(100, 2, 10) == (0, 10)

    def test_flush_with_bottom(self) -> None:
        assert find_window(100, 97, 10) == (90, 100)

    def test_odd_window(self) -> None:
        assert find_window(20, 10, 3) == (9, 12)

    def test_no_room(self) -> None:
        assert find_window(5, 2, 0) == (0, 0)

    def test_containment(self) -> None:
        """Windows stay in bounds and keep the selection visible."""
        for total in range(0, 25):
            for max_lines in range(1, 12):
                for selected in range(0, total):
                    low, high = find_window(total, selected, max_lines)
                    assert 0 <= low <= high <= total
                    assert high - low <= max_lines
                    if total > max_lines:
                        assert high - low == max_lines
                        assert low == 0 or high == total or low <= selected < high
                    # The selection is visible in every case.
                    assert low <= selected < high


class TestTrimToWindow:
    def test_returns_slice_and_offset(self) -> None:
        items = [str(i) for i in range(10)]
        visible, low = trim_to_window(items, 8, 4)
        assert visible == ["6", "7", "8", "9"]
        assert low == 6

    def test_short_list(self) -> None:
        visible, low = trim_to_window(["a", "b"], 0, 5)
        assert visible == ["a", "b"]
        assert low == 0
