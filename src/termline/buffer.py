"""Screen buffer: an internal reflection of a region of the terminal.

The Unix terminal API gives no dependable way to read back what is on the
screen, so the writer keeps this reflection and only ever synchronizes in
one direction (buffer -> terminal).  For that to work the buffer has to
agree exactly with the terminal on character widths and on where soft line
breaks happen.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from termline.utils import char_width, is_printable


@dataclass(frozen=True)
class Cell:
    """An indivisible unit on the screen, not necessarily one column wide."""

    char: str
    width: int
    style: str = ""


@dataclass(frozen=True)
class Pos:
    """A position within a buffer."""

    line: int = 0
    col: int = 0


@dataclass
class Buffer:
    """A continuous range of lines on the terminal.

    ``dot`` is what the user perceives as the cursor; it is recorded by the
    code filling the buffer and is independent of the write position.
    """

    width: int
    col: int = 0
    indent: int = 0
    newline_when_full: bool = False
    lines: list[list[Cell]] = field(default_factory=lambda: [[]])
    dot: Pos = field(default_factory=Pos)

    def __len__(self) -> int:
        return len(self.lines)

    # -- low-level appends --------------------------------------------------

    def _append_cell(self, cell: Cell) -> None:
        self.lines[-1].append(cell)
        self.col += cell.width

    def _append_line(self) -> None:
        self.lines.append([])
        self.col = 0

    def newline(self) -> None:
        """Start a new line, re-applying the indent."""
        self._append_line()
        for _ in range(self.indent):
            self._append_cell(Cell(" ", 1))

    # -- writes -------------------------------------------------------------

    def write(self, char: str, style: str = "") -> None:
        """Append a single character, wrapping softly when the line is full.

        Unprintable characters are dropped silently, and so is a character
        wider than the whole buffer.
        """
        if char == "\n":
            self.newline()
            return
        if not is_printable(char):
            return

        wd = char_width(char)
        if wd > self.width:
            return
        cell = Cell(char, wd, style)

        if self.col + wd > self.width:
            self.newline()
        self._append_cell(cell)
        if self.col == self.width and self.newline_when_full:
            self.newline()

    def writes(self, text: str, style: str = "") -> None:
        for char in text:
            self.write(char, style)

    def write_padding(self, n: int, style: str = "") -> None:
        if n > 0:
            self.writes(" " * n, style)

    # -- positions ----------------------------------------------------------

    def line(self) -> int:
        """Index of the line currently being written."""
        return len(self.lines) - 1

    def cursor(self) -> Pos:
        """Position right after the last written cell."""
        return Pos(len(self.lines) - 1, self.col)

    # -- composition --------------------------------------------------------

    def extend(self, other: Buffer | None, move_dot: bool = False) -> None:
        """Append the lines of *other* below this buffer.

        With *move_dot* the dot of *other* becomes the dot of this buffer,
        shifted down by the number of lines this buffer had.
        """
        if other is None or not other.lines:
            return
        offset = len(self.lines)
        self.lines.extend(other.lines)
        self.col = other.col
        if move_dot:
            self.dot = Pos(other.dot.line + offset, other.dot.col)

    def trim_to_lines(self, low: int, high: int) -> None:
        """Keep only lines ``[low, high)``."""
        self.lines = self.lines[low:high]
        self.dot = Pos(self.dot.line - low, self.dot.col)

    def text_lines(self) -> list[str]:
        """The characters of each line, without styles."""
        return ["".join(c.char for c in line) for line in self.lines]

    def line_widths(self) -> list[int]:
        return [sum(c.width for c in line) for line in self.lines]
