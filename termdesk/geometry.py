"""Pixel geometry of the terminal window: cell grid, borders and cursor style."""

from __future__ import annotations

from dataclasses import dataclass, field

BORDER_PX = 4
DEFAULT_CURSOR = 6
MAX_CURSOR = 7  # 7 draws a snowman


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass
class TermGeometry:
    """Window size in pixels and the character grid laid out inside it.

    ``cw`` and ``ch`` are the width and height of one character cell.
    The grid is centred in the window, leaving at least ``border`` pixels
    on each side whenever the window is large enough.
    """

    cw: int
    ch: int
    border: int = BORDER_PX
    width: int = 0
    height: int = 0
    cols: int = field(default=1, init=False)
    rows: int = field(default=1, init=False)
    tw: int = field(default=0, init=False)
    th: int = field(default=0, init=False)
    hborder: int = field(default=0, init=False)
    vborder: int = field(default=0, init=False)
    cursor: int = field(default=DEFAULT_CURSOR, init=False)

    def __post_init__(self) -> None:
        if self.cw <= 0 or self.ch <= 0:
            raise ValueError("character cells must have a positive size")
        if self.border < 0:
            raise ValueError("border must not be negative")

    @classmethod
    def for_grid(cls, cols: int, rows: int, cw: int, ch: int,
                 border: int = BORDER_PX) -> "TermGeometry":
        """Build a geometry whose window fits exactly ``cols`` x ``rows`` cells."""
        cols = max(cols, 1)
        rows = max(rows, 1)
        geometry = cls(cw, ch, border)
        geometry.resize(2 * border + cols * cw, 2 * border + rows * ch)
        return geometry

    def resize(self, width: int, height: int) -> tuple[int, int]:
        """Resize the window (0 keeps a dimension) and return ``(cols, rows)``."""
        if width != 0:
            self.width = width
        if height != 0:
            self.height = height

        cols = max(1, _trunc_div(self.width - 2 * self.border, self.cw))
        rows = max(1, _trunc_div(self.height - 2 * self.border, self.ch))

        self.hborder = _trunc_div(self.width - cols * self.cw, 2)
        self.vborder = _trunc_div(self.height - rows * self.ch, 2)
        self.cols = cols
        self.rows = rows
        self.tw = cols * self.cw
        self.th = rows * self.ch
        return cols, rows

    def cell(self, x: int, y: int) -> tuple[int, int]:
        """Return the ``(col, row)`` under pixel ``(x, y)``, clamped to the grid."""
        px = min(max(x - self.hborder, 0), self.tw - 1)
        py = min(max(y - self.vborder, 0), self.th - 1)
        return max(px, 0) // self.cw, max(py, 0) // self.ch

    def set_cursor(self, cursor: int) -> None:
        """Set the cursor style (0-7); other values raise ValueError."""
        if not 0 <= cursor <= MAX_CURSOR:
            raise ValueError(f"unknown cursor style {cursor}")
        self.cursor = cursor