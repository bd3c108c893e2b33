"""Colour schemes and the 256-colour palette of the terminal."""

from __future__ import annotations

from dataclasses import dataclass

PALETTE_SIZE = 258
CURSOR_COLOR = 256
REVERSE_CURSOR_COLOR = 257

_CUBE_START = 16
_CUBE_END = 6 * 6 * 6 + 16
_GREY_END = 255


@dataclass(frozen=True)
class ColorScheme:
    """A named palette with its default foreground, background and cursors.

    ``colors`` holds the 16 system colours; ``cursor`` and ``reverse_cursor``
    fill palette slots 256 and 257.
    """

    name: str
    colors: tuple[str, ...]
    cursor: str
    reverse_cursor: str
    fg: int = 7
    bg: int = 0
    cs: int = CURSOR_COLOR
    rcs: int = REVERSE_CURSOR_COLOR

    def color_name(self, index: int) -> str | None:
        """Return the configured name for a palette slot, or None if unnamed."""
        if not 0 <= index < PALETTE_SIZE:
            raise IndexError(f"palette index {index} out of range")
        if index < len(self.colors):
            return self.colors[index]
        if index == CURSOR_COLOR:
            return self.cursor
        if index == REVERSE_CURSOR_COLOR:
            return self.reverse_cursor
        return None


SCHEMES: tuple[ColorScheme, ...] = (
    ColorScheme(
        "st (dark)",
        ("black", "red3", "green3", "yellow3", "blue2", "magenta3", "cyan3",
         "gray90", "gray50", "red", "green", "yellow", "#5c5cff", "magenta",
         "cyan", "white"),
        "#cccccc", "#555555", 7, 0,
    ),
    ColorScheme(
        "Alacritty (dark)",
        ("#1d1f21", "#cc6666", "#b5bd68", "#f0c674", "#81a2be", "#b294bb",
         "#8abeb7", "#c5c8c6", "#666666", "#d54e53", "#b9ca4a", "#e7c547",
         "#7aa6da", "#c397d8", "#70c0b1", "#eaeaea"),
        "#cccccc", "#555555", 7, 0,
    ),
    ColorScheme(
        "One Half dark",
        ("#282c34", "#e06c75", "#98c379", "#e5c07b", "#61afef", "#c678dd",
         "#56b6c2", "#dcdfe4", "#282c34", "#e06c75", "#98c379", "#e5c07b",
         "#61afef", "#c678dd", "#56b6c2", "#dcdfe4"),
        "#cccccc", "#555555", 7, 0,
    ),
    ColorScheme(
        "One Half light",
        ("#fafafa", "#e45649", "#50a14f", "#c18401", "#0184bc", "#a626a4",
         "#0997b3", "#383a42", "#fafafa", "#e45649", "#50a14f", "#c18401",
         "#0184bc", "#a626a4", "#0997b3", "#383a42"),
        "#cccccc", "#555555", 7, 0,
    ),
    ColorScheme(
        "Solarized dark",
        ("#073642", "#dc322f", "#859900", "#b58900", "#268bd2", "#d33682",
         "#2aa198", "#eee8d5", "#002b36", "#cb4b16", "#586e75", "#657b83",
         "#839496", "#6c71c4", "#93a1a1", "#fdf6e3"),
        "#93a1a1", "#fdf6e3", 12, 8,
    ),
    ColorScheme(
        "Solarized light",
        ("#eee8d5", "#dc322f", "#859900", "#b58900", "#268bd2", "#d33682",
         "#2aa198", "#073642", "#fdf6e3", "#cb4b16", "#93a1a1", "#839496",
         "#657b83", "#6c71c4", "#586e75", "#002b36"),
        "#586e75", "#002b36", 12, 8,
    ),
    ColorScheme(
        "Gruvbox dark",
        ("#282828", "#cc241d", "#98971a", "#d79921", "#458588", "#b16286",
         "#689d6a", "#a89984", "#928374", "#fb4934", "#b8bb26", "#fabd2f",
         "#83a598", "#d3869b", "#8ec07c", "#ebdbb2"),
        "#ebdbb2", "#555555", 15, 0,
    ),
    ColorScheme(
        "Gruvbox light",
        ("#fbf1c7", "#cc241d", "#98971a", "#d79921", "#458588", "#b16286",
         "#689d6a", "#7c6f64", "#928374", "#9d0006", "#79740e", "#b57614",
         "#076678", "#8f3f71", "#427b58", "#3c3836"),
        "#3c3836", "#555555", 15, 0,
    ),
)

DEFAULT_SCHEME = 6


def sixd_to_16bit(x: int) -> int:
    """Map a colour-cube coordinate (0-5) to a 16-bit channel value."""
    return 0 if x == 0 else 0x3737 + 0x2828 * x


def palette_rgb16(index: int) -> tuple[int, int, int]:
    """Return the 16-bit RGB of a computed palette entry (16-255).

    Entries 16-231 form the xterm 6x6x6 cube, 232-255 a grey ramp.
    """
    if not _CUBE_START <= index <= _GREY_END:
        raise ValueError(f"palette index {index} is not a computed colour")
    if index < _CUBE_END:
        offset = index - _CUBE_START
        return (
            sixd_to_16bit((offset // 36) % 6),
            sixd_to_16bit((offset // 6) % 6),
            sixd_to_16bit(offset % 6),
        )
    grey = 0x0808 + 0x0A0A * (index - _CUBE_END)
    return (grey, grey, grey)


def truecolor_rgb16(value: int) -> tuple[int, int, int]:
    """Expand a 24-bit 0xRRGGBB value into 16-bit channels."""
    return (
        (value & 0xFF0000) >> 8,
        value & 0xFF00,
        (value & 0xFF) << 8,
    )


class SchemeSelector:
    """Tracks the active colour scheme and cycles through the available ones."""

    def __init__(self, index: int = DEFAULT_SCHEME) -> None:
        if not 0 <= index < len(SCHEMES):
            raise ValueError(f"no colour scheme {index}")
        self.index = index

    @property
    def scheme(self) -> ColorScheme:
        return SCHEMES[self.index]

    def next(self, step: int) -> ColorScheme:
        """Move by ``step`` schemes, wrapping past either end, and return it."""
        index = self.index + step
        if index >= len(SCHEMES):
            index = 0
        elif index < 0:
            index = len(SCHEMES) - 1
        self.index = index
        return self.scheme

    def select(self, index: int) -> bool:
        """Switch to scheme ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(SCHEMES):
            self.index = index
            return True
        return False