"""Command-line options of the terminal."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field

VERSION = "0.9.3"
DEFAULT_TITLE = "st"
DEFAULT_COLS = 80
DEFAULT_ROWS = 24

NO_VALUE = 0x0000
X_VALUE = 0x0001
Y_VALUE = 0x0002
WIDTH_VALUE = 0x0004
HEIGHT_VALUE = 0x0008
X_NEGATIVE = 0x0010
Y_NEGATIVE = 0x0020

NORTH_WEST = 1
NORTH_EAST = 3
SOUTH_WEST = 7
SOUTH_EAST = 9

_GEOMETRY = re.compile(
    r"(?P<width>\d+)?"
    r"(?:[xX](?P<height>[+-]?\d+))?"
    r"(?:(?P<xsign>[+-])(?P<x>\d+)"
    r"(?:(?P<ysign>[+-])(?P<y>\d+))?)?"
)

_VALUE_FLAGS = frozenset("cfgolntTw")


class UsageError(Exception):
    """Raised when the command line cannot be understood."""


@dataclass(frozen=True)
class Geometry:
    """A parsed ``[=][W{xX}H][{+-}X{+-}Y]`` window geometry."""

    width: int | None = None
    height: int | None = None
    x: int | None = None
    y: int | None = None
    x_negative: bool = False
    y_negative: bool = False

    @property
    def mask(self) -> int:
        bits = NO_VALUE
        if self.width is not None:
            bits |= WIDTH_VALUE
        if self.height is not None:
            bits |= HEIGHT_VALUE
        if self.x is not None:
            bits |= X_VALUE
        if self.y is not None:
            bits |= Y_VALUE
        if self.x_negative:
            bits |= X_NEGATIVE
        if self.y_negative:
            bits |= Y_NEGATIVE
        return bits

    @property
    def has_position(self) -> bool:
        return bool(self.mask & (X_VALUE | Y_VALUE))


@dataclass
class Options:
    """Settings gathered from the command line."""

    allow_alt_screen: bool = True
    class_name: str | None = None
    font: str | None = None
    geometry: Geometry = field(default_factory=Geometry)
    cols: int = DEFAULT_COLS
    rows: int = DEFAULT_ROWS
    fixed: bool = False
    io: str | None = None
    line: str | None = None
    name: str | None = None
    title: str | None = None
    embed: str | None = None
    command: list[str] = field(default_factory=list)
    show_version: bool = False


def parse_geometry(spec: str) -> Geometry:
    """Parse a geometry string; a malformed one yields an empty Geometry."""
    text = spec[1:] if spec.startswith("=") else spec
    if text.startswith("X"):
        return Geometry()
    found = _GEOMETRY.fullmatch(text)
    if found is None:
        return Geometry()
    width = found["width"]
    height = found["height"]
    x = y = None
    x_negative = y_negative = False
    if found["x"] is not None:
        x_negative = found["xsign"] == "-"
        x = -int(found["x"]) if x_negative else int(found["x"])
    if found["y"] is not None:
        y_negative = found["ysign"] == "-"
        y = -int(found["y"]) if y_negative else int(found["y"])
    return Geometry(
        width=int(width) if width is not None else None,
        height=int(height) if height is not None else None,
        x=x,
        y=y,
        x_negative=x_negative,
        y_negative=y_negative,
    )


def gravity_for(geometry: Geometry) -> int:
    """Return the window gravity implied by the signs of the offsets."""
    if geometry.x_negative and geometry.y_negative:
        return SOUTH_EAST
    if geometry.x_negative:
        return NORTH_EAST
    if geometry.y_negative:
        return SOUTH_WEST
    return NORTH_WEST


def usage(prog: str) -> str:
    """Return the usage text for program name ``prog``."""
    return (
        f"usage: {prog} [-aiv] [-c class] [-f font] [-g geometry]"
        " [-n name] [-o file]\n"
        "          [-T title] [-t title] [-w windowid]"
        " [[-e] command [args ...]]\n"
        f"       {prog} [-aiv] [-c class] [-f font] [-g geometry]"
        " [-n name] [-o file]\n"
        "          [-T title] [-t title] [-w windowid] -l line"
        " [stty_args ...]\n"
    )


def _apply_value(opts: Options, flag: str, value: str) -> None:
    if flag == "c":
        opts.class_name = value
    elif flag == "f":
        opts.font = value
    elif flag == "g":
        geometry = parse_geometry(value)
        opts.geometry = geometry
        if geometry.width is not None:
            opts.cols = geometry.width
        if geometry.height is not None:
            opts.rows = geometry.height
    elif flag == "o":
        opts.io = value
    elif flag == "l":
        opts.line = value
    elif flag == "n":
        opts.name = value
    elif flag in "tT":
        opts.title = value
    elif flag == "w":
        opts.embed = value


def parse_args(argv: list[str] | None = None) -> Options:
    """Parse a full argument vector, program name first."""
    args = list(sys.argv if argv is None else argv)
    prog = args[0] if args else DEFAULT_TITLE
    rest = args[1:]
    opts = Options()

    index = 0
    while index < len(rest):
        arg = rest[index]
        if not arg.startswith("-") or arg == "-":
            break
        if arg == "--":
            index += 1
            break
        run_command = False
        for pos, flag in enumerate(arg[1:], start=1):
            if flag in _VALUE_FLAGS:
                tail = arg[pos + 1:]
                if tail:
                    value = tail
                elif index + 1 < len(rest):
                    index += 1
                    value = rest[index]
                else:
                    raise UsageError(usage(prog))
                _apply_value(opts, flag, value)
                break
            if flag == "a":
                opts.allow_alt_screen = False
            elif flag == "i":
                opts.fixed = True
            elif flag == "v":
                opts.show_version = True
                return opts
            elif flag == "e":
                run_command = True
                break
            else:
                raise UsageError(usage(prog))
        index += 1
        if run_command:
            break

    opts.command = rest[index:]
    if opts.title is None:
        if opts.line is not None or not opts.command:
            opts.title = DEFAULT_TITLE
        else:
            opts.title = opts.command[0]
    opts.cols = max(opts.cols, 1)
    opts.rows = max(opts.rows, 1)
    return opts