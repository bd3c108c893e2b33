"""Window mode flags and autocompletion actions."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class WinMode(IntFlag):
    """State flags of the terminal window."""

    VISIBLE = 1 << 0
    FOCUSED = 1 << 1
    APPKEYPAD = 1 << 2
    MOUSEBTN = 1 << 3
    MOUSEMOTION = 1 << 4
    REVERSE = 1 << 5
    KBDLOCK = 1 << 6
    HIDE = 1 << 7
    APPCURSOR = 1 << 8
    MOUSESGR = 1 << 9
    EIGHT_BIT = 1 << 10
    BLINK = 1 << 11
    FBLINK = 1 << 12
    FOCUS = 1 << 13
    MOUSEX10 = 1 << 14
    MOUSEMANY = 1 << 15
    BRCKTPASTE = 1 << 16
    NUMLOCK = 1 << 17
    MOUSE = MOUSEBTN | MOUSEMOTION | MOUSEX10 | MOUSEMANY


class Completion(IntEnum):
    """Autocompletion actions bound to keyboard shortcuts."""

    DEACTIVATE = 0
    WORD = 1
    WWORD = 2
    FUZZY_WORD = 3
    FUZZY_WWORD = 4
    FUZZY = 5
    SUFFIX = 6
    SURROUND = 7
    UNDO = 8


def set_mode(mode: int, enabled: bool, flags: int) -> WinMode:
    """Return ``mode`` with ``flags`` switched on or off."""
    if enabled:
        return WinMode(int(mode) | int(flags))
    return WinMode(int(mode) & ~int(flags))