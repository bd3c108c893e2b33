"""Keyboard tables: shortcuts and the escape sequences sent for special keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

from termdesk.modes import Completion, WinMode


class Modifier(IntFlag):
    """X11 modifier state bits."""

    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    MOD2 = 1 << 4
    MOD3 = 1 << 5
    MOD4 = 1 << 6
    MOD5 = 1 << 7
    SWITCH = (1 << 13) | (1 << 14)


ANY_MOD = 0xFFFFFFFF
NO_MOD = 0

SHIFT = int(Modifier.SHIFT)
CONTROL = int(Modifier.CONTROL)
ALT = int(Modifier.MOD1)
MOD3 = int(Modifier.MOD3)
SUPER = int(Modifier.MOD4)
TERMMOD = CONTROL | SHIFT
COMPLETION_MOD = CONTROL | ALT

# State bits ignored when matching: num lock and the keyboard layout switch.
IGNORE_MOD = int(Modifier.MOD2 | Modifier.SWITCH)

# Modifier that forces selection and shortcuts while the mouse is reported.
FORCE_MOUSE_MOD = SHIFT

# Keysyms outside the X11 function-key range that are still looked up.
MAPPED_KEYS: frozenset[int] = frozenset({0xFFFFFFFFFFFFFFFF})

_FUNCTION_KEY_START = 0xFD00

XK_BACKSPACE = 0xFF08
XK_RETURN = 0xFF0D
XK_ISO_LEFT_TAB = 0xFE20
XK_HOME = 0xFF50
XK_LEFT = 0xFF51
XK_UP = 0xFF52
XK_RIGHT = 0xFF53
XK_DOWN = 0xFF54
XK_PRIOR = 0xFF55
XK_PAGE_UP = XK_PRIOR
XK_NEXT = 0xFF56
XK_PAGE_DOWN = XK_NEXT
XK_END = 0xFF57
XK_PRINT = 0xFF61
XK_INSERT = 0xFF63
XK_BREAK = 0xFF6B
XK_NUM_LOCK = 0xFF7F
XK_KP_ENTER = 0xFF8D
XK_KP_HOME = 0xFF95
XK_KP_LEFT = 0xFF96
XK_KP_UP = 0xFF97
XK_KP_RIGHT = 0xFF98
XK_KP_DOWN = 0xFF99
XK_KP_PRIOR = 0xFF9A
XK_KP_NEXT = 0xFF9B
XK_KP_END = 0xFF9C
XK_KP_BEGIN = 0xFF9D
XK_KP_INSERT = 0xFF9E
XK_KP_DELETE = 0xFF9F
XK_KP_MULTIPLY = 0xFFAA
XK_KP_ADD = 0xFFAB
XK_KP_SUBTRACT = 0xFFAD
XK_KP_DECIMAL = 0xFFAE
XK_KP_DIVIDE = 0xFFAF
XK_KP_0 = 0xFFB0
XK_F1 = 0xFFBE
XK_DELETE = 0xFFFF

XK_APOSTROPHE = 0x27
XK_COMMA = 0x2C
XK_PERIOD = 0x2E
XK_SLASH = 0x2F
XK_0 = 0x30
XK_SEMICOLON = 0x3B
XK_EQUAL = 0x3D
XK_C = 0x43
XK_V = 0x56
XK_Y = 0x59
XK_BRACKETLEFT = 0x5B
XK_BRACKETRIGHT = 0x5D
XK_v = 0x76


def function_key(number: int) -> int:
    """Return the keysym of function key F``number`` (1-35)."""
    if not 1 <= number <= 35:
        raise ValueError(f"no function key F{number}")
    return XK_F1 + number - 1


def keypad_digit(digit: int) -> int:
    """Return the keysym of keypad digit ``digit``."""
    if not 0 <= digit <= 9:
        raise ValueError(f"no keypad digit {digit}")
    return XK_KP_0 + digit


@dataclass(frozen=True)
class Key:
    """A special key and the string it sends.

    ``appkey`` and ``appcursor`` are three-valued: 0 indifferent, positive
    when the keypad/cursor application mode must be on, negative when off.
    An ``appkey`` of 2 also requires num lock to be off.
    """

    keysym: int
    mask: int
    string: str
    appkey: int = 0
    appcursor: int = 0


@dataclass(frozen=True)
class Shortcut:
    """A keyboard shortcut bound to a named terminal action."""

    mod: int
    keysym: int
    action: str
    argument: int | float = 0


SHORTCUTS: tuple[Shortcut, ...] = (
    Shortcut(ANY_MOD, XK_BREAK, "sendbreak", 0),
    Shortcut(CONTROL, XK_PRINT, "toggleprinter", 0),
    Shortcut(SHIFT, XK_PRINT, "printscreen", 0),
    Shortcut(ANY_MOD, XK_PRINT, "printsel", 0),
    Shortcut(TERMMOD, XK_PRIOR, "zoom", 1.0),
    Shortcut(TERMMOD, XK_NEXT, "zoom", -1.0),
    Shortcut(TERMMOD, XK_HOME, "zoomreset", 0.0),
    Shortcut(TERMMOD, XK_C, "clipcopy", 0),
    Shortcut(TERMMOD, XK_V, "clippaste", 0),
    Shortcut(TERMMOD, XK_Y, "selpaste", 0),
    Shortcut(SHIFT, XK_INSERT, "selpaste", 0),
    Shortcut(TERMMOD, XK_NUM_LOCK, "numlock", 0),
    Shortcut(SHIFT, XK_PAGE_UP, "kscrollup", -1),
    Shortcut(SHIFT, XK_PAGE_DOWN, "kscrolldown", -1),
    Shortcut(ALT, XK_v, "selectscheme", 0),
    *(Shortcut(ALT, XK_0 + digit, "selectscheme", digit - 1) for digit in range(2, 10)),
    Shortcut(SUPER, XK_0, "nextscheme", 1),
    Shortcut(ALT | CONTROL, XK_0, "nextscheme", -1),
    Shortcut(COMPLETION_MOD, XK_SLASH, "autocomplete", Completion.WORD),
    Shortcut(COMPLETION_MOD, XK_PERIOD, "autocomplete", Completion.FUZZY_WORD),
    Shortcut(COMPLETION_MOD, XK_COMMA, "autocomplete", Completion.FUZZY),
    Shortcut(COMPLETION_MOD, XK_APOSTROPHE, "autocomplete", Completion.SUFFIX),
    Shortcut(COMPLETION_MOD, XK_SEMICOLON, "autocomplete", Completion.SURROUND),
    Shortcut(COMPLETION_MOD, XK_BRACKETRIGHT, "autocomplete", Completion.WWORD),
    Shortcut(COMPLETION_MOD, XK_BRACKETLEFT, "autocomplete", Completion.FUZZY_WWORD),
    Shortcut(COMPLETION_MOD, XK_EQUAL, "autocomplete", Completion.UNDO),
)


_ARROW_MODIFIERS = (
    (SHIFT, 2),
    (ALT, 3),
    (SHIFT | ALT, 4),
    (CONTROL, 5),
    (SHIFT | CONTROL, 6),
    (CONTROL | ALT, 7),
    (SHIFT | CONTROL | ALT, 8),
)


def _arrow(keysym: int, final: str) -> list[Key]:
    keys = [Key(keysym, mask, f"\033[1;{code}{final}") for mask, code in _ARROW_MODIFIERS]
    keys.append(Key(keysym, ANY_MOD, f"\033[{final}", 0, -1))
    keys.append(Key(keysym, ANY_MOD, f"\033O{final}", 0, +1))
    return keys


def _function(keysym: int, plain: str, prefix: str, suffix: str, with_mod3: bool) -> list[Key]:
    mods = [(SHIFT, 2), (CONTROL, 5), (SUPER, 6), (ALT, 3)]
    if with_mod3:
        mods.append((MOD3, 4))
    keys = [Key(keysym, NO_MOD, plain)]
    keys.extend(Key(keysym, mask, f"{prefix};{code}{suffix}") for mask, code in mods)
    return keys


_KEYPAD = [
    Key(XK_KP_HOME, SHIFT, "\033[2J", 0, -1),
    Key(XK_KP_HOME, SHIFT, "\033[1;2H", 0, +1),
    Key(XK_KP_HOME, ANY_MOD, "\033[H", 0, -1),
    Key(XK_KP_HOME, ANY_MOD, "\033[1~", 0, +1),
    Key(XK_KP_UP, ANY_MOD, "\033Ox", +1, 0),
    Key(XK_KP_UP, ANY_MOD, "\033[A", 0, -1),
    Key(XK_KP_UP, ANY_MOD, "\033OA", 0, +1),
    Key(XK_KP_DOWN, ANY_MOD, "\033Or", +1, 0),
    Key(XK_KP_DOWN, ANY_MOD, "\033[B", 0, -1),
    Key(XK_KP_DOWN, ANY_MOD, "\033OB", 0, +1),
    Key(XK_KP_LEFT, ANY_MOD, "\033Ot", +1, 0),
    Key(XK_KP_LEFT, ANY_MOD, "\033[D", 0, -1),
    Key(XK_KP_LEFT, ANY_MOD, "\033OD", 0, +1),
    Key(XK_KP_RIGHT, ANY_MOD, "\033Ov", +1, 0),
    Key(XK_KP_RIGHT, ANY_MOD, "\033[C", 0, -1),
    Key(XK_KP_RIGHT, ANY_MOD, "\033OC", 0, +1),
    Key(XK_KP_PRIOR, SHIFT, "\033[5;2~", 0, 0),
    Key(XK_KP_PRIOR, ANY_MOD, "\033[5~", 0, 0),
    Key(XK_KP_BEGIN, ANY_MOD, "\033[E", 0, 0),
    Key(XK_KP_END, CONTROL, "\033[J", -1, 0),
    Key(XK_KP_END, CONTROL, "\033[1;5F", +1, 0),
    Key(XK_KP_END, SHIFT, "\033[K", -1, 0),
    Key(XK_KP_END, SHIFT, "\033[1;2F", +1, 0),
    Key(XK_KP_END, ANY_MOD, "\033[4~", 0, 0),
    Key(XK_KP_NEXT, SHIFT, "\033[6;2~", 0, 0),
    Key(XK_KP_NEXT, ANY_MOD, "\033[6~", 0, 0),
    Key(XK_KP_INSERT, SHIFT, "\033[2;2~", +1, 0),
    Key(XK_KP_INSERT, SHIFT, "\033[4l", -1, 0),
    Key(XK_KP_INSERT, CONTROL, "\033[L", -1, 0),
    Key(XK_KP_INSERT, CONTROL, "\033[2;5~", +1, 0),
    Key(XK_KP_INSERT, ANY_MOD, "\033[4h", -1, 0),
    Key(XK_KP_INSERT, ANY_MOD, "\033[2~", +1, 0),
    Key(XK_KP_DELETE, CONTROL, "\033[M", -1, 0),
    Key(XK_KP_DELETE, CONTROL, "\033[3;5~", +1, 0),
    Key(XK_KP_DELETE, SHIFT, "\033[2K", -1, 0),
    Key(XK_KP_DELETE, SHIFT, "\033[3;2~", +1, 0),
    Key(XK_KP_DELETE, ANY_MOD, "\033[P", -1, 0),
    Key(XK_KP_DELETE, ANY_MOD, "\033[3~", +1, 0),
    Key(XK_KP_MULTIPLY, ANY_MOD, "\033Oj", +2, 0),
    Key(XK_KP_ADD, ANY_MOD, "\033Ok", +2, 0),
    Key(XK_KP_ENTER, ANY_MOD, "\033OM", +2, 0),
    Key(XK_KP_ENTER, ANY_MOD, "\r", -1, 0),
    Key(XK_KP_SUBTRACT, ANY_MOD, "\033Om", +2, 0),
    Key(XK_KP_DECIMAL, ANY_MOD, "\033On", +2, 0),
    Key(XK_KP_DIVIDE, ANY_MOD, "\033Oo", +2, 0),
    *(Key(keypad_digit(d), ANY_MOD, f"\033O{chr(ord('p') + d)}", +2, 0) for d in range(10)),
]

_EDITING = [
    Key(XK_ISO_LEFT_TAB, SHIFT, "\033[Z", 0, 0),
    Key(XK_RETURN, ALT, "\033\r", 0, 0),
    Key(XK_RETURN, ANY_MOD, "\r", 0, 0),
    Key(XK_INSERT, SHIFT, "\033[4l", -1, 0),
    Key(XK_INSERT, SHIFT, "\033[2;2~", +1, 0),
    Key(XK_INSERT, CONTROL, "\033[L", -1, 0),
    Key(XK_INSERT, CONTROL, "\033[2;5~", +1, 0),
    Key(XK_INSERT, ANY_MOD, "\033[4h", -1, 0),
    Key(XK_INSERT, ANY_MOD, "\033[2~", +1, 0),
    Key(XK_DELETE, CONTROL, "\033[M", -1, 0),
    Key(XK_DELETE, CONTROL, "\033[3;5~", +1, 0),
    Key(XK_DELETE, SHIFT, "\033[2K", -1, 0),
    Key(XK_DELETE, SHIFT, "\033[3;2~", +1, 0),
    Key(XK_DELETE, ANY_MOD, "\033[P", -1, 0),
    Key(XK_DELETE, ANY_MOD, "\033[3~", +1, 0),
    Key(XK_BACKSPACE, NO_MOD, "\177", 0, 0),
    Key(XK_BACKSPACE, ALT, "\033\177", 0, 0),
    Key(XK_HOME, SHIFT, "\033[2J", 0, -1),
    Key(XK_HOME, SHIFT, "\033[1;2H", 0, +1),
    Key(XK_HOME, ANY_MOD, "\033[H", 0, -1),
    Key(XK_HOME, ANY_MOD, "\033[1~", 0, +1),
    Key(XK_END, CONTROL, "\033[J", -1, 0),
    Key(XK_END, CONTROL, "\033[1;5F", +1, 0),
    Key(XK_END, SHIFT, "\033[K", -1, 0),
    Key(XK_END, SHIFT, "\033[1;2F", +1, 0),
    Key(XK_END, ANY_MOD, "\033[4~", 0, 0),
    Key(XK_PRIOR, CONTROL, "\033[5;5~", 0, 0),
    Key(XK_PRIOR, SHIFT, "\033[5;2~", 0, 0),
    Key(XK_PRIOR, ANY_MOD, "\033[5~", 0, 0),
    Key(XK_NEXT, CONTROL, "\033[6;5~", 0, 0),
    Key(XK_NEXT, SHIFT, "\033[6;2~", 0, 0),
    Key(XK_NEXT, ANY_MOD, "\033[6~", 0, 0),
]

_F1_TO_F4 = [("P", True), ("Q", True), ("R", True), ("S", False)]
_F5_TO_F12 = ["15", "17", "18", "19", "20", "21", "23", "24"]

_FUNCTION_KEYS: list[Key] = []
for _number, (_final, _mod3) in enumerate(_F1_TO_F4, start=1):
    _FUNCTION_KEYS += _function(function_key(_number), f"\033O{_final}", "\033[1", _final, _mod3)
for _number, _code in enumerate(_F5_TO_F12, start=5):
    _FUNCTION_KEYS += _function(function_key(_number), f"\033[{_code}~", f"\033[{_code}", "~", False)

# F13-F24 repeat F1-F12 with Shift, F25-F35 with Control.
_SHIFTED_FINALS = ["1;{m}P", "1;{m}Q", "1;{m}R", "1;{m}S"] + [f"{c};{{m}}~" for c in _F5_TO_F12]
for _offset, _template in enumerate(_SHIFTED_FINALS):
    _FUNCTION_KEYS.append(Key(function_key(13 + _offset), NO_MOD, "\033[" + _template.format(m=2)))
for _offset, _template in enumerate(_SHIFTED_FINALS[:11]):
    _FUNCTION_KEYS.append(Key(function_key(25 + _offset), NO_MOD, "\033[" + _template.format(m=5)))

KEYS: tuple[Key, ...] = tuple(
    _KEYPAD
    + _arrow(XK_UP, "A")
    + _arrow(XK_DOWN, "B")
    + _arrow(XK_LEFT, "D")
    + _arrow(XK_RIGHT, "C")
    + _EDITING
    + _FUNCTION_KEYS
)


def match(mask: int, state: int) -> bool:
    """Tell whether modifier ``mask`` accepts event ``state``."""
    return mask == ANY_MOD or mask == (int(state) & ~IGNORE_MOD)


def kmap(keysym: int, state: int, mode: int) -> str | None:
    """Return the string a special key sends in window ``mode``, or None."""
    mode = WinMode(int(mode))
    if keysym not in MAPPED_KEYS and (keysym & 0xFFFF) < _FUNCTION_KEY_START:
        return None

    appkeypad = WinMode.APPKEYPAD in mode
    numlock = WinMode.NUMLOCK in mode
    appcursor = WinMode.APPCURSOR in mode
    for entry in KEYS:
        if entry.keysym != keysym or not match(entry.mask, state):
            continue
        if entry.appkey < 0 if appkeypad else entry.appkey > 0:
            continue
        if numlock and entry.appkey == 2:
            continue
        if entry.appcursor < 0 if appcursor else entry.appcursor > 0:
            continue
        return entry.string
    return None


def find_shortcut(keysym: int, state: int) -> Shortcut | None:
    """Return the first shortcut bound to ``keysym`` under ``state``."""
    return next(
        (s for s in SHORTCUTS if s.keysym == keysym and match(s.mod, state)),
        None,
    )