"""Mouse button tracking and the escape sequences that report mouse events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from termdesk.keys import ALT, CONTROL, SHIFT
from termdesk.modes import WinMode

BUTTON1_MASK = 1 << 8
BUTTON2_MASK = 1 << 9
BUTTON3_MASK = 1 << 10
BUTTON4_MASK = 1 << 11
BUTTON5_MASK = 1 << 12

_BUTTON_MASKS = {
    1: BUTTON1_MASK,
    2: BUTTON2_MASK,
    3: BUTTON3_MASK,
    4: BUTTON4_MASK,
    5: BUTTON5_MASK,
}

_MAX_BUTTON = 11
_NO_BUTTON = 12
_X10_LIMIT = 223


class EventType(Enum):
    """Kinds of pointer events that can be reported."""

    PRESS = "press"
    RELEASE = "release"
    MOTION = "motion"


@dataclass(frozen=True)
class MouseEvent:
    """A pointer event at cell ``(col, row)`` with modifier ``state``."""

    type: EventType
    col: int
    row: int
    button: int = 0
    state: int = 0


def buttonmask(button: int) -> int:
    """Return the state mask bit belonging to pointer button ``button``."""
    return _BUTTON_MASKS.get(button, 0)


class MouseReporter:
    """Keeps the set of pressed buttons and encodes events for the tty."""

    def __init__(self) -> None:
        self.buttons = 0
        self._last = (0, 0)

    def press(self, button: int) -> None:
        """Remember that ``button`` is held down."""
        if 1 <= button <= _MAX_BUTTON:
            self.buttons |= 1 << (button - 1)

    def release(self, button: int) -> None:
        """Forget that ``button`` is held down."""
        if 1 <= button <= _MAX_BUTTON:
            self.buttons &= ~(1 << (button - 1))

    def _lowest_pressed(self) -> int:
        return next(
            (btn for btn in range(1, _MAX_BUTTON + 1) if self.buttons & (1 << (btn - 1))),
            _NO_BUTTON,
        )

    def report(self, event: MouseEvent, mode: int) -> bytes | None:
        """Return the bytes reporting ``event`` under window ``mode``, or None."""
        mode = WinMode(int(mode))
        x, y = event.col, event.row
        releasing = event.type is EventType.RELEASE

        if event.type is EventType.MOTION:
            if (x, y) == self._last:
                return None
            if WinMode.MOUSEMOTION not in mode and WinMode.MOUSEMANY not in mode:
                return None
            if WinMode.MOUSEMOTION in mode and self.buttons == 0:
                return None
            btn = self._lowest_pressed()
            code = 32
        else:
            btn = event.button
            if not 1 <= btn <= _MAX_BUTTON:
                return None
            if releasing:
                if WinMode.MOUSEX10 in mode:
                    return None
                if btn in (4, 5):
                    return None
            code = 0

        self._last = (x, y)

        sgr = WinMode.MOUSESGR in mode
        if (not sgr and releasing) or btn == _NO_BUTTON:
            code += 3
        elif btn >= 8:
            code += 128 + btn - 8
        elif btn >= 4:
            code += 64 + btn - 4
        else:
            code += btn - 1

        if WinMode.MOUSEX10 not in mode:
            state = event.state
            code += (4 if state & SHIFT else 0) + (8 if state & ALT else 0) + (
                16 if state & CONTROL else 0
            )

        if sgr:
            final = "m" if releasing else "M"
            return f"\033[<{code};{x + 1};{y + 1}{final}".encode("ascii")
        if x < _X10_LIMIT and y < _X10_LIMIT:
            return b"\033[M" + bytes((32 + code, 32 + x + 1, 32 + y + 1))
        return None