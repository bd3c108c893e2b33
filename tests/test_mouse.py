import re

import pytest

from termdesk.keys import ALT, CONTROL, SHIFT
from termdesk.modes import WinMode
from termdesk.mouse import (
    BUTTON1_MASK,
    BUTTON5_MASK,
    EventType,
    MouseEvent,
    MouseReporter,
    buttonmask,
)

SGR = WinMode.MOUSEBTN | WinMode.MOUSESGR
_SGR_RE = re.compile(r"\033\[<(\d+);(\d+);(\d+)([mM])")


def _sgr(data):
    found = _SGR_RE.fullmatch(data.decode("ascii"))
    assert found is not None
    return int(found[1]), int(found[2]), int(found[3]), found[4]


def test_buttonmask_known_and_unknown():
    assert buttonmask(1) == BUTTON1_MASK
    assert buttonmask(5) == BUTTON5_MASK
    assert buttonmask(6) == 0


def test_sgr_press_left_button_at_origin():
    reporter = MouseReporter()
    assert reporter.report(MouseEvent(EventType.PRESS, 0, 0, 1), SGR) == b"\033[<0;1;1M"


def test_sgr_release_differs_only_in_final_letter():
    reporter = MouseReporter()
    pressed = _sgr(reporter.report(MouseEvent(EventType.PRESS, 4, 2, 1), SGR))
    released = _sgr(reporter.report(MouseEvent(EventType.RELEASE, 4, 2, 1), SGR))
    assert pressed[:3] == released[:3]
    assert (pressed[3], released[3]) == ("M", "m")


def test_sgr_coordinates_are_one_based():
    reporter = MouseReporter()
    _, col, row, _ = _sgr(reporter.report(MouseEvent(EventType.PRESS, 9, 4, 1), SGR))
    assert (col, row) == (10, 5)


@pytest.mark.parametrize("state, extra", [(SHIFT, 4), (ALT, 8), (CONTROL, 16)])
def test_modifiers_add_to_code(state, extra):
    plain = _sgr(MouseReporter().report(MouseEvent(EventType.PRESS, 1, 1, 2), SGR))[0]
    modded = _sgr(MouseReporter().report(MouseEvent(EventType.PRESS, 1, 1, 2, state), SGR))[0]
    assert modded - plain == extra


def test_x10_ignores_modifiers_and_releases():
    mode = WinMode.MOUSEX10
    plain = MouseReporter().report(MouseEvent(EventType.PRESS, 1, 1, 1), mode)
    shifted = MouseReporter().report(MouseEvent(EventType.PRESS, 1, 1, 1, SHIFT), mode)
    assert plain == shifted
    assert MouseReporter().report(MouseEvent(EventType.RELEASE, 1, 1, 1), mode) is None


def test_legacy_encoding_offsets_by_32():
    data = MouseReporter().report(MouseEvent(EventType.PRESS, 3, 7, 1), WinMode.MOUSEBTN)
    assert data[:3] == b"\033[M"
    assert data[3] - 32 == 0
    assert (data[4] - 32, data[5] - 32) == (4, 8)


def test_legacy_release_encodes_as_three():
    data = MouseReporter().report(MouseEvent(EventType.RELEASE, 0, 0, 2), WinMode.MOUSEBTN)
    assert data[3] - 32 == 3


def test_legacy_beyond_limit_is_dropped():
    reporter = MouseReporter()
    assert reporter.report(MouseEvent(EventType.PRESS, 300, 0, 1), WinMode.MOUSEBTN) is None


def test_wheel_release_and_unencodable_button_dropped():
    reporter = MouseReporter()
    assert reporter.report(MouseEvent(EventType.RELEASE, 1, 1, 4), SGR) is None
    assert reporter.report(MouseEvent(EventType.PRESS, 1, 1, 12), SGR) is None


def test_wheel_press_uses_64_range():
    code = _sgr(MouseReporter().report(MouseEvent(EventType.PRESS, 0, 0, 4), SGR))[0]
    assert code == 64


def test_motion_requires_motion_mode():
    reporter = MouseReporter()
    assert reporter.report(MouseEvent(EventType.MOTION, 2, 2), SGR) is None


def test_motion_mode_needs_pressed_button():
    reporter = MouseReporter()
    mode = WinMode.MOUSEMOTION | WinMode.MOUSESGR
    assert reporter.report(MouseEvent(EventType.MOTION, 2, 2), mode) is None
    reporter.press(1)
    code = _sgr(reporter.report(MouseEvent(EventType.MOTION, 3, 2), mode))[0]
    assert code == 32


def test_motion_same_cell_is_not_repeated():
    reporter = MouseReporter()
    mode = WinMode.MOUSEMANY | WinMode.MOUSESGR
    first = reporter.report(MouseEvent(EventType.MOTION, 5, 5), mode)
    assert first is not None and _sgr(first)[3] == "M"
    assert reporter.report(MouseEvent(EventType.MOTION, 5, 5), mode) is None


def test_many_motion_without_buttons_encodes_release():
    reporter = MouseReporter()
    mode = WinMode.MOUSEMANY | WinMode.MOUSESGR
    code = _sgr(reporter.report(MouseEvent(EventType.MOTION, 1, 2), mode))[0]
    assert code == 32 + 3


def test_press_and_release_track_buttons():
    reporter = MouseReporter()
    reporter.press(3)
    reporter.press(1)
    reporter.press(20)
    assert reporter.buttons == (1 << 0) | (1 << 2)
    reporter.release(1)
    assert reporter.buttons == 1 << 2