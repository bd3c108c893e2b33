import pytest

from termdesk.modes import Completion, WinMode, set_mode


def test_mouse_is_union_of_mouse_modes():
    expected = (
        WinMode.MOUSEBTN | WinMode.MOUSEMOTION | WinMode.MOUSEX10 | WinMode.MOUSEMANY
    )
    assert set_mode(WinMode(0), True, WinMode.MOUSE) == expected


def test_flag_values_fixed_by_source():
    assert int(set_mode(WinMode(0), True, WinMode.VISIBLE)) == 1 << 0
    assert int(set_mode(WinMode(0), True, WinMode.NUMLOCK)) == 1 << 17
    assert int(set_mode(WinMode(0), True, WinMode.REVERSE)) == 1 << 5


def test_flags_are_distinct_bits():
    singles = [m for m in WinMode if m is not WinMode.MOUSE]
    combined = WinMode(0)
    for flag in singles:
        assert combined & flag == 0
        combined = set_mode(combined, True, flag)
    assert int(combined) == sum(int(flag) for flag in singles)


def test_set_mode_on():
    result = set_mode(WinMode.VISIBLE, True, WinMode.FOCUSED)
    assert result == WinMode.VISIBLE | WinMode.FOCUSED


def test_set_mode_off():
    result = set_mode(WinMode.VISIBLE | WinMode.FOCUSED, False, WinMode.FOCUSED)
    assert result == WinMode.VISIBLE


@pytest.mark.parametrize("flag", [WinMode.BLINK, WinMode.MOUSE, WinMode.NUMLOCK])
def test_set_mode_round_trip(flag):
    start = WinMode.VISIBLE | WinMode.HIDE
    assert set_mode(set_mode(start, True, flag), False, flag) == start


def test_set_mode_off_multiple_bits():
    start = WinMode.MOUSE | WinMode.FOCUS
    assert set_mode(start, False, WinMode.MOUSE) == WinMode.FOCUS


def test_completion_order():
    names = [Completion(i).name for i in range(9)]
    assert names == [
        "DEACTIVATE", "WORD", "WWORD", "FUZZY_WORD", "FUZZY_WWORD",
        "FUZZY", "SUFFIX", "SURROUND", "UNDO",
    ]
    assert Completion(0) is Completion.DEACTIVATE