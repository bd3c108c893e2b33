from unittest import mock

import pytest

from termdesk.status import (
    build_status,
    execscript,
    getbattery,
    gettemperature,
    loadavg,
    main,
    mktimes,
    readfile,
)


def _battery(tmp_path, **files):
    for name, content in files.items():
        (tmp_path / name).write_text(content)
    return tmp_path


def test_readfile_returns_first_line(tmp_path):
    (tmp_path / "value").write_text("first\nsecond\n")
    assert readfile(tmp_path, "value") == "first\n"


def test_readfile_missing_is_none(tmp_path):
    assert readfile(tmp_path, "absent") is None


def test_readfile_empty_is_none(tmp_path):
    (tmp_path / "empty").write_text("")
    assert readfile(tmp_path, "empty") is None


def test_mktimes_formats_hours_and_minutes():
    result = mktimes("%H:%M", "UTC")
    assert len(result) == 5
    hours, minutes = result.split(":")
    assert 0 <= int(hours) < 24
    assert 0 <= int(minutes) < 60


def test_mktimes_too_long_is_empty():
    assert mktimes("%Y" * 40, "UTC") == ""


def test_mktimes_unknown_zone_falls_back_to_utc():
    assert mktimes("%Z", "No/Such_Zone") == "UTC"


def test_loadavg_format():
    with mock.patch("termdesk.status.os.getloadavg", return_value=(0.5, 1.0, 1.5)):
        assert loadavg() == "0.50 1.00 1.50"


def test_loadavg_unavailable():
    with mock.patch("termdesk.status.os.getloadavg", side_effect=OSError):
        assert loadavg() == ""


def test_battery_missing_present_file(tmp_path):
    assert getbattery(tmp_path) == ""


def test_battery_not_present(tmp_path):
    assert getbattery(_battery(tmp_path, present="0\n")) == "not present"


def test_battery_discharging(tmp_path):
    base = _battery(tmp_path, present="1\n", charge_full_design="100\n",
                    charge_now="50\n", status="Discharging\n")
    assert getbattery(base) == "50%-"


def test_battery_energy_fallback_and_charging(tmp_path):
    base = _battery(tmp_path, present="1\n", energy_full_design="200\n",
                    energy_now="200\n", status="Charging\n")
    assert getbattery(base).endswith("%+")
    assert getbattery(base).startswith("100")


def test_battery_unknown_status(tmp_path):
    base = _battery(tmp_path, present="1\n", charge_full_design="10\n",
                    charge_now="10\n", status="Full\n")
    assert getbattery(base)[-1] == "?"


def test_battery_invalid_numbers(tmp_path):
    base = _battery(tmp_path, present="1\n", charge_full_design="junk\n",
                    charge_now="5\n", status="Full\n")
    assert getbattery(base) == "invalid"


def test_battery_missing_capacity(tmp_path):
    assert getbattery(_battery(tmp_path, present="1\n")) == ""


def test_temperature_in_degrees(tmp_path):
    (tmp_path / "temp").write_text("45000\n")
    assert gettemperature(tmp_path, "temp") == "45°C"


def test_temperature_missing_sensor(tmp_path):
    assert gettemperature(tmp_path, "temp") == ""


def test_temperature_is_zero_padded(tmp_path):
    (tmp_path / "temp").write_text("5000\n")
    assert gettemperature(tmp_path, "temp").startswith("05")


def test_execscript_first_line():
    assert execscript("echo hello; echo world") == "hello"


def test_execscript_no_output():
    assert execscript("true") == ""


def test_build_status_labels():
    assert build_status([("S", "a"), ("", "b"), ("L", "c")]) == "S:a b L:c"


@pytest.mark.parametrize("parts", [[], [("", "")]])
def test_build_status_empty(parts):
    assert build_status(parts) == ""


def test_main_once_prints_status(capsys):
    assert main(["--once"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("S:")
    assert " T:" in out


def test_main_without_display_fails():
    with mock.patch("termdesk.status.subprocess.run", side_effect=FileNotFoundError):
        assert main([]) == 1