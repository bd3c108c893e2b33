"""A status line for the window manager: time, load, temperatures, battery."""

from __future__ import annotations

import argparse
import math
import os
import re
import subprocess
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

TZ_UTC = "UTC"
TZ_LOCAL = "Europe/Helsinki"

THERMAL_ZONES = (
    "/sys/devices/virtual/thermal/thermal_zone0",
    "/sys/devices/virtual/thermal/thermal_zone1",
)

_LINE_LIMIT = 511
_TIME_LIMIT = 127
_SCRIPT_LIMIT = 1024

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def readfile(base: str | os.PathLike, name: str) -> str | None:
    """Return the first line of ``base/name`` (newline kept), or None."""
    try:
        with open(Path(base) / name, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(_LINE_LIMIT)
    except OSError:
        return None
    return line or None


def mktimes(fmt: str, tzname: str) -> str:
    """Format the current time in zone ``tzname``; "" if it does not fit."""
    try:
        zone = ZoneInfo(tzname)
    except (ZoneInfoNotFoundError, ValueError):
        zone = timezone.utc
    text = datetime.now(zone).strftime(fmt)
    if not text or len(text) > _TIME_LIMIT:
        if text:
            print("strftime == 0", file=sys.stderr)
        return ""
    return text


def loadavg() -> str:
    """Return the 1, 5 and 15 minute load averages, or "" if unavailable."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        return ""
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def _scan_int(text: str | None) -> int:
    if text is None:
        return -1
    found = _INT_PREFIX.match(text)
    return int(found[1]) if found else -1


def _atof(text: str) -> float:
    found = _FLOAT_PREFIX.match(text)
    return float(found[1]) if found else 0.0


def _first_of(base: str | os.PathLike, *names: str) -> str | None:
    return next((v for v in (readfile(base, n) for n in names) if v is not None), None)


def getbattery(base: str | os.PathLike) -> str:
    """Describe the charge of the battery in sysfs directory ``base``."""
    present = readfile(base, "present")
    if present is None:
        return ""
    if not present.startswith("1"):
        return "not present"

    design = _first_of(base, "charge_full_design", "energy_full_design")
    if design is None:
        return ""
    descap = _scan_int(design)

    now = _first_of(base, "charge_now", "energy_now")
    if now is None:
        return ""
    remcap = _scan_int(now)

    state = readfile(base, "status") or ""
    if state.startswith("Discharging"):
        sign = "-"
    elif state.startswith("Charging"):
        sign = "+"
    else:
        sign = "?"

    if remcap < 0 or descap < 0:
        return "invalid"

    if descap == 0:
        percent = math.inf if remcap > 0 else math.nan
    else:
        percent = remcap / descap * 100
    return f"{percent:.0f}%{sign}"


def gettemperature(base: str | os.PathLike, sensor: str) -> str:
    """Return the reading of a millidegree sensor as whole degrees Celsius."""
    reading = readfile(base, sensor)
    if reading is None:
        return ""
    return f"{_atof(reading) / 1000:02.0f}°C"


def execscript(cmd: str) -> str:
    """Run ``cmd`` through the shell and return its first line, minus the last character."""
    try:
        result = subprocess.run(cmd, shell=True, stdout=subprocess.PIPE, check=False)
    except OSError:
        return ""
    output = result.stdout.decode("utf-8", errors="replace")
    if not output:
        return ""
    line = output.splitlines(keepends=True)[0][:_SCRIPT_LIMIT]
    return line[:-1]


def build_status(parts: Iterable[tuple[str, str]]) -> str:
    """Join ``(label, value)`` pairs as ``label:value``; an empty label shows the value alone."""
    return " ".join(f"{label}:{value}" if label else value for label, value in parts)


def _collect() -> str:
    t0 = gettemperature(THERMAL_ZONES[0], "temp")
    t1 = gettemperature(THERMAL_ZONES[1], "temp")
    local = mktimes("KW %W %a %d %b %H:%M %Z %Y", TZ_LOCAL)
    utc = mktimes("%H:%M", TZ_UTC)
    return build_status([
        ("S", t0),
        ("M", t1),
        ("L", loadavg()),
        ("T", f"{local}|{utc}"),
    ])


def _setstatus(text: str) -> bool:
    try:
        subprocess.run(["xsetroot", "-name", text], check=True)
    except (OSError, subprocess.CalledProcessError):
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Print the status once, or keep the root window name up to date."""
    parser = argparse.ArgumentParser(prog="dwmstatus")
    parser.add_argument("--once", action="store_true", help="print the status and exit")
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between updates")
    args = parser.parse_args(argv)

    if args.once:
        print(_collect())
        return 0

    while True:
        if not _setstatus(_collect()):
            print("dwmstatus: cannot open display.", file=sys.stderr)
            return 1
        time.sleep(args.interval)