# termdesk

Pieces of a small X terminal and a desktop status line, in plain Python with
no third-party dependencies.

## What is inside

- `termdesk.colors`: the eight built-in colour schemes (`ColorScheme`,
  `SCHEMES`), `SchemeSelector` for cycling (`next`) or picking (`select`) a
  scheme, and the xterm 256-colour palette helpers `palette_rgb16`,
  `sixd_to_16bit` and `truecolor_rgb16`.
- `termdesk.modes`: window mode flags (`WinMode`), completion actions
  (`Completion`) and `set_mode` for switching flags on and off.
- `termdesk.args`: command-line parsing for the terminal. `parse_args` takes
  an argument vector, program name first, and returns an `Options` value.
  `parse_geometry` reads X geometry strings such as `80x24+10-20`,
  `gravity_for` gives the window gravity implied by a `Geometry`, `usage`
  returns the usage text, and `UsageError` is raised for an unknown flag or a
  missing option value.
- `termdesk.keys`: key tables. `kmap` turns a keysym, modifier state and
  window mode into the escape sequence to send, and `find_shortcut` looks up
  the built-in `Shortcut` bound to a key.
- `termdesk.geometry`: `TermGeometry` works out rows, columns and borders
  from a window size (`resize`), maps pixel positions to cells (`cell`) and
  holds the cursor style (`set_cursor`).
- `termdesk.mouse`: `MouseReporter` tracks pressed buttons and encodes
  `MouseEvent`s as X10 or SGR mouse reports; `buttonmask` gives the state bit
  of a button.
- `termdesk.status`: readers for load average, battery, temperature and time
  (`loadavg`, `getbattery`, `gettemperature`, `mktimes`), `execscript` for the
  first line of a shell command's output, and `build_status` to join the parts
  into one line.

## Example

```python
from termdesk.keys import XK_UP, kmap
from termdesk.modes import WinMode

kmap(XK_UP, 0, WinMode.NUMLOCK)                       # '\x1b[A'
kmap(XK_UP, 0, WinMode.NUMLOCK | WinMode.APPCURSOR)   # '\x1bOA'
```

## Status line

Install the package, then run:

```
termdesk-status --once
```

This prints one status line with the two thermal-zone temperatures, the load
averages and the local (Europe/Helsinki) and UTC time. Without `--once` the
command sets the X root window name to that line through `xsetroot`, every
`--interval` seconds (default 1). If `xsetroot` cannot be run or fails, it
reports that it cannot open the display and exits with status 1.

## What it does not do

The package holds the tables and calculations a terminal needs, not a
terminal: it opens no window, draws no text, loads no fonts and starts no
shell on a pseudo-terminal. The status line uses `xsetroot` rather than
talking to the X server itself.

## Tests

```
pip install .[test]
pytest
```