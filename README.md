# rtetui

`rtetui` is a full-screen terminal dashboard for a P4 run-time environment. It
runs the `rtecli` command-line tool, which must be installed at
`/opt/netronome/p4/bin/rtecli`, to query a remote host. Each query runs as
`rtecli -r <host> ...`. The data is shown in tabs:

- **System Counters**: the name and value of each system counter. Press `c` to
  clear all of them (`counters clear-all-system`).
- **Registers**: every register whose count is 1 is gathered into a
  "Single Registers" view. Each register array gets a view of its own. Values
  are shown in hex and in unsigned decimal. Press `c` to clear the register
  being shown, or every single register when that view is selected.
- **Tables**: the rules of each match-action table. Each rule shows its name,
  match fields, action type, action data (`None` if it has none), priority and
  timeout.
- **Multicast**: the member ports of each multicast group (`mg0`, `mg1`, ...),
  in decimal and in hex.
- **Ports**: port name, id, id in hex and info. The list is read once, when
  the program starts.

Once a second, the dashboard refreshes the selected tab.

## Installation

```
pip install .
```

## Usage

```
rtetui <host>
```

`<host>` is the address that is passed to `rtecli -r`. If no host is given,
the program prints `A host to connect is required` and exits with status 1.

Keys:

| Key              | Action                                                  |
|------------------|---------------------------------------------------------|
| `h` / `l`, ←/→   | previous / next tab                                     |
| `j` / `k`, ↓/↑   | next / previous register view, table or multicast group |
| PgDn / PgUp      | scroll the Registers and Ports tables by one row        |
| Home / End       | jump to the top / bottom of the Registers or Ports table |
| `c`              | clear counters or the shown register                    |
| `q`              | quit                                                    |

The Registers and Ports tables show only as many rows as fit on the screen,
with an added `Index` column. When the window runs past the last row, it is
filled with rows from the start of the table.

## Library use

You can use each tab without the terminal UI. `rtetui.util.RteCli(host)` wraps
the command-line tool:

- `run(args)` returns the raw output.
- `run_json(args)` adds `--json` and decodes the result. Empty output gives
  `{}`.

You can pass an `executor` callable to `RteCli`. It is given the full command
line and must return its output. This is useful for testing or for running the
tool some other way.

Each tab fetches its data when it is created and exposes `update_state()`
and `rows()`. `rows()` returns a list of string lists with the header row
first:

```python
from rtetui.util import RteCli
from rtetui.system_counters import SystemCounters

client = RteCli("10.0.0.1")
counters = SystemCounters("System Counters", client)
for row in counters.rows():
    print(row)
```

Other tabs are `rtetui.registers.Registers`, `rtetui.tables.Tables`,
`rtetui.multicast.MulticastGroups` and `rtetui.ports.Ports`.
`rtetui.app.build_tabs(client)` creates all of them in display order.
`rtetui.app.App` holds the tabs and handles keys between them.

`rtetui.util` also has number helpers:

- `unsigned_to_hex("255")` gives `"0xff"`.
- `hex_to_unsigned("0xff")` gives `"255"`.
- `hex_to_integer(...)` reads the value as a signed 32-bit number.

## Limitations

- The path to `rtecli` is fixed. The program does not install or find the
  tool itself.
- The dashboard only reads and clears state. It cannot add or edit table
  rules, write registers or change multicast groups.
- Only the first command-line argument is used. There are no other options.

## Running the tests

```
pip install .[test]
pytest
```