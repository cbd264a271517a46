"""Helpers for talking to the rtecli tool and formatting its output."""

from __future__ import annotations

import json
import re
import subprocess
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from rich import box
from rich.table import Table

RTECLI_PATH = "/opt/netronome/p4/bin/rtecli"

_ULLONG_MAX = 2**64 - 1
_ROW_COLORS = ("blue", "green", "white")

_DECIMAL_RE = re.compile(r"\s*([+-]?)(\d+)")
_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


class RteCliError(RuntimeError):
    """Raised when the rtecli command cannot be started."""


def run_command(cmd: str) -> str:
    """Run a shell command and return everything it wrote to stdout."""
    try:
        completed = subprocess.run(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise RteCliError(f"cannot run {cmd!r}: {exc}") from exc
    return completed.stdout


def clean_json_output(text: str) -> str:
    """Strip escaping so that JSON objects embedded as strings become objects."""
    text = text.replace("\\", "")
    while '"{' in text:
        text = text.replace('"{', "{")
    while '}"' in text:
        text = text.replace('}"', "}")
    return text


@dataclass
class RteCli:
    """Runs rtecli against one remote host."""

    host: str
    executor: Callable[[str], str] = run_command

    def run(self, args: str) -> str:
        """Run rtecli with the given arguments and return its raw output."""
        return self.executor(f"{RTECLI_PATH} -r {self.host} {args}")

    def run_json(self, args: str) -> Any:
        """Run rtecli in JSON mode and return the decoded document."""
        text = clean_json_output(self.run(f"--json {args}"))
        if text == "":
            return {}
        return json.loads(text)


def unsigned_to_hex(value: str) -> str:
    """Render a decimal number as lower-case hexadecimal with a 0x prefix.

    Text that does not start with a number counts as zero.
    """
    match = _DECIMAL_RE.match(str(value))
    if match is None:
        number = 0
    else:
        sign, digits = match.groups()
        number = int(digits)
        if number > _ULLONG_MAX:
            number = _ULLONG_MAX
        elif sign == "-":
            number = -number % (_ULLONG_MAX + 1)
    return f"0x{number:x}"


def _parse_hex(value: str) -> int:
    match = _HEX_RE.match(str(value))
    if match is None:
        raise ValueError(f"not a hexadecimal number: {value!r}")
    sign, digits = match.groups()
    number = int(digits, 16)
    if number > _ULLONG_MAX:
        raise OverflowError(f"hexadecimal number out of range: {value!r}")
    if sign == "-":
        number = -number % (_ULLONG_MAX + 1)
    return number


def hex_to_unsigned(value: str) -> str:
    """Convert a hexadecimal string to its unsigned decimal form."""
    return str(_parse_hex(value))


def hex_to_integer(value: str) -> str:
    """Convert a hexadecimal string to a signed 32-bit decimal form."""
    low = _parse_hex(value) & 0xFFFFFFFF
    if low >= 0x80000000:
        low -= 0x100000000
    return str(low)


def style_table(rows: Sequence[Sequence[str]]) -> Table:
    """Build a styled table whose first row is the header."""
    table = Table(box=box.SQUARE, show_lines=True, header_style="bold")
    if not rows:
        return table
    header, *body = rows
    for title in header:
        table.add_column(str(title))
    for position, row in enumerate(body):
        table.add_row(*(str(cell) for cell in row), style=_ROW_COLORS[position % 3])
    return table