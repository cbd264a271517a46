"""Tab listing the device's system counters."""

from __future__ import annotations

from rich import box
from rich.table import Table

from rtetui.tab import Key, Tab
from rtetui.util import RteCli

HEADER = ["System Counters", "Value"]
CLEAR_KEY = "c"


def _to_table(rows: list[list[str]]) -> Table:
    header, *body = rows
    table = Table(*header, box=box.SQUARE, header_style="bold")
    for row in body:
        table.add_row(*row)
    return table


class SystemCounters(Tab):
    """Shows every system counter with its current value."""

    def __init__(self, name: str, client: RteCli) -> None:
        super().__init__(name, client)
        self._state: list[list[str]] = []
        self.update_state()

    def update_state(self) -> None:
        new_state = [list(HEADER)]
        new_state.extend(
            [str(element["name"]), self._json_text(element["value"])]
            for element in self._fetch("counters list-system")
        )
        with self._lock:
            self._state = new_state

    def rows(self) -> list[list[str]]:
        with self._lock:
            return [list(row) for row in self._state]

    def clear(self) -> None:
        """Reset all system counters on the device."""
        self.client.run("counters clear-all-system")

    def render(self) -> Table:
        """Build the counters table for display."""
        return _to_table(self.rows())

    def handle_event(self, key: Key | str) -> bool:
        if key != CLEAR_KEY:
            return False
        self.clear()
        return True