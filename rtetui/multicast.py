"""Tab showing the ports of each multicast group."""

from __future__ import annotations

from rich import box
from rich.table import Table

from rtetui.tab import Key, Tab
from rtetui.util import RteCli, unsigned_to_hex

HEADER = ["Ports (decimal)", "(hex)"]


def _to_table(rows: list[list[str]]) -> Table:
    header, *body = rows
    table = Table(*header, box=box.SQUARE, header_style="bold", show_lines=True)
    for row in body:
        table.add_row(*row)
    return table


class MulticastGroups(Tab):
    """Shows the member ports of one multicast group at a time."""

    def __init__(self, name: str, client: RteCli) -> None:
        super().__init__(name, client)
        self._state: list[list[str]] = []
        self.update_state()
        self.names = self.group_names()
        self.selected = 0

    def update_state(self) -> None:
        new_state = [
            [self._json_text(port) for port in (element.get("ports") or [])]
            for element in self._fetch("multicast list")
        ]
        with self._lock:
            self._state = new_state

    def group_names(self) -> list[str]:
        """Return a label for each group currently known."""
        with self._lock:
            return [f"mg{index}" for index in range(len(self._state))]

    def rows(self) -> list[list[str]]:
        with self._lock:
            ports = list(self._state[self.selected])
        return [list(HEADER), *([port, unsigned_to_hex(port)] for port in ports)]

    def select(self, index: int) -> None:
        """Choose which group is shown."""
        if not 0 <= index < len(self.names):
            raise IndexError(f"no multicast group at position {index}")
        self.selected = index

    def render(self) -> Table:
        """Build the port table of the selected group for display."""
        return _to_table(self.rows())

    def handle_event(self, key: Key | str) -> bool:
        index = self._stepped(key, self.selected, len(self.names))
        if index is None:
            return False
        self.select(index)
        return True