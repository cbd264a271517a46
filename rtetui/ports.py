"""Tab listing the device's ports."""

from __future__ import annotations

import json

from rich.table import Table

from rtetui.scrollable import ScrollableTab
from rtetui.util import RteCli, style_table, unsigned_to_hex

HEADER = ["Name", "Id", "Id hex", "Info"]


def _dump(value: object) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class Ports(ScrollableTab):
    """Shows the port list, read once when the tab is created."""

    def __init__(self, name: str, client: RteCli, height: int | None = None) -> None:
        super().__init__(name, client, height)
        self._state: list[list[str]] = []
        self.load()

    def load(self) -> None:
        """Read the port list from the device."""
        doc = self.client.run_json("ports list")
        elements = doc.values() if isinstance(doc, dict) else doc
        state = [list(HEADER)]
        for element in elements:
            port_id = _dump(element["id"])
            state.append(
                [str(element["token"]), port_id, unsigned_to_hex(port_id), str(element["info"])]
            )
        self._state = state

    def update_state(self) -> None:
        """Ports do not change at run time, so nothing is fetched."""

    def rows(self) -> list[list[str]]:
        return [list(row) for row in self._state]

    def render(self) -> Table:
        return style_table(self.windowed(self.rows()))