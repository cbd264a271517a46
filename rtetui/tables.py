"""Tab listing the rules of the device's match-action tables."""

from __future__ import annotations

from typing import Any, Iterable

from rich import box
from rich.table import Table

from rtetui.tab import Key, Tab
from rtetui.util import RteCli

HEADER = ["Rule Name", "Match", "Action", "Action Data", "Priority", "Timeout (s)"]


def _pairs(value: Any) -> Iterable[tuple[str, Any]]:
    if value is None:
        return []
    if isinstance(value, dict):
        return value.items()
    return ((str(index), item) for index, item in enumerate(value))


def _describe(fields: Any) -> str:
    return " | ".join(f"{key}: {item['value']}" for key, item in _pairs(fields))


def _to_table(rows: list[list[str]]) -> Table:
    header, *body = rows
    table = Table(*header, box=box.SQUARE, header_style="bold", show_lines=True)
    for row in body:
        table.add_row(*row)
    return table


class Tables(Tab):
    """Shows the rules of one table at a time."""

    def __init__(self, name: str, client: RteCli) -> None:
        super().__init__(name, client)
        self.selected = 0
        self.table_names: list[str] = []
        self._state: dict[str, list[list[str]]] = {}
        self._load_tables()

    def _load_tables(self) -> None:
        for index, element in enumerate(self._fetch("tables list")):
            table = str(element["tbl_name"])
            self.table_names.append(table)
            self._state[table] = []
            self.selected = index
            self.update_state()
        self.selected = 0

    def update_state(self) -> None:
        table = self.table_names[self.selected]
        new_state = [list(HEADER)]
        for rule in self._fetch(f"tables -t {table} list-rules"):
            actions = rule["actions"]
            new_state.append(
                [
                    str(rule["rule_name"]),
                    _describe(rule.get("match")),
                    str(actions["type"]),
                    _describe(actions.get("data")) or "None",
                    self._json_text(rule.get("priority")),
                    self._json_text(rule.get("timeout_seconds")),
                ]
            )
        with self._lock:
            self._state[table] = new_state

    def rows(self) -> list[list[str]]:
        with self._lock:
            return [list(row) for row in self._state[self.table_names[self.selected]]]

    def select(self, index: int) -> None:
        """Choose which table is shown."""
        if not 0 <= index < len(self.table_names):
            raise IndexError(f"no table at position {index}")
        self.selected = index

    def render(self) -> Table:
        """Build the rules table of the selected table for display."""
        return _to_table(self.rows())

    def handle_event(self, key: Key | str) -> bool:
        index = self._stepped(key, self.selected, len(self.table_names))
        if index is None:
            return False
        self.select(index)
        return True