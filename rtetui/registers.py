"""Tab showing the values of the device's registers."""

from __future__ import annotations

import json
import threading

from rich.table import Table

from rtetui.scrollable import ScrollableTab
from rtetui.util import RteCli, hex_to_unsigned, style_table

SINGLE_REGISTERS = "Single Registers"


def _dump(value: object) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class Registers(ScrollableTab):
    """Shows register arrays, and all one-cell registers together."""

    def __init__(self, name: str, client: RteCli, height: int | None = None) -> None:
        super().__init__(name, client, height)
        self._lock = threading.Lock()
        self.selected = 0
        self.registers: list[str] = []
        self.single_registers: list[str] = []
        self._state: dict[str, list[list[str]]] = {}
        self._load_registers()

    def _load_registers(self) -> None:
        doc = self.client.run_json("registers list")
        elements = doc.values() if isinstance(doc, dict) else doc
        for element in elements:
            name = str(element["name"])
            if element["count"] == 1:
                self.single_registers.append(name)
            else:
                self.registers.append(name)
                self._state[name] = []
        if self.single_registers:
            self.registers.insert(0, SINGLE_REGISTERS)
            self._state[SINGLE_REGISTERS] = []
        for index in range(len(self.registers)):
            self.selected = index
            self.update_state()
        self.selected = 0

    def _read_single(self, register: str) -> str:
        result = self.client.run(f"registers -r {register} get")[2:]
        if len(result) < 3:
            raise ValueError(f"unexpected output for register {register!r}")
        return result[:-3]

    def update_state(self) -> None:
        if not self.registers:
            return
        current = self.registers[self.selected]
        if current == SINGLE_REGISTERS:
            new_state = [["Registers", "Hexa Value", "Value"]]
            for register in self.single_registers:
                value = self._read_single(register)
                new_state.append([register, value, hex_to_unsigned(value)])
        else:
            new_state = [["Hexa Value", "Value"]]
            doc = self.client.run_json(f"registers -r {current} get")
            elements = doc.values() if isinstance(doc, dict) else doc
            for element in elements:
                text = _dump(element)[1:-1]
                new_state.append([text, hex_to_unsigned(text)])
        with self._lock:
            self._state[current] = new_state

    def rows(self) -> list[list[str]]:
        with self._lock:
            return [list(row) for row in self._state[self.registers[self.selected]]]

    def select(self, index: int) -> None:
        """Choose which register view is shown."""
        if not 0 <= index < len(self.registers):
            raise IndexError(f"no register view at position {index}")
        self.selected = index

    def clear(self) -> None:
        """Clear the register, or all single registers, currently shown."""
        if not self.registers:
            return
        current = self.registers[self.selected]
        if current == SINGLE_REGISTERS:
            for register in self.single_registers:
                self.client.run(f"registers -r {register} clear")
        else:
            self.client.run(f"registers -r {current} clear")

    def render(self) -> Table:
        return style_table(self.windowed(self.rows()))