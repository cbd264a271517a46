"""Base class for the tabs of the monitor."""

from __future__ import annotations

import enum
import json
import threading
from abc import ABC, abstractmethod
from typing import Any

from rich.table import Table

from rtetui.util import RteCli, style_table


class Key(enum.Enum):
    """Keys that tabs and the application react to."""

    PAGE_DOWN = "pagedown"
    PAGE_UP = "pageup"
    HOME = "home"
    END = "end"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    OTHER = "other"


_CHOICE_STEPS: dict[Key | str, int] = {Key.DOWN: 1, "j": 1, Key.UP: -1, "k": -1}


class Tab(ABC):
    """A named view over one kind of state fetched from the device."""

    def __init__(self, name: str, client: RteCli) -> None:
        self.name = name
        self.client = client
        self._lock = threading.Lock()

    @property
    def host(self) -> str:
        return self.client.host

    @abstractmethod
    def update_state(self) -> None:
        """Fetch fresh state from the device."""

    @abstractmethod
    def rows(self) -> list[list[str]]:
        """Return the current table, header row first."""

    @abstractmethod
    def handle_event(self, key: Key | str) -> bool:
        """React to a key press; return True if it was consumed."""

    def render(self) -> Table:
        """Return a renderable view of the current table."""
        return style_table(self.rows())

    def _fetch(self, args: str) -> list[Any]:
        """Run a JSON query and return its elements as a list."""
        doc = self.client.run_json(args)
        return list(doc.values()) if isinstance(doc, dict) else list(doc)

    @staticmethod
    def _json_text(value: object) -> str:
        """Serialise a JSON value compactly, as shown in the tables."""
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)

    @staticmethod
    def _stepped(key: Key | str, current: int, count: int) -> int | None:
        """Return the choice index a selection key leads to, or None."""
        try:
            step = _CHOICE_STEPS.get(key)
        except TypeError:
            return None
        if step is None or count == 0:
            return None
        return min(max(current + step, 0), count - 1)