"""A tab whose table can be scrolled a page window at a time."""

from __future__ import annotations

import shutil
from typing import Sequence

from rtetui.tab import Key, Tab
from rtetui.util import RteCli

# Lines kept free for the tab bar, dropdowns and the help line.
_RESERVED_LINES = 10


class ScrollableTab(Tab):
    """Shows a window of table rows that moves with paging keys."""

    def __init__(self, name: str, client: RteCli, height: int | None = None) -> None:
        super().__init__(name, client)
        self._height = height
        self.offset = 0
        self.table_size = 0
        self.visible_rows = 0
        self.compute_rows(height)

    def compute_rows(self, height: int | None = None) -> int:
        """Work out how many data rows fit in the given screen height."""
        if height is None:
            height = self._height
        if height is None:
            height = shutil.get_terminal_size().lines
        # Each table row takes two lines because of the separators.
        self.visible_rows = int((height - _RESERVED_LINES) / 2)
        return self.visible_rows

    def handle_event(self, key: Key | str) -> bool:
        if key == Key.PAGE_DOWN:
            self.offset += 1
            return True
        if key == Key.PAGE_UP:
            self.offset = max(self.offset - 1, 0)
            return True
        if key == Key.HOME:
            self.offset = 0
            return True
        if key == Key.END:
            self.offset = max(self.table_size - self.visible_rows - 1, 0)
            return True
        self.compute_rows()
        return False

    def windowed(self, table: Sequence[Sequence[str]]) -> list[list[str]]:
        """Return the visible window of a table with an index column added.

        When the window runs past the end, rows from the start fill it up.
        """
        if not table:
            raise ValueError("table must have a header row")
        size = len(table)
        self.table_size = size
        result = [["Index", *table[0]]]

        self.offset %= size
        start = 1 + self.offset
        end = min(start + self.visible_rows - 1, size - 1)
        result.extend(
            [str(label), *row]
            for label, row in enumerate(table[start : end + 1], start=start - 1)
        )

        rows_used = end - start + 1
        wrap_count = min(self.visible_rows, size - 1) - rows_used
        if wrap_count > 0:
            result.extend(
                [str(label), *row]
                for label, row in enumerate(table[1 : 1 + wrap_count], start=1)
            )
        return result