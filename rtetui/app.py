"""Full-screen monitor that shows one tab at a time and refreshes it."""

from __future__ import annotations

import io
import sys
import threading
from typing import Any, Sequence

from blessed import Terminal
from rich.align import Align
from rich.console import Console, Group
from rich.rule import Rule
from rich.text import Text

from rtetui.multicast import MulticastGroups
from rtetui.ports import Ports
from rtetui.registers import Registers
from rtetui.system_counters import SystemCounters
from rtetui.tab import Key, Tab
from rtetui.tables import Tables
from rtetui.util import RteCli

HELP = "hjkl - navigate | PgDn/PgUp - scroll | c - clear | q - quit"
REFRESH_INTERVAL = 1.0

_SEQUENCE_KEYS = {
    "KEY_PGDOWN": Key.PAGE_DOWN,
    "KEY_PGUP": Key.PAGE_UP,
    "KEY_HOME": Key.HOME,
    "KEY_END": Key.END,
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_ENTER": Key.ENTER,
}


def _translate(keystroke: Any) -> Key | str | None:
    """Turn a terminal keystroke into a Key, a character, or None on timeout."""
    if getattr(keystroke, "is_sequence", False):
        return _SEQUENCE_KEYS.get(keystroke.name, Key.OTHER)
    text = str(keystroke)
    return text or None


def _choices(tab: Tab) -> list[str]:
    if isinstance(tab, Registers):
        return list(tab.registers)
    if isinstance(tab, Tables):
        return list(tab.table_names)
    if isinstance(tab, MulticastGroups):
        return list(tab.names)
    return []


class App:
    """Holds the tabs, the selected one, and the key handling between them."""

    def __init__(self, tabs: Sequence[Tab]) -> None:
        if not tabs:
            raise ValueError("at least one tab is required")
        self.tabs = list(tabs)
        self.selected = 0
        self.running = True
        self._lock = threading.Lock()

    @property
    def current(self) -> Tab:
        with self._lock:
            return self.tabs[self.selected]

    def select_next(self) -> None:
        """Move to the tab on the right, staying on the last one."""
        with self._lock:
            self.selected = min(self.selected + 1, len(self.tabs) - 1)

    def select_previous(self) -> None:
        """Move to the tab on the left, staying on the first one."""
        with self._lock:
            self.selected = max(self.selected - 1, 0)

    def refresh(self) -> None:
        """Fetch fresh state for the tab being shown."""
        self.current.update_state()

    def handle_key(self, key: Key | str) -> bool:
        """React to a key press; return True if anything handled it."""
        if key == "q":
            self.running = False
            return True
        tab = self.current
        if tab.handle_event(key):
            return True
        if key in ("h", Key.LEFT):
            self.select_previous()
            return True
        if key in ("l", Key.RIGHT):
            self.select_next()
            return True
        if key in ("j", Key.DOWN):
            return self._move_choice(tab, 1)
        if key in ("k", Key.UP):
            return self._move_choice(tab, -1)
        if key == "c":
            clear = getattr(tab, "clear", None)
            if clear is None:
                return False
            clear()
            return True
        return False

    @staticmethod
    def _move_choice(tab: Tab, step: int) -> bool:
        select = getattr(tab, "select", None)
        if select is None:
            return False
        try:
            select(tab.selected + step)
        except IndexError:
            pass
        return True

    def _view(self) -> Group:
        with self._lock:
            selected = self.selected
        tab = self.tabs[selected]
        names = Text()
        for index, each in enumerate(self.tabs):
            if index:
                names.append(" | ")
            names.append(each.name, style="reverse" if index == selected else "")
        parts: list[Any] = [names, Rule()]
        choices = _choices(tab)
        if choices:
            parts.append(Text(f"< {choices[tab.selected]} >  (j/k)", style="bold"))
        parts.append(tab.render())
        parts.append(Align.center(Text(HELP, style="reverse")))
        return Group(*parts)

    def _draw(self, terminal: Any) -> None:
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            width=max(int(terminal.width), 20),
            force_terminal=True,
            color_system="standard",
        )
        console.print(self._view())
        terminal.stream.write(terminal.home + terminal.clear + buffer.getvalue())
        terminal.stream.flush()

    def run(self, terminal: Any, interval: float = REFRESH_INTERVAL) -> None:
        """Show the tabs full screen until the user quits."""
        stop = threading.Event()
        redraw = threading.Event()

        def refresher() -> None:
            while not stop.wait(interval):
                self.refresh()
                redraw.set()

        worker = threading.Thread(target=refresher, daemon=True)
        self.running = True
        with terminal.fullscreen(), terminal.cbreak(), terminal.hidden_cursor():
            worker.start()
            try:
                self._draw(terminal)
                while self.running:
                    key = _translate(terminal.inkey(timeout=0.1))
                    if key is not None:
                        self.handle_key(key)
                        redraw.set()
                    if redraw.is_set() and self.running:
                        redraw.clear()
                        self._draw(terminal)
            finally:
                stop.set()
                worker.join()


def build_tabs(client: RteCli, height: int | None = None) -> list[Tab]:
    """Create every tab of the monitor in display order."""
    return [
        SystemCounters("System Counters", client),
        Registers("Registers", client, height),
        Tables("Tables", client),
        MulticastGroups("Multicast", client),
        Ports("Ports", client, height),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Start the monitor against the host given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("A host to connect is required")
        return 1
    client = RteCli(args[0])
    app = App(build_tabs(client))
    app.run(Terminal())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())