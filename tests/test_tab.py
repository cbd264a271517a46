import pytest

from rtetui.tab import Key, Tab
from rtetui.util import RteCli


class FixedTab(Tab):
    def __init__(self, name, client, table):
        super().__init__(name, client)
        self.table = table
        self.updates = 0

    def update_state(self):
        self.updates += 1

    def rows(self):
        return self.table


def make_tab(table=None):
    client = RteCli("device", lambda cmd: "")
    return FixedTab("Sample", client, table or [["H1", "H2"], ["a", "b"]])


def test_tab_is_abstract():
    with pytest.raises(TypeError):
        Tab("x", RteCli("device", lambda cmd: ""))


def test_name_and_host():
    tab = make_tab()
    assert tab.name == "Sample"
    assert tab.host == "device"


def test_default_handle_event_declines():
    tab = make_tab()
    assert tab.handle_event(Key.PAGE_DOWN) is False
    assert tab.handle_event("x") is False


def test_render_uses_rows():
    table = [["H1", "H2"], ["a", "b"], ["c", "d"]]
    rendered = make_tab(table).render()
    assert rendered.row_count == len(table) - 1
    assert [str(c.header) for c in rendered.columns] == table[0]


def test_update_state_called():
    tab = make_tab()
    tab.update_state()
    tab.update_state()
    assert tab.updates == 2