import pytest

from rtetui.registers import Registers
from rtetui.util import RTECLI_PATH, RteCli, hex_to_unsigned

PREFIX = f"{RTECLI_PATH} -r devhost "


class FakeDevice:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def __call__(self, cmd):
        assert cmd.startswith(PREFIX)
        args = cmd[len(PREFIX):]
        self.calls.append(args)
        return self.responses.get(args, "")


LIST = '[{"name":"r1","count":1},{"name":"r2","count":1},{"name":"arr","count":3}]'


@pytest.fixture
def device():
    return FakeDevice(
        {
            "--json registers list": LIST,
            "registers -r r1 get": '["0x0000000a"]\n',
            "registers -r r2 get": '["0x00000010"]\n',
            "--json registers -r arr get": '["0x01","0x02","0x03"]',
        }
    )


def make(device):
    return Registers("Registers", RteCli("devhost", executor=device), height=30)


def test_single_registers_come_first(device):
    assert make(device).registers == ["Single Registers", "arr"]


def test_single_register_rows(device):
    rows = make(device).rows()
    assert rows[0] == ["Registers", "Hexa Value", "Value"]
    assert rows[1] == ["r1", "0x0000000a", "10"]
    assert rows[2] == ["r2", "0x00000010", hex_to_unsigned("0x00000010")]


def test_array_register_rows(device):
    tab = make(device)
    tab.select(1)
    rows = tab.rows()
    assert rows[0] == ["Hexa Value", "Value"]
    assert [r[0] for r in rows[1:]] == ["0x01", "0x02", "0x03"]
    assert all(r[1] == hex_to_unsigned(r[0]) for r in rows[1:])


def test_update_state_refreshes_selected(device):
    tab = make(device)
    tab.select(1)
    device.responses["--json registers -r arr get"] = '["0x05"]'
    tab.update_state()
    assert tab.rows()[1:] == [["0x05", hex_to_unsigned("0x05")]]


def test_clear_single_registers(device):
    tab = make(device)
    tab.clear()
    assert device.calls[-2:] == ["registers -r r1 clear", "registers -r r2 clear"]


def test_clear_array_register(device):
    tab = make(device)
    tab.select(1)
    tab.clear()
    assert device.calls[-1] == "registers -r arr clear"


def test_select_out_of_range(device):
    with pytest.raises(IndexError):
        make(device).select(2)


def test_render_adds_index_column(device):
    table = make(device).render()
    assert table.columns[0].header == "Index"
    assert table.row_count == 2


def test_short_single_output_raises():
    dev = FakeDevice(
        {"--json registers list": '[{"name":"r1","count":1}]', "registers -r r1 get": "[]"}
    )
    with pytest.raises(ValueError):
        make(dev)


def test_no_registers():
    tab = make(FakeDevice({}))
    assert tab.registers == []
    tab.update_state()
    tab.clear()
    with pytest.raises(IndexError):
        tab.rows()