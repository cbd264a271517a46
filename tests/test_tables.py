import pytest

from rtetui.tab import Key
from rtetui.tables import HEADER, Tables
from rtetui.util import RTECLI_PATH, RteCli

PREFIX = f"{RTECLI_PATH} -r devhost "

RULES = (
    '[{"rule_name":"r0","match":{"ip.dst":{"value":"10.0.0.1"},"port":{"value":"1"}},'
    '"actions":{"type":"fwd","data":{"out":{"value":"p1"}}},'
    '"priority":5,"timeout_seconds":0},'
    '{"rule_name":"r1","match":{"port":{"value":"2"}},"actions":{"type":"drop"}}]'
)

EGRESS_RULES = (
    '[{"rule_name":"e0","match":{"port":{"value":"3"}},"actions":{"type":"drop"},'
    '"priority":1,"timeout_seconds":7}]'
)


@pytest.fixture
def responses():
    return {
        "--json tables list": '[{"tbl_name":"ingress"},{"tbl_name":"egress"}]',
        "--json tables -t ingress list-rules": RULES,
        "--json tables -t egress list-rules": "[]",
    }


@pytest.fixture
def calls():
    return []


@pytest.fixture
def tab(calls, responses):
    def executor(cmd):
        args = cmd.removeprefix(PREFIX)
        calls.append(args)
        return responses.get(args, "")

    return Tables("Tables", RteCli("devhost", executor=executor))


def test_table_names(tab):
    assert tab.table_names == ["ingress", "egress"]


def test_header(tab):
    assert tab.rows()[0] == [
        "Rule Name", "Match", "Action", "Action Data", "Priority", "Timeout (s)"
    ]


def test_rule_with_data(tab):
    assert tab.rows()[1] == ["r0", "ip.dst: 10.0.0.1 | port: 1", "fwd", "out: p1", "5", "0"]


def test_rule_without_data_or_priority(tab):
    row = tab.rows()[2]
    assert row[:4] == ["r1", "port: 2", "drop", "None"]
    assert row[4] == row[5] == "null"


def test_select_second_table(tab):
    tab.select(1)
    assert tab.rows() == [HEADER]


def test_select_out_of_range(tab):
    with pytest.raises(IndexError):
        tab.select(2)


def test_update_state_uses_selected_table(tab, calls, responses):
    tab.select(1)
    responses["--json tables -t egress list-rules"] = EGRESS_RULES
    tab.update_state()
    assert calls[-1] == "--json tables -t egress list-rules"
    assert tab.rows() == [HEADER, ["e0", "port: 3", "drop", "None", "1", "7"]]
    tab.select(0)
    assert tab.rows()[1][0] == "r0"


def test_render_rows(tab):
    table = tab.render()
    assert table.row_count == 2
    assert len(table.columns) == len(HEADER)


@pytest.mark.parametrize(
    "keys, consumed, selected",
    [
        (["q"], False, 0),
        (["j"], True, 1),
        ([Key.DOWN, Key.DOWN], True, 1),
        (["j", "k"], True, 0),
        ([Key.UP], True, 0),
    ],
)
def test_handle_event(tab, keys, consumed, selected):
    results = [tab.handle_event(key) for key in keys]
    assert results[-1] is consumed
    assert tab.selected == selected