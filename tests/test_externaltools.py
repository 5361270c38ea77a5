import pytest

from scenebrowse.externaltools import (
    ExternalTool,
    ExternalToolList,
    argument_placeholders,
)


def _tools(*names):
    return ExternalToolList(ExternalTool(name) for name in names)


def test_argument_placeholders_are_wrapped():
    placeholders = argument_placeholders()
    assert "${filefullpath}" in placeholders
    assert placeholders[0] == "${appfullpath}"
    assert all(p.startswith("${") and p.endswith("}") for p in placeholders)


def test_add_new_picks_first_free_name():
    tools = ExternalToolList()
    first = tools.add_new()
    second = tools.add_new()
    assert first.name == "New Item 1"
    assert second.name == "New Item 2"
    assert len(tools) == 2


def test_add_new_fills_gap():
    tools = _tools("New Item 2")
    added = tools.add_new()
    assert added.name == "New Item 1"
    assert tools.names == ["New Item 2", "New Item 1"]


def test_add_new_defaults():
    tool = ExternalToolList().add_new()
    assert tool.arg == '"${filefullpath}"'
    assert tool.exe == ""
    assert tool.count_as_open is False


def test_has_name():
    tools = _tools("player", "editor")
    assert tools.has_name("editor")
    assert not tools.has_name("viewer")


def test_remove_returns_tool():
    tools = _tools("a", "b", "c")
    removed = tools.remove(1)
    assert removed.name == "b"
    assert tools.names == ["a", "c"]


@pytest.mark.parametrize("index", [-1, 3])
def test_remove_out_of_range(index):
    tools = _tools("a", "b", "c")
    with pytest.raises(IndexError):
        tools.remove(index)


def test_move_up():
    tools = _tools("a", "b", "c")
    assert tools.move_up(2) == 1
    assert tools.names == ["a", "c", "b"]


def test_move_up_at_top_does_nothing():
    tools = _tools("a", "b")
    assert tools.move_up(0) == 0
    assert tools.names == ["a", "b"]


def test_move_down():
    tools = _tools("a", "b", "c")
    assert tools.move_down(0) == 1
    assert tools.names == ["b", "a", "c"]


def test_move_down_at_bottom_does_nothing():
    tools = _tools("a", "b")
    assert tools.move_down(1) == 1
    assert tools.names == ["a", "b"]


def test_move_down_then_up_round_trip():
    tools = _tools("a", "b", "c", "d")
    new_index = tools.move_down(1)
    assert tools.move_up(new_index) == 1
    assert tools.names == ["a", "b", "c", "d"]