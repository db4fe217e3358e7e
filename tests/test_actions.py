import pytest

from arena_bots.actions import (
    Action,
    Build,
    Message,
    Move,
    Spawn,
    Wait,
    format_actions,
)


def test_wait_command():
    assert Wait().command() == "WAIT;"


def test_build_command_format():
    assert Build(3, 4).command() == "BUILD 3 4;"


def test_message_command_carries_content():
    text = Message("hello there").command()
    assert text.startswith("MESSAGE ")
    assert text.endswith(";")
    assert "hello there" in text


def test_move_command_fields_in_order():
    parts = Move(7, 1, 2, 3, 4).command().rstrip(";").split()
    assert parts[0] == "MOVE"
    assert [int(p) for p in parts[1:]] == [7, 1, 2, 3, 4]


def test_spawn_command_omits_unit_count():
    parts = Spawn(9, 5, 6).command().rstrip(";").split()
    assert parts[0] == "SPAWN"
    assert [int(p) for p in parts[1:]] == [5, 6]


def test_str_matches_command():
    action = Build(1, 2)
    assert str(action) == action.command()


def test_format_actions_concatenates_commands():
    actions = [Wait(), Build(0, 1), Message("hi")]
    assert format_actions(actions) == "".join(a.command() for a in actions)
    assert format_actions(actions).count(";") == 3


def test_format_actions_empty():
    assert format_actions([]) == ""


def test_action_is_abstract():
    with pytest.raises(TypeError):
        Action()


def test_actions_compare_by_value():
    assert Move(1, 0, 0, 1, 0) == Move(1, 0, 0, 1, 0)
    assert Spawn(1, 2, 3) != Spawn(2, 2, 3)