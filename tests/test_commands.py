"""
Tests for building command objects from the argument vector.
"""

import pytest

from tap.core.commands import (
    AddCommand,
    CompleteCommand,
    FileCommand,
    RemoveCommand,
    parse_commands,
)
from tap.core.exceptions import ArgumentError, UnknownArgumentError


def parse(*tokens, now=None):
    return parse_commands(["tap", *tokens], now=now)


def test_no_arguments_no_commands():
    assert parse() == []


def test_add_with_relative_deadline(now):
    (command,) = parse("add", "buy milk", "2d", now=now)
    assert command == AddCommand(text="buy milk", deadline=now + 2 * 86400)


def test_add_without_deadline():
    (command,) = parse("add", "buy milk")
    assert command.deadline is None
    assert command.ignored == []


def test_add_extra_arguments_are_ignored(now):
    (command,) = parse("add", "a", "1h", "x", "y", now=now)
    assert command.text == "a"
    assert command.ignored == ["x", "y"]


def test_add_missing_arguments():
    with pytest.raises(ArgumentError) as exc:
        parse("add")
    assert exc.value.command == "add"
    assert str(exc.value) == "missing argument(s)"


def test_add_empty_description():
    with pytest.raises(ArgumentError) as exc:
        parse("add", "")
    assert str(exc.value) == "missing task description"


def test_add_invalid_deadline():
    with pytest.raises(ArgumentError) as exc:
        parse("add", "a", "3w")
    assert exc.value.command == "add"
    assert str(exc.value) == 'invalid time format "3w" - invalid time specifier w'


def test_add_unrepresentable_deadline():
    with pytest.raises(ArgumentError):
        parse("add", "a", "99999999y")


def test_commands_in_execution_order():
    commands = parse("remove", "2", "complete", "1", "add", "x", "file", "t.json")
    assert [type(c) for c in commands] == [FileCommand, AddCommand, CompleteCommand, RemoveCommand]


def test_complete_indices_are_zero_based():
    (command,) = parse("complete", "1", "3")
    assert command == CompleteCommand(indices=[0, 2])


def test_complete_without_arguments_is_noop():
    (command,) = parse("complete")
    assert command == CompleteCommand()


def test_complete_all_stops_scanning():
    (command,) = parse("complete", "2", "--all", "garbage")
    assert command.indices == [1]
    assert command.all_tasks


@pytest.mark.parametrize("arg", ["0", "-1", "x", "1.5", "²"])
def test_complete_invalid_index(arg):
    with pytest.raises(ArgumentError) as exc:
        parse("complete", arg)
    assert exc.value.command == "complete"
    assert str(exc.value) == f'invalid argument "{arg}"'


def test_remove_indices():
    (command,) = parse("remove", "3", "1", "4")
    assert command == RemoveCommand(indices=[2, 0, 3])


def test_remove_all():
    (command,) = parse("remove", "--all", "1")
    assert command.all_tasks
    assert command.indices == []


def test_remove_all_completed_keeps_earlier_indices():
    (command,) = parse("remove", "2", "--all-completed", "5")
    assert command.all_completed
    assert command.indices == [1]


def test_remove_missing_arguments():
    with pytest.raises(ArgumentError) as exc:
        parse("remove")
    assert exc.value.command == "remove"


def test_file_command():
    (command,) = parse("file", "work.json", "extra")
    assert command == FileCommand(path="work.json", ignored=["extra"])


def test_file_missing_argument():
    with pytest.raises(ArgumentError) as exc:
        parse("file")
    assert exc.value.command == "file"


def test_unknown_arguments():
    with pytest.raises(UnknownArgumentError) as exc:
        parse("list", "add", "x", "--foo")
    assert exc.value.tokens == ["list"]
