"""
FILE: tap/core/commands.py
PURPOSE: Turn parsed option ranges into validated command objects
EXPORTS:
  - FileCommand, AddCommand, CompleteCommand, RemoveCommand (dataclasses)
  - Command (union of the above)
  - build_parser() -> ArgRangeParser
  - build_commands(parser, args) -> List[Command]
  - parse_commands(args) -> List[Command]
DEPENDENCIES:
  - tap.core.argparser (ArgRangeParser)
  - tap.core.timestamp (Timestamp)
  - tap.core.exceptions (ArgumentError, UnknownArgumentError, TimestampError)
NOTES:
  - Commands come back in execution order: file, add, complete, remove
  - Indices are 1-based on the command line, 0-based in commands
  - Surplus arguments are kept in `ignored` (a warning, not an error)
"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Sequence, Union

from .argparser import ArgRangeParser
from .constants import (
    FLAG_ALL,
    FLAG_ALL_COMPLETED,
    OPT_ADD,
    OPT_COMPLETE,
    OPT_FILE,
    OPT_REMOVE,
    OPTIONS,
)
from .exceptions import ArgumentError, TimestampError, UnknownArgumentError
from .timestamp import Timestamp


@dataclass
class FileCommand:
    """Switch the active task store."""
    name: ClassVar[str] = OPT_FILE

    path: str
    ignored: List[str] = field(default_factory=list)


@dataclass
class AddCommand:
    """Append a new task."""
    name: ClassVar[str] = OPT_ADD

    text: str
    deadline: Optional[Timestamp] = None
    ignored: List[str] = field(default_factory=list)


@dataclass
class CompleteCommand:
    """Mark tasks complete (all of them when all_tasks is set)."""
    name: ClassVar[str] = OPT_COMPLETE

    indices: List[int] = field(default_factory=list)
    all_tasks: bool = False


@dataclass
class RemoveCommand:
    """Remove tasks by index, every task, or every completed task."""
    name: ClassVar[str] = OPT_REMOVE

    indices: List[int] = field(default_factory=list)
    all_tasks: bool = False
    all_completed: bool = False


Command = Union[FileCommand, AddCommand, CompleteCommand, RemoveCommand]


def build_parser() -> ArgRangeParser:
    """Parser with every subcommand token registered."""
    return ArgRangeParser(OPTIONS)


def parse_commands(args: Sequence[str], now: Optional[Timestamp] = None) -> List[Command]:
    """
    Parse a full argument vector (program name first) into commands.

    Raises:
        UnknownArgumentError: If any token belongs to no option
        ArgumentError: If an option's arguments are missing or invalid
    """
    parser = build_parser()
    unknown = parser.parse(args)
    if unknown:
        raise UnknownArgumentError(unknown)
    return build_commands(parser, args, now)


def build_commands(
    parser: ArgRangeParser,
    args: Sequence[str],
    now: Optional[Timestamp] = None,
) -> List[Command]:
    """Validate each passed option's range into its command."""
    commands: List[Command] = []

    if parser.is_passed(OPT_FILE):
        commands.append(_file_command(parser.get(OPT_FILE).values(args)))
    if parser.is_passed(OPT_ADD):
        commands.append(_add_command(parser.get(OPT_ADD).values(args), now))
    if parser.is_passed(OPT_COMPLETE):
        commands.append(_complete_command(parser.get(OPT_COMPLETE).values(args)))
    if parser.is_passed(OPT_REMOVE):
        commands.append(_remove_command(parser.get(OPT_REMOVE).values(args)))

    return commands


def _file_command(values: List[str]) -> FileCommand:
    if not values:
        raise ArgumentError(OPT_FILE, "missing argument(s)")
    return FileCommand(path=values[0], ignored=values[1:])


def _add_command(values: List[str], now: Optional[Timestamp]) -> AddCommand:
    if not values:
        raise ArgumentError(OPT_ADD, "missing argument(s)")

    deadline = None
    if len(values) > 1:
        spec = values[1]
        try:
            deadline = Timestamp.parse(spec, now=now)
            deadline.to_datetime()
        except TimestampError as e:
            raise ArgumentError(OPT_ADD, f'invalid time format "{spec}" - {e}') from e

    if not values[0]:
        raise ArgumentError(OPT_ADD, "missing task description")

    return AddCommand(text=values[0], deadline=deadline, ignored=values[2:])


def _complete_command(values: List[str]) -> CompleteCommand:
    command = CompleteCommand()
    for arg in values:
        if arg == FLAG_ALL:
            command.all_tasks = True
            break
        command.indices.append(_parse_index(OPT_COMPLETE, arg))
    return command


def _remove_command(values: List[str]) -> RemoveCommand:
    if not values:
        raise ArgumentError(OPT_REMOVE, "missing argument(s)")

    command = RemoveCommand()
    for arg in values:
        if arg == FLAG_ALL:
            command.all_tasks = True
            break
        if arg == FLAG_ALL_COMPLETED:
            command.all_completed = True
            break
        command.indices.append(_parse_index(OPT_REMOVE, arg))
    return command


def _parse_index(command: str, arg: str) -> int:
    """Convert a 1-based index argument to a 0-based position."""
    if not (arg.isascii() and arg.isdigit()) or int(arg) == 0:
        raise ArgumentError(command, f'invalid argument "{arg}"')
    return int(arg) - 1
