"""
FILE: tap/cli/commands.py
PURPOSE: The tap command: parse arguments, run them, print and save the list
"""

from typing import List, Optional

import typer
from rich.markup import escape

from .main import app, console, error_console, __version__
from ..core import service
from ..core.commands import AddCommand, Command, FileCommand, parse_commands
from ..core.config import ConfigStore, debug_enabled
from ..core.constants import PROG_NAME
from ..core.exceptions import (
    ArgumentError,
    ConfigError,
    StoreError,
    TapError,
    TaskIndexError,
    UnknownArgumentError,
)
from ..formatting import TaskFormatter
from ..logging_setup import setup_logging


def _fail(command: Optional[str], message: str) -> None:
    prefix = f"{PROG_NAME}: {command}: " if command else f"{PROG_NAME}: "
    error_console.print(f"[red]{escape(prefix + message)}[/red]", soft_wrap=True)


def _warn_ignored(commands: List[Command]) -> None:
    for command in commands:
        if isinstance(command, (AddCommand, FileCommand)) and command.ignored:
            quoted = " ".join(f'"{arg}"' for arg in command.ignored)
            message = f"{PROG_NAME}: {command.name}: ignoring superfluous argument(s) - {quoted}"
            error_console.print(f"[yellow]{escape(message)}[/yellow]", soft_wrap=True)


@app.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        # Our own flags only before the first subcommand; task text is verbatim
        "allow_interspersed_args": False,
    },
)
def tap(
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="ARGS...",
        help="add TEXT (DEADLINE), complete N...|--all, remove N...|--all|--all-completed, file PATH",
    ),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging on stderr"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    """
    Add, complete and remove tasks, then list them.

    Several subcommands may be combined; they run in the order
    file, add, complete, remove. Indices are the numbers shown in the
    listing. Deadlines are absolute ("2024-12-24 18:00") or relative
    to now ("1d12h"; units y, m, d, h, s).

    Example:
        tap add "Write report" 2d
        tap complete 1 remove 3 4
        tap remove --all-completed
        tap file ~/work-tasks.json
    """
    if version:
        console.print(f"tap v{__version__}")
        raise typer.Exit()

    setup_logging(verbose or debug_enabled())

    argv = [PROG_NAME] + list(args or [])

    try:
        commands = parse_commands(argv)
    except UnknownArgumentError as e:
        for token in e.tokens:
            _fail(None, f'unknown argument "{token}"')
        raise typer.Exit(1)
    except ArgumentError as e:
        _fail(e.command, str(e))
        raise typer.Exit(1)

    _warn_ignored(commands)

    try:
        config = ConfigStore()
        store, tasks = service.execute(commands, config)
    except TaskIndexError as e:
        _fail(e.command, str(e))
        raise typer.Exit(1)
    except (StoreError, ConfigError) as e:
        _fail(None, str(e))
        raise typer.Exit(1)
    except TapError as e:
        _fail(None, f"unexpected error: {e}")
        raise typer.Exit(1)

    if json_output:
        console.print(TaskFormatter.to_json(tasks), markup=False, highlight=False, soft_wrap=True)
    elif raw:
        for line in TaskFormatter.to_raw_lines(tasks):
            console.print(line, markup=False, highlight=False, soft_wrap=True)
    elif len(tasks):
        console.print(TaskFormatter.to_text(tasks), soft_wrap=True, end="")

    try:
        store.save(tasks)
    except StoreError as e:
        _fail(None, str(e))
        raise typer.Exit(1)
