"""
FILE: tap/cli/main.py
PURPOSE: Typer-based CLI entry point
EXPORTS:
  - app (Typer application)
  - console, error_console (rich consoles for stdout/stderr)
  - main() (entry point)
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - tap.cli.commands (registers the tap command on app)
  - Run as `tap` (console script) or `python -m tap`
NOTES:
  - A single command takes the raw argument vector; tap's own option
    ranges (add/complete/remove/file) are split by ArgRangeParser
  - Error messages go to stderr, prefixed "tap: <subcommand>:"
  - Exit codes: 0=success, 1=error
"""

import sys

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console

# Typer app setup
app = typer.Typer(
    name="tap",
    help="Command-line task tracker with deadlines",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

# Version
__version__ = "0.1.0"


# Import command module to register the command with app
from .commands import tap  # noqa: E402,F401


def main():
    """Main entry point for CLI."""
    app(prog_name="tap")
