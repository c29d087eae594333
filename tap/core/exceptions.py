"""
FILE: tap/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - TapError (base exception)
  - TimestampError
  - ArgumentError
  - TaskIndexError
  - StoreError
  - ConfigError
  - UnknownArgumentError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from TapError for easy catching
  - Core layers raise these, the CLI catches and displays them
  - Malformed task-store content is NOT an error (loads as empty list)
"""

from typing import List, Optional


class TapError(Exception):
    """Base exception for all tap errors."""
    pass


class TimestampError(TapError):
    """Time string could not be parsed or converted."""

    def __init__(self, message: str, text: Optional[str] = None):
        self.text = text
        super().__init__(message)


class ArgumentError(TapError):
    """Command-line argument was missing or invalid for a subcommand."""

    def __init__(self, command: Optional[str], message: str):
        self.command = command
        super().__init__(message)


class TaskIndexError(TapError, IndexError):
    """Task index is outside the task list."""

    def __init__(self, index: int, length: int, command: Optional[str] = None):
        self.index = index
        self.length = length
        self.command = command
        super().__init__(f"invalid index {index + 1} (have {length} task(s))")


class StoreError(TapError):
    """Task-store file cannot be opened, read or written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'failed to load "{path}" - {reason}')


class ConfigError(TapError):
    """Config file cannot be created, read or written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f'failed to access config "{path}" - {reason}')


class UnknownArgumentError(ArgumentError):
    """One or more tokens matched no option."""

    def __init__(self, tokens: List[str]):
        self.tokens = list(tokens)
        super().__init__(None, ", ".join(f'unknown argument "{t}"' for t in tokens))
