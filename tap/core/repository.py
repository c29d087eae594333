"""
FILE: tap/core/repository.py
PURPOSE: JSON task-store file operations
EXPORTS:
  - TaskStore(path)
    - open() -> None
    - load() -> TaskList
    - save(tasks) -> None
  - decode_tasks(text) -> TaskList
  - encode_tasks(tasks) -> str
DEPENDENCIES:
  - json, pathlib (stdlib)
  - tap.core.models (Task, TaskList)
  - tap.core.exceptions (StoreError)
NOTES:
  - Document shape: {"tasks": [{"created", "deadline", "completed", "text"}]}
  - Unset timestamps are stored as WIRE_UNSET (2**63 - 1)
  - Unparseable or wrongly shaped content loads as an empty TaskList
  - No locking: one tap process per store file at a time
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from .exceptions import StoreError
from .models import Task, TaskList

logger = logging.getLogger(__name__)


def encode_tasks(tasks: TaskList) -> str:
    """Serialize a task list to the store document."""
    return json.dumps(tasks.to_dict(), indent=2)


def decode_tasks(text: str) -> TaskList:
    """
    Deserialize a store document.

    Accepts the {"tasks": [...]} document as well as a bare array.
    Anything that does not decode (invalid JSON, wrong shape, bad field
    types) yields an empty list.
    """
    try:
        data: Any = json.loads(text)
    except ValueError as e:
        logger.debug("task store is not valid JSON, starting empty: %s", e)
        return TaskList()

    if isinstance(data, dict):
        data = data.get("tasks")
    if not isinstance(data, list):
        logger.debug("task store has no task array, starting empty")
        return TaskList()

    try:
        return TaskList(Task.from_dict(record) for record in data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.debug("task store has a malformed record, starting empty: %s", e)
        return TaskList()


class TaskStore:
    """The task list persisted in a single JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def open(self) -> None:
        """
        Make sure the store file exists and can be read and written.

        Creates an empty file when missing. The parent directory is not
        created.

        Raises:
            StoreError: If the file cannot be opened
        """
        try:
            with open(self.path, "a+", encoding="utf-8"):
                pass
        except OSError as e:
            raise StoreError(str(self.path), e.strerror or str(e)) from e

    def load(self) -> TaskList:
        """Read the task list; missing or corrupt content gives an empty list."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return TaskList()
        except OSError as e:
            raise StoreError(str(self.path), e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            logger.debug("task store is not UTF-8, starting empty: %s", e)
            return TaskList()

        tasks = decode_tasks(text)
        logger.debug("loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: TaskList) -> None:
        """Replace the file's content with the given task list."""
        try:
            self.path.write_text(encode_tasks(tasks), encoding="utf-8")
        except OSError as e:
            raise StoreError(str(self.path), e.strerror or str(e)) from e
        logger.debug("saved %d task(s) to %s", len(tasks), self.path)
