"""
FILE: tap/core/models.py
PURPOSE: Domain models for tasks and the task list
EXPORTS:
  - TaskStatus (enum)
  - Task (dataclass)
  - TaskList (ordered collection of tasks)
DEPENDENCIES:
  - dataclasses, enum, typing (stdlib)
  - tap.core.timestamp (Timestamp)
  - tap.core.exceptions (TaskIndexError)
NOTES:
  - Status is derived from timestamps on every query, never stored
  - Deadline/completion setters silently ignore temporally invalid values
  - TaskList indices are 0-based; the listing shows them 1-based
  - Task records serialize with to_dict()/from_dict() (unset -> WIRE_UNSET)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .constants import WIRE_UNSET
from .exceptions import TaskIndexError
from .timestamp import Timestamp


class TaskStatus(Enum):
    """Displayed state of a task, derived from its timestamps."""

    COMPLETED = "completed"
    DEADLINE_MISSED = "deadline missed"
    PENDING = "pending"


@dataclass
class Task:
    """A task with a description, an optional deadline and completion time."""

    created: Timestamp = field(default_factory=Timestamp.now)
    deadline: Optional[Timestamp] = None
    completed: Optional[Timestamp] = None
    text: str = ""

    def set_text(self, text: str) -> None:
        self.text = text

    def set_deadline(self, ts: Timestamp, now: Optional[Timestamp] = None) -> bool:
        """
        Set the deadline if it is not in the past.

        Returns:
            True if applied, False if rejected (deadline left unchanged)
        """
        if now is None:
            now = Timestamp.now()
        if ts < now:
            return False
        self.deadline = ts
        return True

    def set_completed(self, ts: Timestamp, now: Optional[Timestamp] = None) -> bool:
        """
        Set the completion time if it is not in the future.

        Returns:
            True if applied, False if rejected (completion left unchanged)
        """
        if now is None:
            now = Timestamp.now()
        if ts > now:
            return False
        self.completed = ts
        return True

    def is_completed(self) -> bool:
        """Completed, and not after the deadline (if there is one)."""
        if self.completed is None:
            return False
        return self.deadline is None or self.completed <= self.deadline

    def deadline_missed(self, now: Optional[Timestamp] = None) -> bool:
        """Completed too late, or still open with the deadline behind us."""
        if self.deadline is None:
            return False
        if self.completed is not None:
            return self.completed > self.deadline
        if now is None:
            now = Timestamp.now()
        return now > self.deadline

    def status(self, now: Optional[Timestamp] = None) -> TaskStatus:
        if self.is_completed():
            return TaskStatus.COMPLETED
        if self.deadline_missed(now):
            return TaskStatus.DEADLINE_MISSED
        return TaskStatus.PENDING

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a task-store record."""
        return {
            "created": self.created.seconds,
            "deadline": _to_wire(self.deadline),
            "completed": _to_wire(self.completed),
            "text": self.text,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """
        Build a task from a task-store record.

        Raises:
            ValueError, TypeError, KeyError: If the record is malformed
        """
        created = _from_wire(data["created"])
        if created is None:
            raise ValueError("task record has no creation time")
        text = data["text"]
        if not isinstance(text, str):
            raise TypeError("task text must be a string")
        return cls(
            created=created,
            deadline=_from_wire(data.get("deadline")),
            completed=_from_wire(data.get("completed")),
            text=text,
        )


def _to_wire(ts: Optional[Timestamp]) -> int:
    return WIRE_UNSET if ts is None else ts.seconds


def _from_wire(value: Any) -> Optional[Timestamp]:
    # Older stores wrap the seconds in an object
    if isinstance(value, dict):
        value = value["seconds"]
    if value is None or value == WIRE_UNSET:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"timestamp must be an integer, got {value!r}")
    return Timestamp.from_seconds(value)


class TaskList:
    """Ordered sequence of tasks, addressed by 0-based position."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        self._check(index)
        return self._tasks[index]

    def _check(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, index: int) -> Task:
        """Remove and return the task at index; later tasks shift down."""
        self._check(index)
        return self._tasks.pop(index)

    def remove_many(self, indices: Iterable[int]) -> List[Task]:
        """
        Remove several tasks at once.

        Indices are deduplicated and all validated before anything is
        removed, then removed highest first so earlier positions stay valid.

        Returns:
            Removed tasks, in removal order
        """
        ordered = sorted(set(indices), reverse=True)
        for index in ordered:
            self._check(index)
        return [self._tasks.pop(index) for index in ordered]

    def remove_all(self) -> None:
        self._tasks.clear()

    def complete(self, index: int, now: Optional[Timestamp] = None) -> None:
        """Mark the task at index complete unless it already is."""
        self._check(index)
        task = self._tasks[index]
        if not task.is_completed():
            if now is None:
                now = Timestamp.now()
            task.set_completed(now, now=now)

    def complete_all(self, now: Optional[Timestamp] = None) -> None:
        for index in range(len(self._tasks)):
            self.complete(index, now)

    def completed_indices(self) -> List[int]:
        return [i for i, task in enumerate(self._tasks) if task.is_completed()]

    def to_dict(self) -> Dict[str, Any]:
        return {"tasks": [task.to_dict() for task in self._tasks]}
