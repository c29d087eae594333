"""
FILE: tap/formatting.py
PURPOSE: Formatting of the task listing for console output
EXPORTS:
  - TaskFormatter: Class for formatting tasks
DEPENDENCIES:
  - rich (styled text)
  - tap.core.models (Task, TaskList, TaskStatus)
  - tap.core.timestamp (format_timestamp)
NOTES:
  - One line per task, numbered from 1
  - completed = green, deadline missed = red, pending = yellow
  - Task text goes through rich.text.Text, never through markup
"""

from typing import List, Optional

from rich.text import Text

from .core.models import Task, TaskList, TaskStatus
from .core.repository import encode_tasks
from .core.timestamp import Timestamp, format_timestamp

STATUS_LABELS = {
    TaskStatus.COMPLETED: "[x] : completed at    ",
    TaskStatus.DEADLINE_MISSED: "[ ] : deadline missed ",
    TaskStatus.PENDING: "[ ] : deadline        ",
}

STATUS_STYLES = {
    TaskStatus.COMPLETED: "bold green",
    TaskStatus.DEADLINE_MISSED: "bold red",
    TaskStatus.PENDING: "bold yellow",
}


class TaskFormatter:
    """Centralized task display formatting."""

    @staticmethod
    def format_task(task: Task, now: Optional[Timestamp] = None) -> str:
        """
        Render one task without its position number.

        Completed tasks show their completion time, all others their
        deadline.
        """
        status = task.status(now)
        if status is TaskStatus.COMPLETED:
            ts = task.completed
        else:
            ts = task.deadline
        return f'{STATUS_LABELS[status]} -- {format_timestamp(ts)} -- "{task.text}"'

    @staticmethod
    def format_line(position: int, task: Task, now: Optional[Timestamp] = None) -> str:
        return f"{position:2} : {TaskFormatter.format_task(task, now)}"

    @staticmethod
    def to_text(tasks: TaskList, now: Optional[Timestamp] = None) -> Text:
        """
        Build the color-coded listing.

        Args:
            tasks: Tasks to display
            now: Reference time for deadline checks

        Returns:
            Rich Text, one styled line per task
        """
        if now is None:
            now = Timestamp.now()
        text = Text()
        for position, task in enumerate(tasks, start=1):
            line = TaskFormatter.format_line(position, task, now)
            text.append(line, style=STATUS_STYLES[task.status(now)])
            text.append("\n")
        return text

    @staticmethod
    def to_raw_lines(tasks: TaskList, now: Optional[Timestamp] = None) -> List[str]:
        """Plain text lines, one per task."""
        if now is None:
            now = Timestamp.now()
        return [
            TaskFormatter.format_line(position, task, now)
            for position, task in enumerate(tasks, start=1)
        ]

    @staticmethod
    def to_json(tasks: TaskList) -> str:
        """The listing as the task-store JSON document."""
        return encode_tasks(tasks)
