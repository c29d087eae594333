"""
FILE: tap/core/service.py
PURPOSE: Business logic layer: run commands against the task store
EXPORTS:
  - apply(command, tasks, now) -> None
  - execute(commands, config, now) -> Tuple[TaskStore, TaskList]
DEPENDENCIES:
  - tap.core.commands (command types)
  - tap.core.config (ConfigStore)
  - tap.core.repository (TaskStore)
  - tap.core.models (Task, TaskList)
NOTES:
  - The task-store switch is written to the config only after the new
    store file has been opened successfully
  - Index errors propagate; the caller must not save after a failure
  - Saving is left to the caller
"""

import logging
from typing import List, Optional, Tuple

from .commands import AddCommand, Command, CompleteCommand, FileCommand, RemoveCommand
from .config import ConfigStore
from .exceptions import TaskIndexError
from .models import Task, TaskList
from .repository import TaskStore
from .timestamp import Timestamp

logger = logging.getLogger(__name__)


def add_task(tasks: TaskList, command: AddCommand, now: Optional[Timestamp] = None) -> Task:
    """
    Append a task built from an add command.

    A deadline that already lies in the past is dropped (the task is
    added without one).
    """
    task = Task(created=now) if now is not None else Task()
    task.set_text(command.text)
    if command.deadline is not None and not task.set_deadline(command.deadline, now=now):
        logger.debug("deadline %s is in the past, ignored", command.deadline.seconds)
    tasks.add(task)
    return task


def complete_tasks(tasks: TaskList, command: CompleteCommand, now: Optional[Timestamp] = None) -> None:
    for index in command.indices:
        tasks.complete(index, now)
    if command.all_tasks:
        tasks.complete_all(now)


def remove_tasks(tasks: TaskList, command: RemoveCommand) -> List[Task]:
    """
    Remove the tasks a remove command names.

    Returns:
        Removed tasks
    """
    if command.all_tasks:
        removed = list(tasks)
        tasks.remove_all()
        return removed

    indices = list(command.indices)
    if command.all_completed:
        indices.extend(tasks.completed_indices())
    return tasks.remove_many(indices)


def apply(command: Command, tasks: TaskList, now: Optional[Timestamp] = None) -> None:
    """
    Apply one task-list command.

    Raises:
        TaskIndexError: If the command names a task that does not exist
        TypeError: For FileCommand or an unknown command type
    """
    if isinstance(command, AddCommand):
        add_task(tasks, command, now)
    elif isinstance(command, CompleteCommand):
        complete_tasks(tasks, command, now)
    elif isinstance(command, RemoveCommand):
        remove_tasks(tasks, command)
    else:
        raise TypeError(f"cannot apply {type(command).__name__} to a task list")


def execute(
    commands: List[Command],
    config: ConfigStore,
    now: Optional[Timestamp] = None,
) -> Tuple[TaskStore, TaskList]:
    """
    Load the active task store and run every command against it.

    Args:
        commands: Commands in execution order (see commands.build_commands)
        config: Config store holding the active task-store path
        now: Reference time for completions and deadline checks

    Returns:
        (store, tasks): the store to save to and the updated task list

    Raises:
        StoreError: If the task store cannot be opened
        ConfigError: If the new task-store path cannot be persisted
        TaskIndexError: If a command names a task that does not exist
    """
    switch = next((c for c in commands if isinstance(c, FileCommand)), None)

    if switch is not None:
        store = TaskStore(switch.path)
    else:
        store = TaskStore(config.store_path())

    store.open()
    tasks = store.load()

    if switch is not None:
        config.set_task_file(switch.path)

    for command in commands:
        if isinstance(command, FileCommand):
            continue
        try:
            apply(command, tasks, now)
        except TaskIndexError as e:
            e.command = command.name
            raise

    return store, tasks
