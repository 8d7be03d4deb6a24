"""Task board: the front end that drives a :class:`TaskStore`.

The board reproduces the screen flow the store was built for:
- seed a few example tasks and complete some of them
- validate titles before they reach the store
- re-render the "all tasks" and "completed tasks" regions after every change
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from task_tracker.tracker.models import Task
from task_tracker.tracker.store import TaskStore

logger = logging.getLogger(__name__)

MSG_TASK_ADDED = "Task added"
MSG_BLANK_TITLE = "Title cannot be empty"
MSG_TASK_COMPLETED = "Task completed"
MSG_TASK_NOT_FOUND = "Task not found"

# Positions (0-based) of the seeded examples that start out completed.
SEED_COMPLETED_POSITIONS = (0, 2)


class BlankTitleError(ValueError):
    """Raised by strict callers when a title is empty or whitespace-only."""


@dataclass(frozen=True, slots=True)
class AddTaskResult:
    message: str
    task: Task | None = None

    @property
    def added(self) -> bool:
        return self.task is not None


@dataclass(frozen=True, slots=True)
class CompleteTaskResult:
    task_id: int
    completed: bool

    @property
    def message(self) -> str:
        return MSG_TASK_COMPLETED if self.completed else MSG_TASK_NOT_FOUND


@dataclass(frozen=True, slots=True)
class BoardView:
    """The two text regions shown to the user."""

    all_tasks_text: str
    completed_tasks_text: str


def render_titles(tasks: Sequence[Task]) -> str:
    return "\n".join(str(task) for task in tasks)


def is_blank(title: str) -> bool:
    return not title.strip()


class TaskBoard:
    def __init__(self, store: TaskStore) -> None:
        self._store = store

    @property
    def store(self) -> TaskStore:
        return self._store

    def seed_examples(self, titles: Sequence[str]) -> list[Task]:
        """Create the example tasks, then complete the first and third."""
        seeded = [self._store.create(title) for title in titles]
        for pos in SEED_COMPLETED_POSITIONS:
            if pos < len(seeded):
                self._store.complete(seeded[pos].id)
        logger.info("Seeded example tasks", extra={"count": len(seeded)})
        return seeded

    def add_task(self, raw_title: str, *, strict: bool = False) -> AddTaskResult:
        """Add a task from user input.

        Blank titles never reach the store. With ``strict=True`` they raise
        :class:`BlankTitleError` instead of returning a message.
        """
        if is_blank(raw_title):
            if strict:
                raise BlankTitleError(MSG_BLANK_TITLE)
            logger.info("Rejected blank task title")
            return AddTaskResult(message=MSG_BLANK_TITLE)

        task = self._store.create(raw_title)
        return AddTaskResult(message=MSG_TASK_ADDED, task=task)

    def complete_task(self, task_id: int) -> CompleteTaskResult:
        return CompleteTaskResult(task_id=task_id, completed=self._store.complete(task_id))

    def render(self) -> BoardView:
        return BoardView(
            all_tasks_text=render_titles(self._store.list_all()),
            completed_tasks_text=render_titles(self._store.list_completed()),
        )
