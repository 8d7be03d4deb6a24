"""In-memory task store.

The store owns the ordered task list and the identifier counter. It is an
explicit object: construct one and pass it to whatever needs it.
"""

from __future__ import annotations

import logging
import threading

from task_tracker.tracker.models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered, in-memory collection of tasks.

    Identifiers start at 1 and are never reused. Read operations return new
    lists, so callers can mutate them freely.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: list[Task] = []
        self._next_id = 1

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def create(self, title: str) -> Task:
        # Callers validate titles; see TaskBoard.add_task.
        if not title.strip():
            logger.warning("Creating task with a blank title", extra={"title": title})

        with self._lock:
            task = Task(id=self._next_id, title=title)
            self._next_id += 1
            self._tasks.append(task)

        logger.debug("Task created", extra={"task_id": task.id, "title": task.title})
        return task

    def list_all(self) -> list[Task]:
        with self._lock:
            return list(self._tasks)

    def list_completed(self) -> list[Task]:
        with self._lock:
            return [t for t in self._tasks if t.completed]

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            for task in self._tasks:
                if task.id == task_id:
                    return task
            return None

    def complete(self, task_id: int) -> bool:
        """Mark the task with ``task_id`` completed.

        Returns False when no such task exists. Completing an already
        completed task is a no-op that still returns True.
        """
        with self._lock:
            for idx, task in enumerate(self._tasks):
                if task.id != task_id:
                    continue
                self._tasks[idx] = task.mark_completed()
                logger.debug("Task completed", extra={"task_id": task_id})
                return True

        logger.debug("Task not found", extra={"task_id": task_id})
        return False
