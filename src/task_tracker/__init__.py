"""Task Tracker.

A minimal in-memory task tracker:
- an explicit task store (create, list, complete)
- a board front end that validates titles and renders the task lists
- configuration loaded from `.env` and structured logging
"""

__version__ = "0.1.0"

from task_tracker.tracker.config import TrackerSettings
from task_tracker.tracker.models import Task
from task_tracker.tracker.store import TaskStore

__all__ = ["__version__", "Task", "TaskStore", "TrackerSettings"]
