"""Test configuration and fixtures."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from task_tracker.tracker.board import TaskBoard
from task_tracker.tracker.config import TrackerSettings
from task_tracker.tracker.store import TaskStore

TRACKER_ENV_VARS = (
    "LOG_LEVEL",
    "TASK_TRACKER_SEED_EXAMPLES",
    "TASK_TRACKER_EXAMPLE_TITLES",
)


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no tracker variables set."""
    for name in TRACKER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def store() -> TaskStore:
    """Provide a fresh, empty task store."""
    return TaskStore()


@pytest.fixture
def board(store: TaskStore) -> TaskBoard:
    """Provide a board over the fresh store."""
    return TaskBoard(store)


@pytest.fixture
def settings(clean_env: Path) -> TrackerSettings:
    """Provide default settings, isolated from the developer's environment."""
    return TrackerSettings()


@pytest.fixture
def seeded_board(board: TaskBoard, settings: TrackerSettings) -> TaskBoard:
    """Provide a board seeded with the example tasks."""
    board.seed_examples(settings.parsed_example_titles())
    return board


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Undo `configure_logging` changes to the root logger."""
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
