#!/usr/bin/env python3
"""Programmatic task tracker example.

This demonstrates using the tracker components directly:

* load settings from `.env`
* build a store and a board over it
* seed the example tasks, add one from the command line, then print both lists
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from task_tracker.tracker.board import TaskBoard
from task_tracker.tracker.config import TrackerSettings
from task_tracker.tracker.logging import configure_logging
from task_tracker.tracker.store import TaskStore


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Add a task to a seeded board (example).")
    parser.add_argument("--title", required=True, help="Title of the task to add")
    parser.add_argument(
        "--complete",
        action="store_true",
        help="Mark the new task completed right away",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = TrackerSettings()
    configure_logging(settings.log_level)

    board = TaskBoard(TaskStore())
    board.seed_examples(settings.parsed_example_titles())

    result = board.add_task(args.title)
    print(result.message)
    if result.task is None:
        return 1

    if args.complete:
        print(board.complete_task(result.task.id).message)

    view = board.render()
    print(f"All tasks:\n{view.all_tasks_text}\n")
    print(f"Completed tasks:\n{view.completed_tasks_text}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
