"""CLI entrypoint for the task tracker.

Every invocation starts with an empty in-memory store; nothing survives the
process.
"""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from typing import TextIO

from pydantic import ValidationError

from task_tracker import __version__
from task_tracker.tracker.board import TaskBoard
from task_tracker.tracker.config import TrackerSettings
from task_tracker.tracker.logging import configure_logging
from task_tracker.tracker.store import TaskStore

logger = logging.getLogger(__name__)

SHELL_HELP = """Commands:
  add <title>     add a task
  complete <id>   mark a task completed
  list            show all tasks
  completed       show completed tasks
  help            show this help
  quit            leave the shell"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-tracker",
        description="Minimal in-memory task tracker",
    )
    parser.add_argument("--version", action="version", version=f"task-tracker {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    demo = subparsers.add_parser("demo", help="Seed the example tasks and print the board")
    demo.add_argument(
        "--no-seed",
        action="store_true",
        help="Start from an empty board instead of the example tasks",
    )

    shell = subparsers.add_parser(
        "shell",
        help="Read board commands from stdin and print the board after every change",
    )
    shell.add_argument(
        "--no-seed",
        action="store_true",
        help="Start from an empty board instead of the example tasks",
    )

    return parser


def build_board(settings: TrackerSettings, *, seed: bool) -> TaskBoard:
    board = TaskBoard(TaskStore())
    if seed and settings.seed_examples:
        board.seed_examples(settings.parsed_example_titles())
    return board


def print_board(board: TaskBoard, out: TextIO) -> None:
    view = board.render()
    print("All tasks:", file=out)
    if view.all_tasks_text:
        print(view.all_tasks_text, file=out)
    print("", file=out)
    print("Completed tasks:", file=out)
    if view.completed_tasks_text:
        print(view.completed_tasks_text, file=out)


def run_shell(board: TaskBoard, lines: TextIO, out: TextIO) -> int:
    """Process board commands until EOF or ``quit``."""
    print_board(board, out)

    for raw in lines:
        line = raw.strip()
        if not line:
            continue

        command, _, rest = line.partition(" ")
        command = command.lower()

        if command in {"quit", "exit"}:
            break

        if command == "help":
            print(SHELL_HELP, file=out)
            continue

        if command == "add":
            result = board.add_task(_unquote(rest))
            print(result.message, file=out)
            if result.added:
                print_board(board, out)
            continue

        if command == "complete":
            try:
                task_id = int(rest.strip())
            except ValueError:
                print(f"Invalid task id: {rest.strip()!r}", file=out)
                continue
            outcome = board.complete_task(task_id)
            print(outcome.message, file=out)
            if outcome.completed:
                print_board(board, out)
            continue

        if command == "list":
            print(board.render().all_tasks_text, file=out)
            continue

        if command == "completed":
            print(board.render().completed_tasks_text, file=out)
            continue

        print(f"Unknown command: {command!r} (try 'help')", file=out)

    return 0


def _unquote(text: str) -> str:
    # Accept `add "Walk the dog"` as well as `add Walk the dog`.
    stripped = text.strip()
    if len(stripped) >= 2 and stripped[0] == stripped[-1] and stripped[0] in {'"', "'"}:
        try:
            parts = shlex.split(stripped)
        except ValueError:
            return text.lstrip()
        if len(parts) == 1:
            return parts[0]
    return text.lstrip()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = TrackerSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        board = build_board(settings, seed=not args.no_seed)

        if args.command == "demo":
            print_board(board, sys.stdout)
            return 0

        if args.command == "shell":
            return run_shell(board, sys.stdin, sys.stdout)

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
