"""Console script shim.

The CLI is implemented in `task_tracker.tracker.main`.
"""

from __future__ import annotations

from task_tracker.tracker.main import main

__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
