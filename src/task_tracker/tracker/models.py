"""Task value types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """A single unit of work.

    Tasks are immutable. The store hands out these values and replaces its own
    entry with an updated copy when a task is completed.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    title: str
    completed: bool = Field(default=False)

    def __str__(self) -> str:
        return self.title

    def mark_completed(self) -> Task:
        if self.completed:
            return self
        return self.model_copy(update={"completed": True})
