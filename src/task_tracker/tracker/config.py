"""Configuration for the task tracker.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Nothing is persisted; settings only control logging and the example tasks the
front end seeds on startup.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EXAMPLE_TITLES = "Buy milk,Walk the dog,Make the bed"


class TrackerSettings(BaseSettings):
    """Settings for the task tracker front end.

    Environment variables:
    - LOG_LEVEL                    (optional)
    - TASK_TRACKER_SEED_EXAMPLES   (optional)
    - TASK_TRACKER_EXAMPLE_TITLES  (optional, comma-separated)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `TrackerSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    seed_examples: bool = Field(
        default=True,
        validation_alias="TASK_TRACKER_SEED_EXAMPLES",
        description="Seed the example tasks when the board starts",
    )

    example_titles: str = Field(
        default=DEFAULT_EXAMPLE_TITLES,
        validation_alias="TASK_TRACKER_EXAMPLE_TITLES",
        description=(
            "Comma-separated titles of the example tasks. The first and third "
            "examples are completed right after seeding."
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _require_known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
        return level

    @field_validator("example_titles")
    @classmethod
    def _require_three_examples(cls, value: str) -> str:
        titles = [t.strip() for t in value.split(",") if t.strip()]
        if len(titles) < 3:
            raise ValueError("TASK_TRACKER_EXAMPLE_TITLES needs at least three titles")
        return value

    def parsed_example_titles(self) -> list[str]:
        return [t.strip() for t in self.example_titles.split(",") if t.strip()]
