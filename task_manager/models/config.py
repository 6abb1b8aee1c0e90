"""Configuration models for the task manager."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.constants import (
    DEFAULT_PRIORITY,
    DEMO_CREDENTIALS,
    SEED_TASKS,
)
from .task import Priority, Task


class SeedTask(BaseModel):
    """A demo task loaded on login."""
    id: int
    title: str = Field(..., min_length=1)
    description: str = ""
    priority: Priority = Priority(DEFAULT_PRIORITY)
    completed: bool = False

    def to_task(self) -> Task:
        """Convert to a task record."""
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            priority=self.priority,
            completed=self.completed
        )


class AppSettings(BaseModel):
    """Settings for a task manager instance."""
    credentials: Dict[str, str] = Field(default_factory=lambda: dict(DEMO_CREDENTIALS))
    seed_tasks: List[SeedTask] = Field(
        default_factory=lambda: [SeedTask(**data) for data in SEED_TASKS]
    )
    default_priority: Priority = Priority(DEFAULT_PRIORITY)
    source_path: Optional[str] = None

    @field_validator('seed_tasks')
    @classmethod
    def seed_ids_unique(cls, seed_tasks: List[SeedTask]) -> List[SeedTask]:
        """Seed task IDs must not repeat."""
        ids = [seed.id for seed in seed_tasks]
        if len(ids) != len(set(ids)):
            raise ValueError("seed task IDs must be unique")
        return seed_tasks

    def seed_records(self) -> List[Task]:
        """Get the seed tasks as task records."""
        return [seed.to_task() for seed in self.seed_tasks]
