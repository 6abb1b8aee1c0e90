"""Task data models."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Priority(Enum):
    """Task priority enumeration."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Task:
    """A single task record."""
    id: int  # Time-derived, unique within the collection
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    completed: bool = False


@dataclass(frozen=True)
class TaskDraft:
    """Uncommitted task field values used while creating or editing.

    A priority of None leaves the priority to the form: the configured
    default for a new task, the current value for an edited one.
    """
    title: str = ""
    description: str = ""
    priority: Optional[Priority] = None

    def is_valid(self) -> bool:
        """A draft can only be committed with a non-blank title."""
        return bool(self.title.strip())

    @classmethod
    def from_task(cls, task: Task) -> 'TaskDraft':
        """Load a task's editable fields into a draft."""
        return cls(title=task.title, description=task.description, priority=task.priority)
