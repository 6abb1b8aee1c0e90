"""Immutable application state for a task manager instance."""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..models.session import Session
from ..models.task import Priority, Task, TaskDraft


@dataclass(frozen=True)
class PendingDeletion:
    """A delete request waiting for the user's yes/no answer."""
    token: str
    task_id: int


@dataclass(frozen=True)
class AppState:
    """Everything a running instance knows: the session and the task store."""
    session: Session = field(default_factory=Session)
    tasks: Tuple[Task, ...] = ()
    draft: TaskDraft = field(default_factory=lambda: TaskDraft(priority=Priority.MEDIUM))
    editing_task_id: Optional[int] = None
    form_open: bool = False
    login_error: str = ""
    pending_deletions: Tuple[PendingDeletion, ...] = ()

    @property
    def is_logged_in(self) -> bool:
        return self.session.is_authenticated

    @property
    def is_editing(self) -> bool:
        return self.editing_task_id is not None

    def find_task(self, task_id: int) -> Optional[Task]:
        """Get a task by ID, or None if it is not in the collection."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def find_pending(self, token: str) -> Optional[PendingDeletion]:
        """Get a pending deletion by its token."""
        for pending in self.pending_deletions:
            if pending.token == token:
                return pending
        return None
