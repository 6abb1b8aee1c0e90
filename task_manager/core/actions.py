"""Actions accepted by the reducer.

Each action is a plain immutable record of one user event. Values that are
not deterministic (new task IDs, confirmation tokens) are generated by the
controller and carried on the action so that reducing stays pure.
"""
from dataclasses import dataclass
from typing import Optional, Union

from ..models.task import Priority


@dataclass(frozen=True)
class Login:
    username: str
    password: str


@dataclass(frozen=True)
class Logout:
    pass


@dataclass(frozen=True)
class StartAdd:
    pass


@dataclass(frozen=True)
class StartEdit:
    task_id: int


@dataclass(frozen=True)
class EditDraft:
    """Change one or more draft fields; None leaves a field as it is."""
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None


@dataclass(frozen=True)
class SubmitDraft:
    new_task_id: Optional[int] = None  # Required when the draft creates a task


@dataclass(frozen=True)
class CancelDraft:
    pass


@dataclass(frozen=True)
class RequestDelete:
    task_id: int
    token: str


@dataclass(frozen=True)
class ConfirmDelete:
    token: str


@dataclass(frozen=True)
class CancelDelete:
    token: str


@dataclass(frozen=True)
class ToggleComplete:
    task_id: int


Action = Union[
    Login,
    Logout,
    StartAdd,
    StartEdit,
    EditDraft,
    SubmitDraft,
    CancelDraft,
    RequestDelete,
    ConfirmDelete,
    CancelDelete,
    ToggleComplete,
]
