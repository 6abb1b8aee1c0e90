"""Models for the task manager."""

from .config import AppSettings, SeedTask
from .session import LoginResult, Session
from .task import Priority, Task, TaskDraft

__all__ = [
    'AppSettings',
    'SeedTask',
    'LoginResult',
    'Session',
    'Priority',
    'Task',
    'TaskDraft'
]
