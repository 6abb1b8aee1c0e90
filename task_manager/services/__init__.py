"""Service layer exceptions shared by the core and the CLI."""

from .exceptions import (
    TaskManagerError,
    NotAuthenticatedError,
    ConfigError,
)

__all__ = [
    "TaskManagerError",
    "NotAuthenticatedError",
    "ConfigError",
]
