"""Custom exceptions for the task manager."""


class TaskManagerError(Exception):
    """Base exception for all task manager errors."""

    pass


class NotAuthenticatedError(TaskManagerError):
    """Exception raised when a task operation is attempted without a session."""

    pass


class ConfigError(TaskManagerError):
    """Exception raised when a settings file cannot be loaded."""

    pass
