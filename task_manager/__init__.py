"""Task Manager - A demo task list behind an in-memory login gate."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
