"""Utilities for the task manager."""

from .config_manager import ConfigManager

__all__ = [
    'ConfigManager'
]
