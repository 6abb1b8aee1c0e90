"""CLI Helper Functions for the task manager.

This module provides reusable helper functions for CLI commands so that all
commands share the same settings loading, error handling and output style.

The helpers provide:
- Settings loading with consistent error handling
- Priority to color mapping for display
- Table formatting for tasks
- Task labels for selection prompts
"""

import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Union

import click
from tabulate import tabulate

from task_manager.core.constants import (
    DEFAULT_PRIORITY_COLOR,
    LOG_FORMAT,
    PRIORITY_COLORS,
)
from task_manager.models.config import AppSettings
from task_manager.models.task import Priority, Task
from task_manager.services.exceptions import ConfigError
from task_manager.utils.config_manager import ConfigManager


def configure_logging(verbose: bool = False) -> None:
    """Set up logging for a CLI run.

    Warnings only by default so interactive screens stay readable.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def load_settings(config_file: Optional[Path]) -> AppSettings:
    """Load settings, exit with an error message if they are invalid.

    Args:
        config_file: Optional JSON settings file
    """
    try:
        return ConfigManager(config_file).load_settings()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def priority_color(priority: Union[Priority, str, None]) -> str:
    """Get the display color for a priority.

    high is urgent (red), medium is caution (yellow), low is normal (green);
    anything unexpected gets the neutral default.
    """
    value = priority.value if isinstance(priority, Priority) else priority
    return PRIORITY_COLORS.get(value, DEFAULT_PRIORITY_COLOR)


def format_priority(priority: Union[Priority, str]) -> str:
    """Format a priority as a colored label."""
    label = priority.value if isinstance(priority, Priority) else str(priority)
    return click.style(label, fg=priority_color(priority))


def format_task_table(tasks: List[Task], max_desc_length: int = 50,
                      headers: Optional[List[str]] = None) -> str:
    """Format tasks as a table.

    Args:
        tasks: Tasks to display, in order
        max_desc_length: Maximum description length before truncation
        headers: Custom headers (optional)

    Returns:
        Formatted table string
    """
    if headers is None:
        headers = ["#", "ID", "DONE", "TITLE", "PRIORITY", "DESCRIPTION"]

    table_data = []
    for position, task_item in enumerate(tasks, 1):
        desc_line = task_item.description.split('\n')[0]
        if len(desc_line) > max_desc_length:
            desc_line = desc_line[:max_desc_length-3] + "..."

        # Completed tasks are struck through and dimmed
        if task_item.completed:
            title = click.style(task_item.title, strikethrough=True, dim=True)
            desc_line = click.style(desc_line, dim=True) if desc_line else ""
        else:
            title = task_item.title

        table_data.append([
            position,
            task_item.id,
            "[x]" if task_item.completed else "[ ]",
            title,
            format_priority(task_item.priority),
            desc_line,
        ])

    return tabulate(table_data, headers=headers, tablefmt="simple")


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults.

    Args:
        headers: Table headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt)
    click.echo(table_str)


def task_choice_label(task: Task) -> str:
    """Label a task for selection prompts."""
    mark = "x" if task.completed else " "
    return f"[{mark}] {task.title} ({task.priority.value}) #{task.id}"
