"""Tests for CLI helper functions."""

import click
import pytest

from task_manager.cli.helpers import (
    format_priority,
    format_task_table,
    load_settings,
    priority_color,
    task_choice_label,
)
from task_manager.models.task import Priority, Task


class TestPriorityColor:
    """Test priority to display color mapping."""

    @pytest.mark.parametrize("priority,color", [
        (Priority.HIGH, "red"),
        (Priority.MEDIUM, "yellow"),
        (Priority.LOW, "green"),
        ("high", "red"),
        ("low", "green"),
        ("urgent", "white"),
        ("", "white"),
        (None, "white"),
    ])
    def test_priority_color(self, priority, color):
        assert priority_color(priority) == color

    def test_format_priority(self):
        assert click.unstyle(format_priority(Priority.HIGH)) == "high"
        assert format_priority(Priority.HIGH) == click.style("high", fg="red")
        assert click.unstyle(format_priority("weird")) == "weird"


class TestFormatTaskTable:
    """Test task table formatting."""

    def test_format_task_table(self):
        tasks = [
            Task(id=1, title="Open task", description="First line\nSecond line", priority=Priority.HIGH),
            Task(id=2, title="Done task", priority=Priority.LOW, completed=True),
        ]

        table = click.unstyle(format_task_table(tasks))

        assert "TITLE" in table
        assert "Open task" in table
        assert "First line" in table
        assert "Second line" not in table
        assert "[x]" in table
        assert "[ ]" in table
        assert table.index("Open task") < table.index("Done task")

    def test_completed_title_is_struck_through(self):
        table = format_task_table([Task(id=2, title="Done task", completed=True)])

        assert click.style("Done task", strikethrough=True, dim=True) in table

    def test_long_description_truncated(self):
        table = format_task_table([Task(id=1, title="T", description="x" * 80)], max_desc_length=20)

        assert "x" * 17 + "..." in table
        assert "x" * 21 not in table

    def test_empty_table(self):
        table = format_task_table([])

        assert "TITLE" in table


class TestHelpers:
    """Test remaining helpers."""

    def test_task_choice_label(self):
        task = Task(id=42, title="Thing", priority=Priority.LOW, completed=True)

        assert task_choice_label(task) == "[x] Thing (low) #42"

    def test_load_settings_exits_on_error(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("nope")

        with pytest.raises(SystemExit) as exc_info:
            load_settings(bad)

        assert exc_info.value.code == 1

    def test_load_settings_defaults(self):
        assert load_settings(None).credentials["demo"] == "demo"
