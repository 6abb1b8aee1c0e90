"""CLI commands for the task manager."""
