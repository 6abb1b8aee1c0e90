"""Command line interface for the task manager."""
