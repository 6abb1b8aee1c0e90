"""Core state handling for the task manager."""
