"""Constants used throughout the task manager."""


# Demo users for testing
DEMO_CREDENTIALS = {
    "admin": "password123",
    "testuser": "test123",
    "demo": "demo",
}

# Initial demo tasks, loaded on login
SEED_TASKS = [
    {
        "id": 1,
        "title": "Complete QA Challenge",
        "description": "Implement Playwright and Postman tests",
        "priority": "high",
        "completed": False,
    },
    {
        "id": 2,
        "title": "Review Test Cases",
        "description": "Go through all test scenarios",
        "priority": "medium",
        "completed": True,
    },
    {
        "id": 3,
        "title": "Update Documentation",
        "description": "Write comprehensive test plan",
        "priority": "low",
        "completed": False,
    },
]

DEFAULT_PRIORITY = "medium"

# User-facing messages
LOGIN_ERROR_MESSAGE = "Invalid username or password"
DELETE_CONFIRM_PROMPT = "Are you sure you want to delete this task?"
EMPTY_LIST_MESSAGE = "No tasks yet. Add your first task!"

# Priority to display color; anything unexpected falls back to DEFAULT_PRIORITY_COLOR
PRIORITY_COLORS = {
    "high": "red",
    "medium": "yellow",
    "low": "green",
}
DEFAULT_PRIORITY_COLOR = "white"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

APP_NAME = "Task Manager"
