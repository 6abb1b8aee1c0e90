import pytest
from click.testing import CliRunner

from task_manager.core.controller import TaskManager
from task_manager.core.ids import TaskIdGenerator
from task_manager.models.config import AppSettings


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def settings():
    """Provides the built-in demo settings."""
    return AppSettings()


@pytest.fixture
def fixed_clock():
    """Provides a clock frozen at a known instant (seconds since epoch)."""
    return lambda: 1700000000.0


@pytest.fixture
def id_generator(fixed_clock):
    """Provides an ID generator driven by the frozen clock."""
    return TaskIdGenerator(clock=fixed_clock)


@pytest.fixture
def manager(settings, id_generator):
    """Provides a logged-out task manager."""
    return TaskManager(settings, id_generator=id_generator)


@pytest.fixture
def logged_in_manager(manager):
    """Provides a task manager logged in as the demo user."""
    result = manager.login("demo", "demo")
    assert result.success
    return manager


@pytest.fixture
def isolated_cli_runner(cli_runner):
    """Provides a CLI runner with isolated filesystem."""
    with cli_runner.isolated_filesystem():
        yield cli_runner
