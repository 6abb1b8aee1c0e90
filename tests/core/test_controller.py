"""Tests for the TaskManager controller."""
import logging

import pytest

from task_manager.core.controller import TaskManager
from task_manager.core.ids import TaskIdGenerator
from task_manager.models.config import AppSettings
from task_manager.models.task import Priority, TaskDraft
from task_manager.services.exceptions import NotAuthenticatedError


class TestLogin:
    """Test cases for the session gate."""

    def test_login_admin(self, manager):
        result = manager.login("admin", "password123")

        assert result.success
        assert result.error == ""
        assert manager.is_logged_in
        assert manager.current_user == "admin"
        assert manager.session.is_authenticated

    def test_login_failure(self, manager):
        result = manager.login("admin", "password")

        assert not result.success
        assert result.error == "Invalid username or password"
        assert manager.login_error == "Invalid username or password"
        assert not manager.is_logged_in
        assert manager.list_tasks() == []

    def test_failed_login_is_logged_without_password(self, manager, caplog):
        with caplog.at_level(logging.WARNING, logger="task_manager.core.controller"):
            manager.login("admin", "s3cret-guess")

        assert "admin" in caplog.text
        assert "s3cret-guess" not in caplog.text

    def test_unlimited_retries(self, manager):
        for _ in range(20):
            assert not manager.login("demo", "nope").success

        assert manager.login("demo", "demo").success

    def test_logout_resets_everything(self, logged_in_manager):
        manager = logged_in_manager
        manager.add_task(TaskDraft(title="Extra"))
        manager.toggle_complete(1)
        manager.start_edit(2)
        manager.request_delete(3)

        manager.logout()

        assert not manager.is_logged_in
        assert manager.current_user == ""
        assert manager.list_tasks() == []
        assert manager.editing_task_id is None
        assert not manager.form_open
        assert manager.draft == TaskDraft(priority=Priority.MEDIUM)
        assert manager.state.pending_deletions == ()

    def test_login_again_after_logout_reseeds(self, logged_in_manager):
        manager = logged_in_manager
        manager.delete_task(1, confirmed=True)
        manager.logout()

        manager.login("testuser", "test123")

        assert [t.id for t in manager.list_tasks()] == [1, 2, 3]
        assert manager.current_user == "testuser"


class TestTaskCommands:
    """Test cases for one-shot task commands."""

    def test_demo_scenario(self, manager):
        manager.login("demo", "demo")
        assert len(manager.list_tasks()) == 3

        task = manager.add_task(TaskDraft(title="Write report"))

        tasks = manager.list_tasks()
        assert len(tasks) == 4
        assert tasks[-1] == task
        assert task.title == "Write report"
        assert task.completed is False
        assert task.priority == Priority.MEDIUM

    def test_add_task_uses_generated_id(self, logged_in_manager):
        task = logged_in_manager.add_task(
            TaskDraft(title="X", description="", priority=Priority.LOW)
        )

        assert task.id == 1700000000000
        assert task.priority == Priority.LOW
        assert not logged_in_manager.form_open

    def test_add_tasks_in_same_instant_get_unique_ids(self, logged_in_manager):
        first = logged_in_manager.add_task(TaskDraft(title="One"))
        second = logged_in_manager.add_task(TaskDraft(title="Two"))

        assert first.id != second.id
        ids = [t.id for t in logged_in_manager.list_tasks()]
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("title", ["", "    "])
    def test_add_task_blank_title_rejected(self, logged_in_manager, title):
        before = logged_in_manager.list_tasks()

        assert logged_in_manager.add_task(TaskDraft(title=title)) is None

        assert logged_in_manager.list_tasks() == before
        assert not logged_in_manager.form_open

    def test_update_task(self, logged_in_manager):
        updated = logged_in_manager.update_task(
            2, TaskDraft(title="New", description="Desc", priority=Priority.HIGH)
        )

        assert updated.id == 2
        assert updated.title == "New"
        assert updated.description == "Desc"
        assert updated.priority == Priority.HIGH
        assert updated.completed is True
        assert logged_in_manager.list_tasks()[1] == updated

    def test_update_unknown_id(self, logged_in_manager):
        before = logged_in_manager.list_tasks()

        assert logged_in_manager.update_task(404, TaskDraft(title="New")) is None

        assert logged_in_manager.list_tasks() == before

    def test_update_blank_title(self, logged_in_manager):
        before = logged_in_manager.list_tasks()

        assert logged_in_manager.update_task(1, TaskDraft(title=" ")) is None

        assert logged_in_manager.list_tasks() == before
        assert not logged_in_manager.form_open

    def test_toggle_complete(self, logged_in_manager):
        assert logged_in_manager.toggle_complete(1).completed is True
        assert logged_in_manager.toggle_complete(1).completed is False

    def test_toggle_unknown_id(self, logged_in_manager):
        assert logged_in_manager.toggle_complete(404) is None

    def test_delete_declined(self, logged_in_manager):
        assert logged_in_manager.delete_task(1, confirmed=False) is False

        assert len(logged_in_manager.list_tasks()) == 3
        assert logged_in_manager.state.pending_deletions == ()

    def test_delete_confirmed(self, logged_in_manager):
        assert logged_in_manager.delete_task(1, confirmed=True) is True

        assert len(logged_in_manager.list_tasks()) == 2
        assert logged_in_manager.get_task(1) is None

    def test_delete_unknown_id(self, logged_in_manager):
        assert logged_in_manager.delete_task(404, confirmed=True) is False
        assert len(logged_in_manager.list_tasks()) == 3


class TestTwoStepDelete:
    """Test cases for token based delete confirmation."""

    def test_request_and_confirm(self, logged_in_manager):
        token = logged_in_manager.request_delete(2)

        assert token is not None
        assert len(logged_in_manager.list_tasks()) == 3
        assert logged_in_manager.confirm_delete(token) is True
        assert logged_in_manager.get_task(2) is None

    def test_request_unknown_id(self, logged_in_manager):
        assert logged_in_manager.request_delete(404) is None

    def test_cancel_then_confirm_is_noop(self, logged_in_manager):
        token = logged_in_manager.request_delete(2)
        logged_in_manager.cancel_delete(token)

        assert logged_in_manager.confirm_delete(token) is False
        assert logged_in_manager.get_task(2) is not None

    def test_custom_token_factory(self, settings, id_generator):
        manager = TaskManager(settings, id_generator=id_generator, token_factory=lambda: "fixed")
        manager.login("demo", "demo")

        assert manager.request_delete(1) == "fixed"


class TestFormFlow:
    """Test cases for the step-by-step form flow."""

    def test_start_edit_loads_draft(self, logged_in_manager):
        assert logged_in_manager.start_edit(1)

        assert logged_in_manager.editing_task_id == 1
        assert logged_in_manager.form_open
        assert logged_in_manager.draft.title == "Complete QA Challenge"

    def test_start_edit_unknown(self, logged_in_manager):
        assert not logged_in_manager.start_edit(404)
        assert not logged_in_manager.form_open

    def test_edit_draft_accepts_priority_string(self, logged_in_manager):
        logged_in_manager.start_add()

        draft = logged_in_manager.edit_draft(title="T", priority="high")

        assert draft.priority == Priority.HIGH

    def test_edit_draft_rejects_unknown_priority(self, logged_in_manager):
        logged_in_manager.start_add()

        with pytest.raises(ValueError):
            logged_in_manager.edit_draft(priority="urgent")

    def test_submit_blank_keeps_form_open(self, logged_in_manager):
        logged_in_manager.start_add()
        logged_in_manager.edit_draft(title="  ")

        assert logged_in_manager.submit_draft() is None

        assert logged_in_manager.form_open
        assert len(logged_in_manager.list_tasks()) == 3

    def test_submit_without_open_form(self, logged_in_manager):
        assert logged_in_manager.submit_draft() is None

    def test_default_priority_from_settings(self, id_generator):
        manager = TaskManager(AppSettings(default_priority="low"), id_generator=id_generator)
        manager.login("demo", "demo")

        manager.start_add()

        assert manager.draft.priority == Priority.LOW

    def test_add_task_without_priority_uses_default(self, id_generator):
        manager = TaskManager(AppSettings(default_priority="low"), id_generator=id_generator)
        manager.login("demo", "demo")

        task = manager.add_task(TaskDraft(title="X"))

        assert task.priority == Priority.LOW

    def test_update_task_without_priority_keeps_current(self, logged_in_manager):
        updated = logged_in_manager.update_task(1, TaskDraft(title="Renamed"))

        assert updated.title == "Renamed"
        assert updated.priority == Priority.HIGH


class TestSessionRequired:
    """Test cases for task operations without a session."""

    @pytest.mark.parametrize("call", [
        lambda m: m.start_add(),
        lambda m: m.start_edit(1),
        lambda m: m.toggle_complete(1),
        lambda m: m.request_delete(1),
        lambda m: m.add_task(TaskDraft(title="X")),
    ])
    def test_raises_when_logged_out(self, manager, call):
        with pytest.raises(NotAuthenticatedError):
            call(manager)

    def test_logout_when_logged_out_is_allowed(self, manager):
        manager.logout()

        assert not manager.is_logged_in


class TestTaskIdGenerator:
    """Test cases for time-derived task IDs."""

    def test_ids_are_milliseconds(self):
        generator = TaskIdGenerator(clock=lambda: 12.3456)

        assert generator.next_id() == 12345

    def test_same_instant_bumps(self):
        generator = TaskIdGenerator(clock=lambda: 1.0)

        assert [generator.next_id() for _ in range(3)] == [1000, 1001, 1002]

    def test_clock_going_backwards(self):
        times = iter([5.0, 4.0])
        generator = TaskIdGenerator(clock=lambda: next(times))

        first = generator.next_id()
        assert generator.next_id() == first + 1

    def test_skips_existing_ids(self):
        generator = TaskIdGenerator(clock=lambda: 0.001)

        assert generator.next_id([1, 2, 50]) == 51
