"""Pure state transitions: (state, action) -> new state.

Nothing in this module mutates its inputs or touches the outside world, so
every transition can be tested without a terminal.
"""
from dataclasses import replace
from typing import Callable, Dict, Type

from ..models.config import AppSettings
from ..models.session import Session
from ..models.task import Task, TaskDraft
from . import actions
from .constants import LOGIN_ERROR_MESSAGE
from .state import AppState, PendingDeletion


def empty_draft(settings: AppSettings) -> TaskDraft:
    """Get a blank draft with the configured default priority."""
    return TaskDraft(priority=settings.default_priority)


def initial_state(settings: AppSettings) -> AppState:
    """Get the logged-out state a new instance starts in."""
    return AppState(draft=empty_draft(settings))


def check_credentials(settings: AppSettings, username: str, password: str) -> bool:
    """Check a username/password pair against the credential table.

    Plain equality; unknown usernames and wrong passwords are not told apart.
    """
    expected = settings.credentials.get(username)
    return expected is not None and expected == password


def seed_if_empty(state: AppState, settings: AppSettings) -> AppState:
    """Load the demo tasks when the collection is empty."""
    if state.tasks:
        return state
    return replace(state, tasks=tuple(settings.seed_records()))


def on_login(state: AppState, settings: AppSettings) -> AppState:
    """Lifecycle hook for the LoggedOut -> LoggedIn transition."""
    return seed_if_empty(state, settings)


def _close_form(state: AppState, settings: AppSettings) -> AppState:
    return replace(
        state,
        draft=empty_draft(settings),
        editing_task_id=None,
        form_open=False,
    )


def _login(state: AppState, action: actions.Login, settings: AppSettings) -> AppState:
    # Each attempt starts by clearing the previous error
    state = replace(state, login_error="")

    if not check_credentials(settings, action.username, action.password):
        return replace(state, login_error=LOGIN_ERROR_MESSAGE)

    was_logged_out = not state.is_logged_in
    state = replace(state, session=Session.logged_in(action.username))
    if was_logged_out:
        state = on_login(state, settings)
    return state


def _logout(state: AppState, action: actions.Logout, settings: AppSettings) -> AppState:
    return initial_state(settings)


def _start_add(state: AppState, action: actions.StartAdd, settings: AppSettings) -> AppState:
    return replace(
        state,
        draft=empty_draft(settings),
        editing_task_id=None,
        form_open=True,
    )


def _start_edit(state: AppState, action: actions.StartEdit, settings: AppSettings) -> AppState:
    task = state.find_task(action.task_id)
    if task is None:
        return state
    return replace(
        state,
        draft=TaskDraft.from_task(task),
        editing_task_id=task.id,
        form_open=True,
    )


def _edit_draft(state: AppState, action: actions.EditDraft, settings: AppSettings) -> AppState:
    if not state.form_open:
        return state

    changes = {
        name: value
        for name, value in (
            ('title', action.title),
            ('description', action.description),
            ('priority', action.priority),
        )
        if value is not None
    }
    return replace(state, draft=replace(state.draft, **changes))


def _submit_draft(state: AppState, action: actions.SubmitDraft, settings: AppSettings) -> AppState:
    if not state.form_open:
        return state

    draft = state.draft
    # Blank titles are ignored without feedback; the form stays open
    if not draft.is_valid():
        return state

    if state.is_editing:
        tasks = tuple(
            replace(
                task,
                title=draft.title,
                description=draft.description,
                priority=draft.priority,
            )
            if task.id == state.editing_task_id
            else task
            for task in state.tasks
        )
    else:
        if action.new_task_id is None:
            raise ValueError("A new task needs an ID")
        if state.find_task(action.new_task_id) is not None:
            raise ValueError(f"Task ID {action.new_task_id} is already in use")
        new_task = Task(
            id=action.new_task_id,
            title=draft.title,
            description=draft.description,
            priority=draft.priority,
            completed=False,
        )
        tasks = state.tasks + (new_task,)

    return _close_form(replace(state, tasks=tasks), settings)


def _cancel_draft(state: AppState, action: actions.CancelDraft, settings: AppSettings) -> AppState:
    return _close_form(state, settings)


def _request_delete(state: AppState, action: actions.RequestDelete, settings: AppSettings) -> AppState:
    if state.find_task(action.task_id) is None:
        return state
    pending = PendingDeletion(token=action.token, task_id=action.task_id)
    return replace(state, pending_deletions=state.pending_deletions + (pending,))


def _without_pending(state: AppState, token: str) -> AppState:
    return replace(
        state,
        pending_deletions=tuple(p for p in state.pending_deletions if p.token != token),
    )


def _confirm_delete(state: AppState, action: actions.ConfirmDelete, settings: AppSettings) -> AppState:
    pending = state.find_pending(action.token)
    if pending is None:
        return state
    state = _without_pending(state, action.token)
    return replace(
        state,
        tasks=tuple(task for task in state.tasks if task.id != pending.task_id),
    )


def _cancel_delete(state: AppState, action: actions.CancelDelete, settings: AppSettings) -> AppState:
    return _without_pending(state, action.token)


def _toggle_complete(state: AppState, action: actions.ToggleComplete, settings: AppSettings) -> AppState:
    return replace(
        state,
        tasks=tuple(
            replace(task, completed=not task.completed) if task.id == action.task_id else task
            for task in state.tasks
        ),
    )


_Handler = Callable[[AppState, actions.Action, AppSettings], AppState]

# Actions available without a session; everything else needs a logged-in user
_SESSION_HANDLERS: Dict[Type, _Handler] = {
    actions.Login: _login,
    actions.Logout: _logout,
}

_TASK_HANDLERS: Dict[Type, _Handler] = {
    actions.StartAdd: _start_add,
    actions.StartEdit: _start_edit,
    actions.EditDraft: _edit_draft,
    actions.SubmitDraft: _submit_draft,
    actions.CancelDraft: _cancel_draft,
    actions.RequestDelete: _request_delete,
    actions.ConfirmDelete: _confirm_delete,
    actions.CancelDelete: _cancel_delete,
    actions.ToggleComplete: _toggle_complete,
}


def requires_session(action: actions.Action) -> bool:
    """Check whether an action is a task store operation."""
    return type(action) in _TASK_HANDLERS


def reduce(state: AppState, action: actions.Action, settings: AppSettings) -> AppState:
    """Apply one action to a state and return the resulting state.

    Task store actions on a logged-out state leave it unchanged.

    Raises:
        TypeError: If the action type is unknown
    """
    handler = _SESSION_HANDLERS.get(type(action))
    if handler is None:
        handler = _TASK_HANDLERS.get(type(action))
        if handler is None:
            raise TypeError(f"Unknown action: {action!r}")
        if not state.is_logged_in:
            return state
    return handler(state, action, settings)
