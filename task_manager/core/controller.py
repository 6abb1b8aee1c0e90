"""Task manager controller: owns the state and exposes the command interface."""
import logging
from typing import Callable, List, Optional, Union

from ..models.config import AppSettings
from ..models.session import LoginResult, Session
from ..models.task import Priority, Task, TaskDraft
from ..services.exceptions import NotAuthenticatedError
from . import actions
from .ids import TaskIdGenerator, new_confirmation_token
from .reducer import initial_state, reduce, requires_session
from .state import AppState

logger = logging.getLogger(__name__)


class TaskManager:
    """Single owner of the session and task store for one running instance.

    Every change goes through the pure reducer; this class only generates the
    non-deterministic inputs (task IDs, confirmation tokens) and swaps in the
    resulting state.
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        id_generator: Optional[TaskIdGenerator] = None,
        token_factory: Optional[Callable[[], str]] = None,
    ):
        """Initialize a logged-out task manager.

        Args:
            settings: Credentials, seed tasks and defaults; built-in demo values if omitted
            id_generator: Source of new task IDs
            token_factory: Source of delete confirmation tokens
        """
        self.settings = settings or AppSettings()
        self.id_generator = id_generator or TaskIdGenerator()
        self.token_factory = token_factory or new_confirmation_token
        self._state = initial_state(self.settings)

    # -------------------- queries --------------------

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def session(self) -> Session:
        return self._state.session

    @property
    def is_logged_in(self) -> bool:
        return self._state.is_logged_in

    @property
    def current_user(self) -> str:
        return self._state.session.current_user

    @property
    def login_error(self) -> str:
        return self._state.login_error

    @property
    def draft(self) -> TaskDraft:
        return self._state.draft

    @property
    def editing_task_id(self) -> Optional[int]:
        return self._state.editing_task_id

    @property
    def form_open(self) -> bool:
        return self._state.form_open

    def list_tasks(self) -> List[Task]:
        """List tasks in insertion order."""
        return list(self._state.tasks)

    def get_task(self, task_id: int) -> Optional[Task]:
        """Get a task by ID."""
        return self._state.find_task(task_id)

    # -------------------- dispatch --------------------

    def dispatch(self, action: actions.Action) -> AppState:
        """Apply an action to the current state.

        Raises:
            NotAuthenticatedError: If a task store action is dispatched while logged out
        """
        if requires_session(action) and not self.is_logged_in:
            raise NotAuthenticatedError(
                f"{type(action).__name__} requires a logged-in session"
            )
        self._state = reduce(self._state, action, self.settings)
        return self._state

    # -------------------- session gate --------------------

    def login(self, username: str, password: str) -> LoginResult:
        """Attempt to log in with a username and password."""
        self.dispatch(actions.Login(username=username, password=password))

        if self.login_error:
            logger.warning(f"Failed login attempt for user: {username}")
            return LoginResult(success=False, error=self.login_error)

        logger.info(f"User logged in: {username} ({len(self._state.tasks)} tasks)")
        return LoginResult(success=True)

    def logout(self) -> None:
        """Log out and discard all task store state."""
        user = self.current_user
        self.dispatch(actions.Logout())
        if user:
            logger.info(f"User logged out: {user}")

    # -------------------- form flow --------------------

    def start_add(self) -> None:
        """Open an empty draft for a new task."""
        self.dispatch(actions.StartAdd())

    def start_edit(self, task_id: int) -> bool:
        """Load a task into the draft for editing.

        Returns:
            True if the task exists and the form was opened
        """
        self.dispatch(actions.StartEdit(task_id=task_id))
        return self.editing_task_id == task_id

    def edit_draft(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        priority: Optional[Union[Priority, str]] = None,
    ) -> TaskDraft:
        """Change draft fields while the form is open.

        Raises:
            ValueError: If priority is not one of low, medium, high
        """
        if priority is not None and not isinstance(priority, Priority):
            priority = Priority(priority)
        self.dispatch(actions.EditDraft(title=title, description=description, priority=priority))
        return self.draft

    def submit_draft(self) -> Optional[Task]:
        """Commit the draft as a new task or as an edit of the target task.

        A blank title is ignored and leaves the form open.

        Returns:
            The created or updated task, or None if nothing was committed
        """
        if not self.form_open:
            return None

        editing_id = self.editing_task_id
        new_id = None
        if editing_id is None:
            new_id = self.id_generator.next_id(task.id for task in self._state.tasks)

        before = self._state
        self.dispatch(actions.SubmitDraft(new_task_id=new_id))
        if self._state is before:
            logger.debug("Ignored draft with a blank title")
            return None

        if editing_id is None:
            task = self.get_task(new_id)
            logger.info(f"Added task {new_id}: {task.title}")
        else:
            task = self.get_task(editing_id)
            if task is not None:
                logger.info(f"Updated task {editing_id}: {task.title}")
        return task

    def cancel_draft(self) -> None:
        """Discard the draft and close the form."""
        self.dispatch(actions.CancelDraft())

    # -------------------- one-shot commands --------------------

    def add_task(self, draft: TaskDraft) -> Optional[Task]:
        """Create a task from a draft.

        A draft without a priority gets the configured default priority.

        Returns:
            The new task, or None if the draft title is blank
        """
        self.start_add()
        self.edit_draft(title=draft.title, description=draft.description, priority=draft.priority)
        task = self.submit_draft()
        if task is None:
            self.cancel_draft()
        return task

    def update_task(self, task_id: int, draft: TaskDraft) -> Optional[Task]:
        """Replace a task's title, description and priority.

        A draft without a priority keeps the task's current priority.

        Returns:
            The updated task, or None for a blank title or unknown ID
        """
        if not self.start_edit(task_id):
            return None
        self.edit_draft(title=draft.title, description=draft.description, priority=draft.priority)
        task = self.submit_draft()
        if task is None:
            self.cancel_draft()
        return task

    def delete_task(self, task_id: int, confirmed: bool) -> bool:
        """Delete a task once the user has answered the confirmation.

        Returns:
            True if a task was removed
        """
        token = self.request_delete(task_id)
        if token is None:
            return False
        if not confirmed:
            self.cancel_delete(token)
            return False
        return self.confirm_delete(token)

    def request_delete(self, task_id: int) -> Optional[str]:
        """Start a delete that waits for confirmation.

        Returns:
            A confirmation token, or None if no task has this ID
        """
        token = self.token_factory()
        self.dispatch(actions.RequestDelete(task_id=task_id, token=token))
        if self._state.find_pending(token) is None:
            return None
        return token

    def confirm_delete(self, token: str) -> bool:
        """Carry out a pending delete.

        Returns:
            True if a task was removed
        """
        pending = self._state.find_pending(token)
        count = len(self._state.tasks)
        self.dispatch(actions.ConfirmDelete(token=token))
        removed = len(self._state.tasks) < count
        if removed:
            logger.info(f"Deleted task {pending.task_id}")
        return removed

    def cancel_delete(self, token: str) -> None:
        """Drop a pending delete without touching the tasks."""
        self.dispatch(actions.CancelDelete(token=token))

    def toggle_complete(self, task_id: int) -> Optional[Task]:
        """Flip a task's completed flag.

        Returns:
            The updated task, or None if no task has this ID
        """
        self.dispatch(actions.ToggleComplete(task_id=task_id))
        task = self.get_task(task_id)
        if task is not None:
            logger.debug(f"Task {task_id} completed={task.completed}")
        return task
