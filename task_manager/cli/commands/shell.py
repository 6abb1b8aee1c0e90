"""Interactive task manager session."""

from typing import Optional

import click
import questionary
from rich.console import Console
from rich.markup import escape

from task_manager.cli.helpers import format_task_table, task_choice_label
from ...core.constants import (
    APP_NAME,
    DELETE_CONFIRM_PROMPT,
    EMPTY_LIST_MESSAGE,
)
from ...core.controller import TaskManager
from ...models.task import Priority

ADD_TASK = "Add new task"
EDIT_TASK = "Edit task"
TOGGLE_TASK = "Toggle complete"
DELETE_TASK = "Delete task"
LOGOUT = "Logout"
QUIT = "Quit"

LOGIN = "Login"


class TaskShell:
    """Login screen followed by the task list menu."""

    def __init__(self, manager: TaskManager, console: Optional[Console] = None):
        self.manager = manager
        self.console = console or Console()

    def run(self) -> None:
        """Loop until the user quits or closes a prompt."""
        while True:
            if self.manager.is_logged_in:
                keep_going = self.main_menu()
            else:
                keep_going = self.login_screen()
            if not keep_going:
                break
        self.console.print("Goodbye!")

    # -------------------- login screen --------------------

    def login_screen(self) -> bool:
        """Ask for credentials once. Returns False when the user quits."""
        self.console.print(f"\n[bold]{APP_NAME}[/bold]")
        self.console.print("Please login to continue")

        action = questionary.select("Choose an option:", choices=[LOGIN, QUIT]).ask()
        if action != LOGIN:
            return False

        username = questionary.text("Username:").ask()
        if username is None:
            return False
        password = questionary.password("Password:").ask()
        if password is None:
            return False

        result = self.manager.login(username, password)
        if not result.success:
            self.console.print(f"[red]{result.error}[/red]")
        return True

    # -------------------- main menu --------------------

    def main_menu(self) -> bool:
        """Show the task list and run one menu action. Returns False on quit."""
        self.console.print(f"\n[bold]{APP_NAME}[/bold]  Welcome, {escape(self.manager.current_user)}")
        self.show_tasks()

        choices = [ADD_TASK]
        if self.manager.list_tasks():
            choices += [EDIT_TASK, TOGGLE_TASK, DELETE_TASK]
        choices += [LOGOUT, QUIT]

        choice = questionary.select("What would you like to do?", choices=choices).ask()
        if choice is None or choice == QUIT:
            return False

        if choice == ADD_TASK:
            self.add_task()
        elif choice == EDIT_TASK:
            self.edit_task()
        elif choice == TOGGLE_TASK:
            self.toggle_task()
        elif choice == DELETE_TASK:
            self.delete_task()
        elif choice == LOGOUT:
            self.manager.logout()
            self.console.print("[yellow]Logged out[/yellow]")
        return True

    def show_tasks(self) -> None:
        tasks = self.manager.list_tasks()
        self.console.print(f"\n[bold]Tasks ({len(tasks)})[/bold]")
        if not tasks:
            self.console.print(EMPTY_LIST_MESSAGE)
            return
        click.echo(format_task_table(tasks))

    def pick_task(self, message: str) -> Optional[int]:
        """Ask the user to pick a task. Returns its ID, or None for back."""
        choices = [
            questionary.Choice(title=task_choice_label(task), value=task.id)
            for task in self.manager.list_tasks()
        ]
        choices.append(questionary.Choice(title="Back", value=None))
        return questionary.select(message, choices=choices).ask()

    # -------------------- task actions --------------------

    def add_task(self) -> None:
        self.manager.start_add()
        self.fill_form("Add New Task", "Add Task")

    def edit_task(self) -> None:
        task_id = self.pick_task("Which task do you want to edit?")
        if task_id is None:
            return
        if self.manager.start_edit(task_id):
            self.fill_form("Edit Task", "Update Task")

    def fill_form(self, heading: str, submit_label: str) -> None:
        """Prompt for draft fields until the draft is saved or cancelled.

        A blank title is ignored without a message and the form is shown again.
        """
        while self.manager.form_open:
            self.console.print(f"\n[bold]{heading}[/bold]")
            draft = self.manager.draft

            title = questionary.text("Title:", default=draft.title).ask()
            if title is None:
                self.manager.cancel_draft()
                return
            description = questionary.text("Description:", default=draft.description).ask()
            if description is None:
                self.manager.cancel_draft()
                return
            priority = questionary.select(
                "Priority:",
                choices=[p.value for p in Priority],
                default=draft.priority.value,
            ).ask()
            if priority is None:
                self.manager.cancel_draft()
                return

            self.manager.edit_draft(title=title, description=description, priority=priority)

            action = questionary.select("", choices=[submit_label, "Cancel"]).ask()
            if action != submit_label:
                self.manager.cancel_draft()
                return

            task = self.manager.submit_draft()
            if task is not None:
                self.console.print(f"[green]Saved task: {escape(task.title)}[/green]")

    def toggle_task(self) -> None:
        task_id = self.pick_task("Which task do you want to toggle?")
        if task_id is None:
            return
        self.manager.toggle_complete(task_id)

    def delete_task(self) -> None:
        task_id = self.pick_task("Which task do you want to delete?")
        if task_id is None:
            return

        token = self.manager.request_delete(task_id)
        if token is None:
            return

        confirmed = questionary.confirm(DELETE_CONFIRM_PROMPT, default=False).ask()

        if confirmed:
            self.manager.confirm_delete(token)
            self.console.print("[green]Task deleted[/green]")
        else:
            self.manager.cancel_delete(token)


@click.command()
@click.pass_context
def shell(ctx):
    """Start an interactive task manager session.

    Log in with one of the demo accounts, then add, edit, complete and
    delete tasks. Nothing is kept after the session ends.
    """
    manager = TaskManager(ctx.obj['settings'])
    TaskShell(manager).run()
