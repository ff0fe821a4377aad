"""Numbered console menu driving the task store.

Options: 1 create, 2 list, 3 update description, 4 toggle status,
5 delete, 0 exit. Integer input is read with click's typed prompt, which
re-prompts until the line parses.
"""
import logging
from typing import Callable, Dict, List, Sequence
import click
from models import Task, ValidationError
from store import TaskStore
from theme import color, HEADER_COLOR, STATUS_COLOR, ID_COLOR, EMPTY_COLOR, ERROR_COLOR, BOLD

logger = logging.getLogger(__name__)

MENU_TITLE = "========== TASK MANAGER =========="
MENU_LINES = (
    "1. Create task",
    "2. List tasks",
    "3. Update description",
    "4. Toggle status (pending/done)",
    "5. Delete task",
    "0. Exit",
)
ID_WIDTH = 5
STATUS_WIDTH = 7
SEP = " | "


def render_table(tasks: Sequence[Task]) -> List[str]:
    """Return the task table as printable lines (header, rule, one row per task)."""
    header = SEP.join((f"{'ID':<{ID_WIDTH}}", f"{'Status':<{STATUS_WIDTH}}", "Description"))
    lines = [color("======= TASK LIST =======", HEADER_COLOR, BOLD),
             color(header, HEADER_COLOR, BOLD),
             color('-' * 47, HEADER_COLOR)]
    for t in tasks:
        # pad before coloring so escape codes do not skew column widths
        tid = color(f"{t.id:<{ID_WIDTH}}", ID_COLOR)
        status = color(f"{t.status_label:<{STATUS_WIDTH}}", STATUS_COLOR[t.done])
        lines.append(SEP.join((tid, status, t.description)))
    return lines


class CLI:
    def __init__(self, store: TaskStore, show_menu_once: bool = False):
        self.store: TaskStore = store
        self.show_menu_once: bool = show_menu_once
        self._actions: Dict[int, Callable[[], None]] = {
            1: self._create,
            2: self._list,
            3: self._update,
            4: self._toggle,
            5: self._delete,
        }

    def run(self) -> None:
        """Main menu loop; returns on option 0, EOF or Ctrl-C."""
        exit_message = "Goodbye."
        shown = False
        try:
            while True:
                if not (self.show_menu_once and shown):
                    self._menu()
                    shown = True
                choice = click.prompt("Choose an option", type=int)
                if choice == 0:
                    break
                action = self._actions.get(choice)
                if action is None:
                    self._error("Invalid option.")
                    continue
                action()
        except click.Abort:
            exit_message = "Interrupted. Goodbye."
        click.echo(exit_message)
        logger.debug("session ended: %s", self.store)

    # -------------------- output helpers --------------------
    def _menu(self) -> None:
        click.echo(color(MENU_TITLE, HEADER_COLOR, BOLD))
        for line in MENU_LINES:
            click.echo(line)

    @staticmethod
    def _error(message: str) -> None:
        click.echo(color(message, ERROR_COLOR) + "\n")

    def _read_text(self, prompt: str) -> str:
        return click.prompt(prompt, default="", show_default=False)

    def _read_id(self, prompt: str) -> int:
        return click.prompt(prompt, type=int)

    def _ensure_tasks(self, verb: str) -> bool:
        """Print the table before asking for an id; complain if there is nothing to act on."""
        if not len(self.store):
            click.echo(color(f"No tasks to {verb}.", EMPTY_COLOR) + "\n")
            return False
        self._list()
        return True

    # -------------------- menu actions --------------------
    def _create(self) -> None:
        try:
            task = self.store.create(self._read_text("Description of the new task"))
        except ValidationError as exc:
            self._error(str(exc))
            return
        click.echo(f"Task created with ID {task.id}.\n")

    def _list(self) -> None:
        tasks = self.store.list()
        if not tasks:
            click.echo(color("No tasks yet.", EMPTY_COLOR) + "\n")
            return
        for line in render_table(tasks):
            click.echo(line)
        click.echo()

    def _update(self) -> None:
        if not self._ensure_tasks("update"):
            return
        tid = self._read_id("ID of the task to update")
        if tid not in self.store:
            self._error("ID not found.")
            return
        try:
            ok = self.store.update_description(tid, self._read_text("New description"))
        except ValidationError as exc:
            self._error(str(exc))
            return
        click.echo("Description updated.\n" if ok else "ID not found.\n")

    def _toggle(self) -> None:
        if not self._ensure_tasks("toggle"):
            return
        tid = self._read_id("ID to toggle (pending/done)")
        if self.store.toggle_status(tid):
            click.echo("Status toggled.\n")
        else:
            self._error("ID not found.")

    def _delete(self) -> None:
        if not self._ensure_tasks("delete"):
            return
        tid = self._read_id("ID of the task to delete")
        if self.store.delete(tid):
            click.echo("Task deleted.\n")
        else:
            self._error("ID not found.")
