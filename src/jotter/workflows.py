"""Shared command layer between the CLI subcommands and the interactive shell.

A Session owns the in-memory task list, runs commands against it and
persists the whole list after every change.
"""

import logging
from dataclasses import dataclass

from .core.dates import parse_flexible
from .core.errors import StorageWriteError, TaskError
from .core.task_list import TaskList
from .core.tasks import Deadline, Event, Task, Todo, format_display
from .parser import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Command,
    Delete,
    Exit,
    ListTasks,
    Mark,
    Unmark,
    parse_command,
)
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)

GREETING = "Hello! What can I do for you?"
FAREWELL = "Bye. Hope to see you again soon!"


@dataclass
class Reply:
    """Text to show the user, and whether the session should end."""

    text: str
    done: bool = False
    error: bool = False


def _count(tasks: TaskList) -> str:
    n = len(tasks)
    return f"Now you have {n} task{'' if n == 1 else 's'} in the list."


def format_list(tasks: TaskList) -> str:
    """Numbered listing of every task."""
    if not len(tasks):
        return "Your task list is empty."
    lines = ["Here are the tasks in your list:"]
    for i, task in enumerate(tasks, start=1):
        lines.append(f"{i}. {format_display(task)}")
    return "\n".join(lines)


def _added(task: Task, tasks: TaskList) -> str:
    return f"Got it. I've added this task:\n  {format_display(task)}\n{_count(tasks)}"


class Session:
    """A running tracker backed by a TaskStore."""

    def __init__(self, store: TaskStore):
        self.store = store
        self.store.ensure_exists()
        self.tasks = self.store.load()

    def execute(self, command: Command) -> Reply:
        """Run a command; mutations are saved before replying."""
        match command:
            case ListTasks():
                return Reply(format_list(self.tasks))
            case Exit():
                return Reply(FAREWELL, done=True)
            case AddTodo(description=description):
                task = Todo(description)
                self.tasks.add(task)
                text = _added(task, self.tasks)
            case AddDeadline(description=description, due=due):
                task = Deadline(description, parse_flexible(due))
                self.tasks.add(task)
                text = _added(task, self.tasks)
            case AddEvent(description=description, start=start, end=end):
                task = Event(description, start, end)
                self.tasks.add(task)
                text = _added(task, self.tasks)
            case Mark(position=position):
                task = self.tasks.mark_done(position)
                text = f"Nice! I've marked this task as done:\n  {format_display(task)}"
            case Unmark(position=position):
                task = self.tasks.mark_undone(position)
                text = f"OK, I've marked this task as not done yet:\n  {format_display(task)}"
            case Delete(position=position):
                task = self.tasks.delete(position)
                text = f"Noted. I've removed this task:\n  {format_display(task)}\n{_count(self.tasks)}"
            case _:
                raise TypeError(f"Unknown command: {command!r}")

        return self._save(text)

    def _save(self, text: str) -> Reply:
        try:
            self.store.save(self.tasks)
        except StorageWriteError as e:
            # The in-memory list stays as is; the next successful save catches up
            return Reply(f"{text}\nWarning: {e}", error=True)
        return Reply(text)

    def run(self, command: Command) -> Reply:
        """Like execute, but failures become error replies."""
        try:
            return self.execute(command)
        except TaskError as e:
            logger.debug("Command %r failed: %s", command, e)
            return Reply(str(e), error=True)

    def handle(self, line: str) -> Reply:
        """Parse and run one line of user input."""
        try:
            command = parse_command(line)
        except TaskError as e:
            return Reply(str(e), error=True)
        return self.run(command)
