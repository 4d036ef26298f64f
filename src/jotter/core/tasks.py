"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime

from .dates import format_timestamp


@dataclass
class Todo:
    """A task with only a description."""

    description: str
    done: bool = False


@dataclass
class Deadline:
    """A task that is due at a point in time."""

    description: str
    due: datetime
    done: bool = False


@dataclass
class Event:
    """A task spanning a time range.

    Start and end are kept exactly as the user typed them.
    """

    description: str
    start: str
    end: str
    done: bool = False


Task = Todo | Deadline | Event


def type_tag(task: Task) -> str:
    """Single-letter tag shared by the display and storage formats."""
    match task:
        case Todo():
            return "T"
        case Deadline():
            return "D"
        case Event():
            return "E"
    raise TypeError(f"Not a task: {task!r}")


def format_display(task: Task) -> str:
    """
    Human-readable single line for a task.

    Examples:
        [T][X] read book
        [D][ ] submit report (by: Dec 02 2024, 6:00 pm)
        [E][ ] meetup (from: Mon 2pm to: 4pm)
    """
    mark = "X" if task.done else " "
    prefix = f"[{type_tag(task)}][{mark}] {task.description}"

    match task:
        case Todo():
            return prefix
        case Deadline(due=due):
            return f"{prefix} (by: {format_timestamp(due)})"
        case Event(start=start, end=end):
            return f"{prefix} (from: {start} to: {end})"
    raise TypeError(f"Not a task: {task!r}")
