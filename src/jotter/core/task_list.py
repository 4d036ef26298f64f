"""Ordered, mutable task collection addressed by 1-based position."""

from collections.abc import Iterable, Iterator

from .errors import IndexOutOfRangeError
from .records import encode_record
from .tasks import Task, format_display


class TaskList:
    """
    The in-memory task list.

    Positions are 1-based and not stable: deleting a task shifts every
    later task up by one.
    """

    def __init__(self, tasks: Iterable[Task] = ()):
        self.items: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self.items == other.items

    def __repr__(self) -> str:
        return f"TaskList({self.items!r})"

    def _index(self, position: int) -> int:
        if position < 1 or position > len(self.items):
            raise IndexOutOfRangeError(position, len(self.items))
        return position - 1

    def get(self, position: int) -> Task:
        return self.items[self._index(position)]

    def add(self, task: Task) -> None:
        self.items.append(task)

    def mark_done(self, position: int) -> Task:
        """Mark the task at position as done and return it."""
        task = self.get(position)
        task.done = True
        return task

    def mark_undone(self, position: int) -> Task:
        """Clear the completion flag of the task at position and return it."""
        task = self.get(position)
        task.done = False
        return task

    def delete(self, position: int) -> Task:
        """Remove the task at position and return it."""
        return self.items.pop(self._index(position))

    def format_for_storage(self) -> str:
        """Full file content: one record per task, newline separated."""
        return "\n".join(encode_record(t) for t in self.items)

    def format_for_display(self, position: int) -> str:
        return format_display(self.get(position))
