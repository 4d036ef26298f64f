"""Task storage interface."""

from typing import Protocol

from jotter.core.task_list import TaskList


class TaskStore(Protocol):
    """Interface for persisting the task list."""

    def ensure_exists(self) -> None:
        """Create the backing store if it does not exist yet."""
        ...

    def load(self) -> TaskList:
        """Load every readable task. Missing store -> empty list."""
        ...

    def save(self, tasks: TaskList) -> None:
        """Overwrite the store with the full task list."""
        ...
