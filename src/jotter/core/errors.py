"""Failure categories raised by the tracker.

Every failure is recoverable: it aborts the single requested operation and
leaves the task list as it was.
"""


class TaskError(Exception):
    """Base class for all tracker failures."""

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class EmptyDescriptionError(TaskError):
    """Raised when a task would be created without a description."""

    default_message = "The description of a task cannot be empty."


class MissingDateFieldError(TaskError):
    """Raised when a deadline or event is missing one of its date fields."""

    default_message = "A date field is missing."


class InvalidDateFormatError(TaskError, ValueError):
    """Raised when a date string matches none of the accepted formats."""

    default_message = "Invalid date format."


class IndexOutOfRangeError(TaskError, IndexError):
    """Raised when a 1-based position does not refer to a task."""

    def __init__(self, position: int, size: int):
        self.position = position
        self.size = size
        if size == 0:
            message = f"There is no task {position}: the list is empty."
        else:
            message = f"There is no task {position}: pick a number from 1 to {size}."
        super().__init__(message)


class StorageWriteError(TaskError):
    """Raised when the task file cannot be written."""

    default_message = "Could not save the task list."


class InvalidCommandError(TaskError):
    """Raised when a command line cannot be understood."""

    default_message = "Sorry, I don't know what that means."


class ReservedCharacterError(TaskError):
    """Raised when a field contains the character that separates stored fields."""

    default_message = "Task fields cannot contain '|'."


class StorageReadError(TaskError):
    """Raised when the task file cannot be opened or created."""

    default_message = "Could not open the task list."
