"""Functional core - pure business logic with no I/O."""

from .dates import format_timestamp, parse_flexible, parse_storage_format
from .errors import (
    EmptyDescriptionError,
    IndexOutOfRangeError,
    InvalidCommandError,
    InvalidDateFormatError,
    MissingDateFieldError,
    ReservedCharacterError,
    StorageReadError,
    StorageWriteError,
    TaskError,
)
from .records import MalformedRecord, decode_record, encode_record
from .task_list import TaskList
from .tasks import Deadline, Event, Task, Todo, format_display

__all__ = [
    # Dates
    "parse_flexible",
    "parse_storage_format",
    "format_timestamp",
    # Tasks
    "Task",
    "Todo",
    "Deadline",
    "Event",
    "format_display",
    "TaskList",
    # Records
    "MalformedRecord",
    "encode_record",
    "decode_record",
    # Errors
    "TaskError",
    "EmptyDescriptionError",
    "MissingDateFieldError",
    "InvalidDateFormatError",
    "IndexOutOfRangeError",
    "StorageWriteError",
    "StorageReadError",
    "ReservedCharacterError",
    "InvalidCommandError",
]
