"""Turn raw command lines into typed commands.

Only splits fields out of the line; dates stay raw text here and are
parsed when the command runs.
"""

import re
from dataclasses import dataclass

from .core.errors import (
    EmptyDescriptionError,
    InvalidCommandError,
    MissingDateFieldError,
    ReservedCharacterError,
)


@dataclass
class ListTasks:
    pass


@dataclass
class Exit:
    pass


@dataclass
class AddTodo:
    description: str


@dataclass
class AddDeadline:
    description: str
    due: str


@dataclass
class AddEvent:
    description: str
    start: str
    end: str


@dataclass
class Mark:
    position: int


@dataclass
class Unmark:
    position: int


@dataclass
class Delete:
    position: int


Command = ListTasks | Exit | AddTodo | AddDeadline | AddEvent | Mark | Unmark | Delete

# Stored records are split on " | ", so no field may hold the bar itself
FIELD_SEPARATOR = "|"

USAGE = {
    "todo": "todo <description>",
    "deadline": "deadline <description> /by <date>",
    "event": "event <description> /from <start> /to <end>",
    "mark": "mark <task number>",
    "unmark": "unmark <task number>",
    "delete": "delete <task number>",
}


def _reject_separator(text: str, name: str, kind: str) -> str:
    if FIELD_SEPARATOR in text:
        raise ReservedCharacterError(f"The {name} of a {kind} cannot contain '{FIELD_SEPARATOR}'.")
    return text


def require_description(text: str, kind: str) -> str:
    """Return the stripped description or raise if it is blank or holds a '|'."""
    text = text.strip()
    if not text:
        raise EmptyDescriptionError(f"The description of a {kind} cannot be empty.")
    return _reject_separator(text, "description", kind)


def require_field(text: str | None, name: str, kind: str) -> str:
    """Return a stripped date field or raise if it is missing or blank."""
    if text is None or not text.strip():
        raise MissingDateFieldError(f"The {name} field of a {kind} cannot be empty. Usage: {USAGE[kind]}")
    return _reject_separator(text.strip(), f"{name} field", kind)


def _split_flag(text: str, flag: str) -> tuple[str, str | None]:
    """Split "a /flag b" into ("a", " b"); (text, None) if the flag is absent."""
    m = re.search(rf"(?:^|\s)/{flag}(?=\s|$)", text)
    if not m:
        return text, None
    return text[:m.start()], text[m.end():]


def _parse_position(rest: str, verb: str) -> int:
    try:
        return int(rest.strip())
    except ValueError:
        raise InvalidCommandError(f"Expected a task number. Usage: {USAGE[verb]}") from None


def parse_command(line: str) -> Command:
    """
    Parse one line of user input.

    Raises:
        EmptyDescriptionError: todo/deadline/event with a blank description.
        MissingDateFieldError: deadline/event without its /by, /from or /to part.
        ReservedCharacterError: a description or date field containing '|'.
        InvalidCommandError: unknown verb or a non-numeric task number.
    """
    verb, _, rest = line.strip().partition(" ")
    verb = verb.lower()

    match verb:
        case "list":
            return ListTasks()
        case "bye":
            return Exit()
        case "todo":
            return AddTodo(require_description(rest, "todo"))
        case "deadline":
            description, due = _split_flag(rest, "by")
            description = require_description(description, "deadline")
            return AddDeadline(description, require_field(due, "/by", "deadline"))
        case "event":
            description, times = _split_flag(rest, "from")
            description = require_description(description, "event")
            start, end = _split_flag(times or "", "to")
            start = require_field(start, "/from", "event")
            return AddEvent(description, start, require_field(end, "/to", "event"))
        case "mark":
            return Mark(_parse_position(rest, verb))
        case "unmark":
            return Unmark(_parse_position(rest, verb))
        case "delete":
            return Delete(_parse_position(rest, verb))
        case _:
            raise InvalidCommandError()
