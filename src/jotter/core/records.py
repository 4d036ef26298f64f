"""Line-oriented encoding of tasks for the backing file.

One task per line, fields joined by " | ":

    T | X | read book
    D |  | submit report | Dec 02 2024, 6:00 pm
    E |  | meetup | Mon 2pm | 4pm
"""

from dataclasses import dataclass

from .dates import format_timestamp, parse_storage_format
from .errors import InvalidDateFormatError
from .tasks import Deadline, Event, Task, Todo, type_tag

DELIMITER = " | "
DONE_MARK = "X"

# Field count per type tag
FIELD_COUNTS = {"T": 3, "D": 4, "E": 5}
MIN_FIELDS = 3


@dataclass
class MalformedRecord:
    """A stored line that could not be decoded into a task."""

    line: str
    reason: str


def encode_record(task: Task) -> str:
    """Encode a task as a single storage line."""
    fields = [type_tag(task), DONE_MARK if task.done else "", task.description]

    match task:
        case Todo():
            pass
        case Deadline(due=due):
            fields.append(format_timestamp(due))
        case Event(start=start, end=end):
            fields.extend([start, end])

    return DELIMITER.join(fields)


def decode_record(line: str) -> Task | MalformedRecord:
    """
    Decode one storage line.

    Never raises for bad input: anything that is not a well-formed record
    comes back as a MalformedRecord describing what was wrong.
    """
    parts = line.split(DELIMITER)
    # Trailing empty fields do not count
    while parts and parts[-1] == "":
        parts.pop()

    if len(parts) < MIN_FIELDS:
        return MalformedRecord(line, "too few fields")

    tag, mark, description = parts[0], parts[1], parts[2]
    done = mark == DONE_MARK

    if tag not in FIELD_COUNTS:
        return MalformedRecord(line, f"unknown task type {tag!r}")

    expected = FIELD_COUNTS[tag]
    if len(parts) != expected:
        return MalformedRecord(line, f"expected {expected} fields for type {tag}, got {len(parts)}")

    if not description.strip():
        return MalformedRecord(line, "empty description")

    match tag:
        case "T":
            return Todo(description, done=done)
        case "D":
            try:
                due = parse_storage_format(parts[3])
            except InvalidDateFormatError:
                return MalformedRecord(line, f"invalid date {parts[3]!r}")
            return Deadline(description, due, done=done)
        case "E":
            return Event(description, parts[3], parts[4], done=done)

    return MalformedRecord(line, f"unknown task type {tag!r}")
