"""Date parsing and formatting - no I/O dependencies."""

import re
from datetime import datetime, time

from .errors import InvalidDateFormatError

# Tried in order, first as date-times, then as plain dates.
INPUT_FORMATS = (
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%d/%m/%Y %H:%M",
    "%d/%m/%Y",
)

# strptime accepts single-digit fields; the inputs must use the fixed widths
FORMAT_SHAPES = {
    "%Y-%m-%d %H:%M": re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}"),
    "%Y-%m-%d": re.compile(r"\d{4}-\d{2}-\d{2}"),
    "%d/%m/%Y %H:%M": re.compile(r"\d{2}/\d{2}/\d{4} \d{2}:\d{2}"),
    "%d/%m/%Y": re.compile(r"\d{2}/\d{2}/\d{4}"),
}

# A deadline given without a time is due at the end of that day.
END_OF_DAY = time(23, 59)

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

STORAGE_RE = re.compile(
    r"^(?P<month>[A-Za-z]{3}) (?P<day>\d{2}) (?P<year>\d{4}), "
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2}) (?P<ampm>[AaPp][Mm])$"
)


def _has_time(fmt: str) -> bool:
    return "%H" in fmt


def _strptime(text: str, fmt: str) -> datetime:
    if not FORMAT_SHAPES[fmt].fullmatch(text):
        raise ValueError(f"{text!r} does not have the shape of {fmt!r}")
    return datetime.strptime(text, fmt)


def parse_flexible(text: str) -> datetime:
    """
    Parse a user-supplied date string.

    Accepts "2024-12-02 18:00", "2024-12-02", "02/12/2024 18:00" and
    "02/12/2024". Date-only values resolve to 23:59 on that day.

    Raises:
        InvalidDateFormatError: if no accepted format matches.
    """
    text = text.strip()

    for fmt in INPUT_FORMATS:
        if not _has_time(fmt):
            continue
        try:
            return _strptime(text, fmt)
        except ValueError:
            continue

    for fmt in INPUT_FORMATS:
        try:
            parsed = _strptime(text, fmt).date()
        except ValueError:
            continue
        return datetime.combine(parsed, END_OF_DAY)

    raise InvalidDateFormatError(
        f"Invalid date format: {text!r}. Expected one of: "
        "yyyy-MM-dd HH:mm, yyyy-MM-dd, dd/MM/yyyy HH:mm, dd/MM/yyyy"
    )


def parse_storage_format(text: str) -> datetime:
    """Parse the canonical on-disk format, e.g. "Dec 02 2024, 6:00 pm"."""
    m = STORAGE_RE.match(text.strip())
    if not m:
        raise InvalidDateFormatError(f"Invalid stored date: {text!r}")

    month_name = m.group("month").capitalize()
    if month_name not in MONTHS:
        raise InvalidDateFormatError(f"Invalid stored date: {text!r}")

    hour = int(m.group("hour"))
    if not 1 <= hour <= 12:
        raise InvalidDateFormatError(f"Invalid stored date: {text!r}")
    hour %= 12
    if m.group("ampm").lower() == "pm":
        hour += 12

    try:
        return datetime(
            int(m.group("year")),
            MONTHS.index(month_name) + 1,
            int(m.group("day")),
            hour,
            int(m.group("minute")),
        )
    except ValueError as e:
        raise InvalidDateFormatError(f"Invalid stored date: {text!r}") from e


def format_timestamp(ts: datetime) -> str:
    """Render a timestamp as "MMM dd yyyy, h:mm a" (e.g. "Dec 02 2024, 6:00 pm")."""
    hour = ts.hour % 12 or 12
    ampm = "am" if ts.hour < 12 else "pm"
    return f"{MONTHS[ts.month - 1]} {ts.day:02d} {ts.year:04d}, {hour}:{ts.minute:02d} {ampm}"
