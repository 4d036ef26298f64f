"""Flat text file task storage adapter."""

import logging
from pathlib import Path

from jotter.core.errors import StorageReadError, StorageWriteError
from jotter.core.records import MalformedRecord, decode_record
from jotter.core.task_list import TaskList
from jotter.core.tasks import Task

logger = logging.getLogger(__name__)


class FileTaskStore:
    """
    Flat file task storage.

    Implements TaskStore protocol. One record per line, rewritten in full
    on every save. Loading skips lines it cannot decode, so a partly
    corrupted file still yields every readable task.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self.skipped: list[MalformedRecord] = []

    def ensure_exists(self) -> None:
        """Create the parent directory and an empty file if missing."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self.path.touch()
                logger.debug("Created task file %s", self.path)
        except OSError as e:
            logger.error("Failed to create task file %s: %s", self.path, e)
            raise StorageReadError(f"Could not create the task file {self.path}: {e}") from e

    def load(self) -> TaskList:
        """Read the file into a TaskList. Missing file -> empty list."""
        tasks = TaskList()
        self.skipped = []

        if not self.path.exists():
            logger.debug("No task file at %s, starting empty", self.path)
            return tasks

        try:
            raw_lines = self.path.read_bytes().splitlines()
        except OSError as e:
            logger.error("Failed to read tasks from %s: %s", self.path, e)
            raise StorageReadError(f"Could not read the task file {self.path}: {e}") from e

        # Lines are decoded one at a time so a bad byte only costs its own line
        for lineno, raw in enumerate(raw_lines, start=1):
            result = _decode_line(raw)
            if result is None:
                continue
            if isinstance(result, MalformedRecord):
                logger.warning("Skipping line %d of %s (%s): %s", lineno, self.path, result.reason, result.line)
                self.skipped.append(result)
                continue
            tasks.add(result)

        logger.debug("Loaded %d tasks from %s (%d skipped)", len(tasks), self.path, len(self.skipped))
        return tasks

    def save(self, tasks: TaskList) -> None:
        """Overwrite the file with the full task list."""
        try:
            self.path.write_text(tasks.format_for_storage(), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save tasks to %s: %s", self.path, e)
            raise StorageWriteError(f"Could not save the task list to {self.path}: {e}") from e


def _decode_line(raw: bytes) -> Task | MalformedRecord | None:
    """Decode one raw line; None for blank lines."""
    try:
        line = raw.decode("utf-8")
    except UnicodeDecodeError:
        return MalformedRecord(raw.decode("utf-8", errors="replace"), "invalid UTF-8")
    if not line.strip():
        return None
    return decode_record(line)
