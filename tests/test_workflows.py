"""Tests for the shared command layer."""

from datetime import datetime

import pytest

from jotter.adapters.file_store import FileTaskStore
from jotter.core.errors import IndexOutOfRangeError, InvalidDateFormatError, StorageWriteError
from jotter.core.task_list import TaskList
from jotter.core.tasks import Deadline, Event, Todo
from jotter.parser import AddDeadline, AddTodo, Mark
from jotter.workflows import FAREWELL, Session, format_list


class FakeStore:
    """In-memory TaskStore that can be told to fail on save."""

    def __init__(self, tasks=None, fail_save=False):
        self.saved: list[str] = []
        self.initial = tasks or TaskList()
        self.fail_save = fail_save
        self.ensured = False

    def ensure_exists(self) -> None:
        self.ensured = True

    def load(self) -> TaskList:
        return TaskList(self.initial)

    def save(self, tasks: TaskList) -> None:
        if self.fail_save:
            raise StorageWriteError("disk is read-only")
        self.saved.append(tasks.format_for_storage())


@pytest.fixture
def store():
    return FakeStore(TaskList([Todo("read book"), Todo("write essay"), Todo("call mum")]))


@pytest.fixture
def session(store):
    return Session(store)


class TestSessionStartup:
    def test_ensures_then_loads(self, store):
        session = Session(store)
        assert store.ensured
        assert len(session.tasks) == 3

    def test_loads_from_file(self, tmp_path):
        path = tmp_path / "tasks.txt"
        path.write_text("T | X | read book\nnonsense\n")
        session = Session(FileTaskStore(path))
        assert len(session.tasks) == 1


class TestHandle:
    def test_todo_added_and_saved(self, session, store):
        reply = session.handle("todo buy milk")
        assert not reply.error
        assert "[T][ ] buy milk" in reply.text
        assert "Now you have 4 tasks" in reply.text
        assert store.saved[-1].endswith("T |  | buy milk")

    def test_deadline_parses_date(self, session):
        reply = session.handle("deadline submit report /by 2024-12-02")
        assert "(by: Dec 02 2024, 11:59 pm)" in reply.text
        assert session.tasks.get(4) == Deadline("submit report", datetime(2024, 12, 2, 23, 59))

    def test_event_keeps_raw_strings(self, session):
        session.handle("event meetup /from Mon 2pm /to 4pm")
        assert session.tasks.get(4) == Event("meetup", "Mon 2pm", "4pm")

    def test_mark_unmark(self, session, store):
        reply = session.handle("mark 2")
        assert "[T][X] write essay" in reply.text
        assert "T | X | write essay" in store.saved[-1]

        session.handle("unmark 2")
        assert session.tasks.get(2).done is False

    def test_delete_shifts(self, session):
        reply = session.handle("delete 2")
        assert "write essay" in reply.text
        assert "Now you have 2 tasks" in reply.text
        assert session.tasks.get(2).description == "call mum"

    def test_list(self, session, store):
        reply = session.handle("list")
        assert "1. [T][ ] read book" in reply.text
        assert "3. [T][ ] call mum" in reply.text
        assert store.saved == []

    def test_bye(self, session):
        reply = session.handle("bye")
        assert reply.done
        assert reply.text == FAREWELL


class TestFailures:
    @pytest.mark.parametrize(
        "line, fragment",
        [
            ("todo", "description"),
            ("deadline report", "/by"),
            ("deadline report /by someday", "Invalid date format"),
            ("mark 0", "no task 0"),
            ("delete 4", "no task 4"),
            ("dance", "don't know"),
            ("todo buy milk | eggs", "cannot contain"),
        ],
    )
    def test_distinct_messages_and_list_unchanged(self, session, store, line, fragment):
        before = session.tasks.format_for_storage()
        reply = session.handle(line)
        assert reply.error
        assert not reply.done
        assert fragment in reply.text
        assert session.tasks.format_for_storage() == before
        assert store.saved == []

    def test_execute_raises_typed_errors(self, session):
        with pytest.raises(IndexOutOfRangeError):
            session.execute(Mark(7))
        with pytest.raises(InvalidDateFormatError):
            session.execute(AddDeadline("report", "not-a-date"))

    def test_save_failure_keeps_in_memory_change(self):
        session = Session(FakeStore(fail_save=True))
        reply = session.run(AddTodo("buy milk"))
        assert reply.error
        assert "disk is read-only" in reply.text
        assert "buy milk" in reply.text
        assert len(session.tasks) == 1

        session.run(AddTodo("buy eggs"))
        assert len(session.tasks) == 2


class TestFormatList:
    def test_empty(self):
        assert format_list(TaskList()) == "Your task list is empty."
