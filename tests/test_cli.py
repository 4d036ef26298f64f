"""Tests for the click front end."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from jotter.cli import main


@pytest.fixture(autouse=True)
def no_user_config(tmp_path):
    with patch("jotter.config.CONFIG_FILE", tmp_path / "absent.conf"):
        yield


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def task_file(tmp_path):
    return tmp_path / "data" / "tasks.txt"


def invoke(runner, task_file, *args, **kwargs):
    return runner.invoke(main, ["--file", str(task_file), *args], **kwargs)


class TestSubcommands:
    def test_todo_creates_file(self, runner, task_file):
        result = invoke(runner, task_file, "todo", "read", "book")
        assert result.exit_code == 0
        assert "[T][ ] read book" in result.output
        assert task_file.read_text() == "T |  | read book"

    def test_deadline(self, runner, task_file):
        result = invoke(runner, task_file, "deadline", "submit report", "--by", "02/12/2024 18:00")
        assert result.exit_code == 0
        assert task_file.read_text() == "D |  | submit report | Dec 02 2024, 6:00 pm"

    def test_event(self, runner, task_file):
        result = invoke(runner, task_file, "event", "meetup", "--from", "Mon 2pm", "--to", "4pm")
        assert result.exit_code == 0
        assert task_file.read_text() == "E |  | meetup | Mon 2pm | 4pm"

    def test_mark_list_delete(self, runner, task_file):
        task_file.parent.mkdir(parents=True)
        task_file.write_text("T |  | one\nT |  | two\nT |  | three")

        assert invoke(runner, task_file, "mark", "3").exit_code == 0
        assert invoke(runner, task_file, "delete", "1").exit_code == 0

        result = invoke(runner, task_file, "list")
        assert result.exit_code == 0
        assert "1. [T][ ] two" in result.output
        assert "2. [T][X] three" in result.output

        assert invoke(runner, task_file, "unmark", "2").exit_code == 0
        assert task_file.read_text() == "T |  | two\nT |  | three"

    def test_path(self, runner, task_file):
        result = invoke(runner, task_file, "path")
        assert result.output.strip() == str(task_file.resolve())


class TestSubcommandErrors:
    def test_out_of_range(self, runner, task_file):
        result = invoke(runner, task_file, "mark", "1")
        assert result.exit_code == 1
        assert "no task 1" in result.output

    def test_bad_date(self, runner, task_file):
        result = invoke(runner, task_file, "deadline", "report", "--by", "someday")
        assert result.exit_code == 1
        assert "Invalid date format" in result.output

    def test_missing_by(self, runner, task_file):
        result = invoke(runner, task_file, "deadline", "report")
        assert result.exit_code == 1
        assert "/by" in result.output

    def test_bar_in_description(self, runner, task_file):
        result = invoke(runner, task_file, "todo", "buy milk | eggs")
        assert result.exit_code == 1
        assert "cannot contain" in result.output
        assert not task_file.exists()

    def test_task_file_cannot_be_created(self, runner, task_file):
        with patch("pathlib.Path.mkdir", side_effect=PermissionError("read-only")):
            result = invoke(runner, task_file, "list")
        assert result.exit_code == 1
        assert "Error: Could not create the task file" in result.output

    def test_empty_todo(self, runner, task_file):
        result = invoke(runner, task_file, "todo")
        assert result.exit_code == 1
        assert "description" in result.output


class TestShell:
    def test_session_until_bye(self, runner, task_file):
        result = invoke(
            runner,
            task_file,
            input="todo read book\ndeadline report /by 2024-12-02\nmark 1\nmark 9\nlist\nbye\n",
        )
        assert result.exit_code == 0
        assert "Hello!" in result.output
        assert "no task 9" in result.output
        assert "2. [D][ ] report (by: Dec 02 2024, 11:59 pm)" in result.output
        assert "Bye." in result.output
        assert task_file.read_text() == "T | X | read book\nD |  | report | Dec 02 2024, 11:59 pm"

    def test_ends_on_eof(self, runner, task_file):
        result = invoke(runner, task_file, "shell", input="todo read book\n")
        assert result.exit_code == 0
        assert task_file.read_text() == "T |  | read book"
