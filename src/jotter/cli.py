"""Jotter CLI - Personal Task Tracker."""

import logging
import sys

import click

from .adapters.file_store import FileTaskStore
from .config import load_config, resolve_data_file
from .core.errors import TaskError
from .parser import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Command,
    Delete,
    ListTasks,
    Mark,
    Unmark,
    require_description,
    require_field,
)
from .workflows import GREETING, Reply, Session


def _open_session(ctx: click.Context) -> Session:
    try:
        return Session(FileTaskStore(ctx.obj["file"]))
    except TaskError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _echo_reply(reply: Reply) -> None:
    if reply.error:
        click.echo(f"Error: {reply.text}", err=True)
    else:
        click.echo(reply.text)


def _run(ctx: click.Context, command: Command) -> None:
    """Run a single command and exit non-zero if it failed."""
    session = _open_session(ctx)
    try:
        reply = session.execute(command)
    except TaskError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _echo_reply(reply)
    if reply.error:
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option()
@click.option("--file", "-f", "data_file", default=None, type=click.Path(dir_okay=False),
              help="Path to the task file")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, data_file: str | None, debug: bool):
    """Jotter - Personal Task Tracker.

    Run without a command to start the interactive shell.
    """
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else config.log_level,
    )

    ctx.ensure_object(dict)
    ctx.obj["file"] = data_file or str(resolve_data_file(config))

    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@main.command()
@click.pass_context
def shell(ctx):
    """Interactive shell: type commands, 'bye' to quit."""
    session = _open_session(ctx)
    click.echo(GREETING)

    while True:
        try:
            line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
        except (EOFError, click.Abort):
            click.echo()
            break

        if not line.strip():
            continue

        reply = session.handle(line)
        _echo_reply(reply)
        if reply.done:
            break


@main.command("list")
@click.pass_context
def list_tasks(ctx):
    """List all tasks."""
    _run(ctx, ListTasks())


@main.command()
@click.argument("description", nargs=-1)
@click.pass_context
def todo(ctx, description: tuple[str, ...]):
    """Add a todo."""
    try:
        command = AddTodo(require_description(" ".join(description), "todo"))
    except TaskError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _run(ctx, command)


@main.command()
@click.argument("description", nargs=-1)
@click.option("--by", "due", default=None, help="Due date, e.g. 2024-12-02 18:00 or 02/12/2024")
@click.pass_context
def deadline(ctx, description: tuple[str, ...], due: str | None):
    """Add a deadline."""
    try:
        command = AddDeadline(
            require_description(" ".join(description), "deadline"),
            require_field(due, "/by", "deadline"),
        )
    except TaskError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _run(ctx, command)


@main.command()
@click.argument("description", nargs=-1)
@click.option("--from", "start", default=None, help="Start, stored as typed")
@click.option("--to", "end", default=None, help="End, stored as typed")
@click.pass_context
def event(ctx, description: tuple[str, ...], start: str | None, end: str | None):
    """Add an event."""
    try:
        command = AddEvent(
            require_description(" ".join(description), "event"),
            require_field(start, "/from", "event"),
            require_field(end, "/to", "event"),
        )
    except TaskError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _run(ctx, command)


@main.command()
@click.argument("position", type=int)
@click.pass_context
def mark(ctx, position: int):
    """Mark a task as done."""
    _run(ctx, Mark(position))


@main.command()
@click.argument("position", type=int)
@click.pass_context
def unmark(ctx, position: int):
    """Mark a task as not done."""
    _run(ctx, Unmark(position))


@main.command()
@click.argument("position", type=int)
@click.pass_context
def delete(ctx, position: int):
    """Delete a task."""
    _run(ctx, Delete(position))


@main.command()
@click.pass_context
def path(ctx):
    """Show the path to the task file."""
    click.echo(FileTaskStore(ctx.obj["file"]).path.resolve())


if __name__ == "__main__":
    main()
