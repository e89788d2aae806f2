# TODO/todo_app.py
import typer
import dateparser
from rich.console import Console
from rich.markup import escape
from datetime import date
from pathlib import Path
from typing import Optional

from todocli import log
from todocli.CONFIG.config import Paths, load_config, resolve_paths
from todocli.TODO.errors import ParseError, PersistenceError, RecordNotFound, TodoError
from todocli.TODO.filters import filter_todos
from todocli.TODO.model import NoDeadline
from todocli.TODO.ordering import sort_todos
from todocli.TODO.parser import parse_priority, parse_todo
from todocli.TODO.render import DEFAULT_STYLE, render_line, render_table
from todocli.TODO.storage import archive_todos, load_table, write_todos
from todocli.TODO.table import TODOS, TodoTable

console = Console()

todo_app = typer.Typer(help="Manage a todo.txt task list.")


@todo_app.callback()
def todo_main_callback(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="The todo file. Defaults to ./todo.txt, then the config, then ~/todo.txt."),
    config: Optional[Path] = typer.Option(None, "--config", envvar="TODO_CONFIG", help="The config file. Defaults to ~/.todo-cfg.txt."),
):
    """
    Resolves the todo and archive files before any command runs.
    """
    ctx.obj = resolve_paths(file, load_config(config))


def fail(error: TodoError):
    """Reports a core failure and exits non-zero."""
    if isinstance(error, PersistenceError):
        log.err(f"failed to {error.phase} '{error.path}'", error.cause)
    elif isinstance(error, ParseError):
        log.err("invalid todo", error)
    elif isinstance(error, RecordNotFound):
        log.err("failed to find todo", error.search)
    else:
        log.err(error)
    raise typer.Exit(code=1)


def open_table(paths: Paths) -> TodoTable:
    try:
        return load_table(paths.source)
    except TodoError as e:
        fail(e)


def parse_when(when: str) -> date:
    """ISO date first, then natural language ("tomorrow", "next friday")."""
    try:
        return date.fromisoformat(when)
    except ValueError:
        parsed = dateparser.parse(when, settings={"PREFER_DATES_FROM": "future"})
        if parsed is None:
            log.err("could not parse due date", when)
            raise typer.Exit(code=1)
        log.info(f"due date '{when}' read as {parsed.date().isoformat()}")
        return parsed.date()


def show_todos(
    table: TodoTable,
    project: Optional[str] = None,
    context: Optional[str] = None,
    min_priority: Optional[str] = None,
    max_priority: Optional[str] = None,
    as_table: bool = False,
):
    try:
        minpri = parse_priority(min_priority) if min_priority else None
        maxpri = parse_priority(max_priority) if max_priority else None
    except ParseError as e:
        fail(e)

    todos = list(filter_todos(
        sort_todos(table.records(TODOS)),
        project=project,
        context=context,
        min_priority=minpri,
        max_priority=maxpri,
    ))

    if not todos:
        console.print("[yellow]No ToDo items found.[/yellow]")
        return

    if as_table:
        console.print(render_table(todos, DEFAULT_STYLE))
    else:
        for todo in todos:
            console.print(render_line(todo, DEFAULT_STYLE), soft_wrap=True)


@todo_app.command("list")
def list_todos(
    ctx: typer.Context,
    project: Optional[str] = typer.Option(None, "--project", help="Only todos with this project tag."),
    context: Optional[str] = typer.Option(None, "--context", help="Only todos with this context tag."),
    min_priority: Optional[str] = typer.Option(None, "--min-priority", "-p", help="Only todos at least this urgent (A is the most urgent)."),
    max_priority: Optional[str] = typer.Option(None, "--max-priority", "-P", help="Only todos at most this urgent; includes todos without a priority."),
    as_table: bool = typer.Option(False, "--table", "-t", help="Render as a table instead of todo.txt lines."),
):
    """List todos: open and due first, then by priority, deadline and age."""
    table = open_table(ctx.obj)
    show_todos(table, project, context, min_priority, max_priority, as_table)


@todo_app.command("add")
def add_todo(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="The todo, in todo.txt format. All metadata tags are parsed."),
    due: Optional[str] = typer.Option(None, "--due", "-d", help="Due date (YYYY-MM-DD or e.g. 'next friday'), ignored when the text has a due: tag."),
    list_after: bool = typer.Option(False, "--list", "-l", help="List todos afterwards."),
):
    """Add a new todo."""
    paths: Paths = ctx.obj
    table = open_table(paths)

    try:
        todo = parse_todo(text)
        if due and isinstance(todo.deadline, NoDeadline):
            todo = parse_todo(f"{text} due:{parse_when(due).isoformat()}")
        elif due:
            log.warn(f"'{text}' already has a due: tag, ignoring --due")
        table.add_record(todo, TODOS)
        write_todos(paths.source, table.records(TODOS))
    except TodoError as e:
        fail(e)

    console.print(f"[green]Added ToDo: '{escape(todo.description)}'[/green]")
    if list_after:
        show_todos(table)


@todo_app.command("complete")
def complete_todo_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="The todo's title; if nothing matches, its id: tag."),
    list_after: bool = typer.Option(False, "--list", "-l", help="List todos afterwards."),
):
    """Mark a todo as complete by its title or id."""
    paths: Paths = ctx.obj
    table = open_table(paths)

    try:
        todo = table.find(text, TODOS)
    except RecordNotFound as e:
        fail(e)

    if todo.completed:
        console.print(f"[yellow]ToDo '{escape(todo.title)}' is already marked as complete.[/yellow]")
        raise typer.Exit(code=0)

    todo.complete()
    try:
        write_todos(paths.source, table.records(TODOS))
    except PersistenceError as e:
        fail(e)

    console.print(f"[green]ToDo '{escape(todo.title)}' marked as complete.[/green]")
    if list_after:
        show_todos(table)


@todo_app.command("archive")
def archive_command(ctx: typer.Context):
    """Move completed todos into the archive file."""
    paths: Paths = ctx.obj
    table = open_table(paths)

    try:
        result = archive_todos(paths.source, paths.archive, table.records(TODOS))
    except PersistenceError as e:
        fail(e)

    if result.archived:
        console.print(f"[green]Archived {len(result.archived)} completed todo(s) to '{escape(str(paths.archive))}'.[/green]")
    else:
        console.print("[yellow]No completed todos to archive.[/yellow]")
