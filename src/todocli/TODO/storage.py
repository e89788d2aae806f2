# TODO/storage.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

from todocli.TODO.errors import ParseError, PersistenceError
from todocli.TODO.model import Todo
from todocli.TODO.parser import parse_todo
from todocli.TODO.table import TODOS, TodoTable

PathLike = Union[str, Path]


@dataclass
class ArchiveResult:
    kept: List[Todo] = field(default_factory=list)
    archived: List[Todo] = field(default_factory=list)


def read_text(path: PathLike) -> str:
    """Reads a todo file. A file that does not exist is an empty list."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return ""
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceError(path, "read", e)


def parse_lines(text: str) -> List[Todo]:
    """Parses every non-blank line; the first malformed one aborts the load."""
    todos = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            todos.append(parse_todo(line))
        except ParseError as e:
            e.line_no = line_no
            raise
    return todos


def load_table(path: PathLike, column: str = TODOS) -> TodoTable:
    table = TodoTable()
    table.add_column(column)
    for todo in parse_lines(read_text(path)):
        table.add_record(todo, column)
    return table


def _write_lines(path: PathLike, todos: Iterable[Todo], mode: str, phase: str) -> None:
    try:
        with open(path, mode, encoding="utf-8") as f:
            for todo in todos:
                f.write(todo.render() + "\n")
    except OSError as e:
        raise PersistenceError(path, phase, e)


def write_todos(path: PathLike, todos: Iterable[Todo]) -> None:
    """Truncates the file and writes the todos in the order given."""
    _write_lines(path, todos, "w", "write")


def append_todos(path: PathLike, todos: Iterable[Todo]) -> None:
    """Appends to the file, creating it when absent."""
    _write_lines(path, todos, "a", "archive-append")


def archive_todos(path: PathLike, archive_path: PathLike, todos: Iterable[Todo]) -> ArchiveResult:
    """
    Moves completed todos out of the source file into the archive.
    The source is rewritten with the open todos, then the completed ones are
    appended to the archive. A failure in the second step leaves the first
    one in place.
    """
    result = ArchiveResult()
    for todo in todos:
        if todo.completed:
            result.archived.append(todo)
        else:
            result.kept.append(todo)

    write_todos(path, result.kept)
    append_todos(archive_path, result.archived)
    return result
