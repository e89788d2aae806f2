# TODO/table.py
from typing import Dict, List, Optional, Tuple

from todocli.TODO.errors import DuplicateColumn, RecordNotFound, UnknownColumn
from todocli.TODO.model import Todo

TODOS = "Todos"


class TodoTable:
    """Named columns of todos, each kept in insertion order.

    The same structure backs the task list ("Todos") and the config
    pseudo-table ("Config"), since both use the record-line format.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self.columns: Dict[str, List[Todo]] = {}

    def add_column(self, name: str) -> None:
        if name in self.columns:
            raise DuplicateColumn(name)
        self.columns[name] = []

    def add_record(self, record: Todo, column: str) -> None:
        self.records(column).append(record)

    def records(self, column: str) -> List[Todo]:
        """The live list behind a column; mutations show up in the table."""
        try:
            return self.columns[column]
        except KeyError:
            raise UnknownColumn(column)

    def column(self, name: str) -> Optional[Tuple[Todo, ...]]:
        if name not in self.columns:
            return None
        return tuple(self.columns[name])

    def find_by_title(self, text: str, column: str) -> Optional[Todo]:
        for todo in self.records(column):
            if todo.title == text:
                return todo
        return None

    def find_by_meta(self, column: str, key: str, value: str) -> Optional[Todo]:
        for todo in self.records(column):
            if todo.meta(key) == value:
                return todo
        return None

    def find(self, text: str, column: str) -> Todo:
        """Look a todo up by title, falling back to its `id:` tag."""
        todo = self.find_by_title(text, column)
        if todo is None:
            todo = self.find_by_meta(column, "id", text)
        if todo is None:
            raise RecordNotFound(text)
        return todo

    def __len__(self):
        return sum(len(todos) for todos in self.columns.values())

    def __repr__(self):
        counts = ", ".join(f"{name}: {len(todos)}" for name, todos in self.columns.items())
        return f"<TodoTable(name={self.name!r}, {counts})>"
