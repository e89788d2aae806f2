# TODO/errors.py
from typing import Optional


class TodoError(Exception):
    """Base class for every failure the todo core reports."""


class ParseError(TodoError):
    def __init__(self, text: str, token: Optional[str] = None, reason: str = "malformed todo", line_no: Optional[int] = None):
        self.text = text
        self.token = token
        self.reason = reason
        self.line_no = line_no
        super().__init__(str(self))

    def __str__(self):
        where = f"line {self.line_no}: " if self.line_no is not None else ""
        if self.token:
            return f"{where}{self.reason} '{self.token}' in '{self.text}'"
        return f"{where}{self.reason} in '{self.text}'"


class UnknownColumn(TodoError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no column named '{name}'")


class DuplicateColumn(TodoError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"column '{name}' already exists")


class RecordNotFound(TodoError):
    def __init__(self, search: str):
        self.search = search
        super().__init__(f"no todo matches '{search}' (by title or id)")


class PersistenceError(TodoError):
    """An I/O failure; `phase` is one of "read", "write" or "archive-append"."""

    def __init__(self, path, phase: str, cause: Exception):
        self.path = path
        self.phase = phase
        self.cause = cause
        super().__init__(f"{phase} failed for '{path}': {cause}")
