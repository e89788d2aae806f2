# TODO/render.py
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from rich import box
from rich.table import Table
from rich.text import Text

from todocli.TODO.model import (
    AlwaysDeadline, DailyDeadline, DayDeadline, InstantDeadline, Todo, TAG_RE,
)


@dataclass(frozen=True)
class StyleScheme:
    """Rich styles used to colour a todo; passed explicitly to the renderers."""
    completed: str = "strike dim"
    due: str = "red bold"
    priority: str = "bold yellow"
    date: str = "cyan"
    project: str = "magenta"
    context: str = "green"
    tag: str = "blue italic"


DEFAULT_STYLE = StyleScheme()


def _token_style(token: str, scheme: StyleScheme) -> str:
    if token.startswith("+") and len(token) > 1:
        return scheme.project
    if token.startswith("@") and len(token) > 1:
        return scheme.context
    if TAG_RE.match(token):
        return scheme.tag
    return ""


def render_line(todo: Todo, scheme: StyleScheme = DEFAULT_STYLE, now: Optional[datetime] = None) -> Text:
    """One todo as a coloured todo.txt line."""
    text = Text()
    if todo.completed:
        text.append("x ", style=scheme.completed)
    if todo.priority is not None:
        text.append(f"{todo.priority} ", style=scheme.priority)
    if todo.creation is not None:
        text.append(f"{todo.creation.isoformat()} ", style=scheme.date)

    words = todo.description.split(" ")
    for i, word in enumerate(words):
        if i:
            text.append(" ")
        text.append(word, style=_token_style(word, scheme))

    if todo.completed:
        text.stylize(scheme.completed)
    elif todo.due(now):
        text.stylize(scheme.due)
    return text


def deadline_label(todo: Todo) -> str:
    deadline = todo.deadline
    if isinstance(deadline, DayDeadline):
        return deadline.day.strftime("%d-%m-%Y")
    if isinstance(deadline, InstantDeadline):
        return deadline.at.strftime("%d-%m-%Y %H:%M")
    if isinstance(deadline, DailyDeadline):
        return "daily"
    if isinstance(deadline, AlwaysDeadline):
        return "always"
    return "-"


def render_table(todos: Iterable[Todo], scheme: StyleScheme = DEFAULT_STYLE, now: Optional[datetime] = None) -> Table:
    table = Table(
        title="[bold cyan]Your ToDo List[/bold cyan]",
        show_header=True,
        header_style="bold magenta",
        box=box.ROUNDED,
    )
    table.add_column("Status", justify="center")
    table.add_column("Priority", justify="center")
    table.add_column("Task", justify="left")
    table.add_column("Due", justify="center")
    table.add_column("Added", justify="center")

    for todo in todos:
        if todo.completed:
            row_style = scheme.completed
            status = Text("✔ Done", style="green")
        elif todo.due(now):
            row_style = ""
            status = Text("Due", style=scheme.due)
        else:
            row_style = ""
            status = Text("Open", style="white")

        table.add_row(
            status,
            Text(todo.priority.letter if todo.priority else "-", style=scheme.priority),
            Text(todo.title, style=row_style),
            Text(deadline_label(todo), style=row_style),
            Text(todo.creation.strftime("%d-%m-%Y") if todo.creation else "-", style=row_style),
        )
    return table
