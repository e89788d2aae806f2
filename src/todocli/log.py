# log.py
from typing import Optional

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True)


def info(msg) -> None:
    err_console.print(f"[cyan]{escape(str(msg))}[/cyan]")


def warn(msg) -> None:
    err_console.print(f"[bold yellow]Warning: {escape(str(msg))}[/bold yellow]")


def err(msg, cause: Optional[object] = None) -> None:
    if cause is None:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(msg))}")
    else:
        err_console.print(f"[bold red]Error: {escape(str(msg))}:[/bold red] [italic red]{escape(str(cause))}[/italic red]")
