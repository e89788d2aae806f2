# CONFIG/config_app.py
import typer
from rich import box
from rich.console import Console
from rich.table import Table
from pathlib import Path
from typing import Optional

from todocli.CONFIG.config import default_config_path, load_config, resolve_paths

console = Console()

config_app = typer.Typer(help="Inspect the todo configuration.")


@config_app.command("show")
def show_config(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="The todo file, as passed to `todo`."),
    config: Optional[Path] = typer.Option(None, "--config", envvar="TODO_CONFIG", help="The config file."),
):
    """Show which config, todo and archive files would be used."""
    config_path = config or default_config_path()
    paths = resolve_paths(file, load_config(config_path))

    table = Table(show_header=True, header_style="bold magenta", box=box.ROUNDED)
    table.add_column("Setting", style="dim")
    table.add_column("Path", justify="left")
    table.add_row("config", str(config_path))
    table.add_row("source", str(paths.source))
    table.add_row("archive", str(paths.archive))
    console.print(table)
