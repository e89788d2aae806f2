# CONFIG/config.py
"""
Config file handling.

The config uses the todo.txt line format itself, e.g.

    source path:~/todo.txt
    archive path:~/todo.archive.txt

A missing or malformed entry is reported as a warning and falls back to
its default. A config file that does not exist is not an error.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from todocli import log
from todocli.TODO.errors import ParseError, PersistenceError
from todocli.TODO.parser import parse_todo
from todocli.TODO.storage import read_text
from todocli.TODO.table import TodoTable

CONFIG_COLUMN = "Config"
CONFIG_FILE_NAME = ".todo-cfg.txt"
TODO_FILE_NAME = "todo.txt"
ARCHIVE_SUFFIX = ".archive"
CONFIG_KEYS = ("source", "archive")


@dataclass
class Config:
    source: Optional[str] = None
    archive: Optional[str] = None


@dataclass
class Paths:
    source: Path
    archive: Path


def expand_home(path: Union[str, Path]) -> Path:
    return Path(os.path.expanduser(str(path)))


def default_config_path() -> Path:
    return expand_home(f"~/{CONFIG_FILE_NAME}")


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    path = Path(path) if path else default_config_path()
    config = Config()

    try:
        text = read_text(path)
    except PersistenceError as e:
        log.warn(f"could not read config '{path}' ({e.cause}), using defaults")
        return config

    table = TodoTable(CONFIG_COLUMN)
    table.add_column(CONFIG_COLUMN)
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            table.add_record(parse_todo(line), CONFIG_COLUMN)
        except ParseError as e:
            log.warn(f"invalid config line {line_no} ({e.reason}), skipping")

    for key in CONFIG_KEYS:
        entry = table.find_by_title(key, CONFIG_COLUMN)
        if entry is None:
            if path.exists():
                log.warn(f"no `{key}` item in config '{path}', using the default")
            continue
        value = entry.meta("path")
        if value:
            setattr(config, key, value)
        else:
            log.warn(f"invalid `{key}` item in config, skipping")

    return config


def resolve_paths(file: Optional[Union[str, Path]] = None, config: Optional[Config] = None) -> Paths:
    """
    Picks the source and archive files, in order of precedence:
    an explicit --file, a todo.txt in the working directory, the config,
    then ~/todo.txt.
    """
    config = config or Config()

    if file:
        source = expand_home(file)
        return Paths(source, source.with_name(source.name + ARCHIVE_SUFFIX))

    if Path(TODO_FILE_NAME).exists():
        source = Path(TODO_FILE_NAME)
        return Paths(source, Path(TODO_FILE_NAME + ARCHIVE_SUFFIX))

    if config.source:
        source = expand_home(config.source)
        if config.archive:
            return Paths(source, expand_home(config.archive))
        return Paths(source, source.with_name(source.name + ARCHIVE_SUFFIX))

    source = expand_home(f"~/{TODO_FILE_NAME}")
    if config.archive:
        return Paths(source, expand_home(config.archive))
    return Paths(source, expand_home(f"~/{TODO_FILE_NAME}{ARCHIVE_SUFFIX}"))
