# TODO/parser.py
import re
from datetime import date

from dateutil.parser import isoparse

from todocli.TODO.errors import ParseError
from todocli.TODO.model import (
    AlwaysDeadline, DailyDeadline, DayDeadline, Deadline, InstantDeadline,
    NoDeadline, Priority, Todo, TAG_RE,
)

COMPLETED_RE = re.compile(r"^x\s+")
PRIORITY_RE = re.compile(r"^\(([A-Z])\)\s+")
CREATION_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})\s+")
DAY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DUE_KEY = "due"


def parse_deadline(value: str, line: str) -> Deadline:
    """Turn the value of a `due:` tag into one deadline variant."""
    lowered = value.lower()
    if lowered == "always":
        return AlwaysDeadline()
    if lowered == "daily":
        return DailyDeadline()
    if DAY_RE.match(value):
        try:
            return DayDeadline(date.fromisoformat(value))
        except ValueError:
            raise ParseError(line, f"{DUE_KEY}:{value}", "invalid due date")
    if "T" in value:
        try:
            at = isoparse(value)
            if at.tzinfo is not None:
                at = at.astimezone().replace(tzinfo=None)
        except (ValueError, OverflowError):
            raise ParseError(line, f"{DUE_KEY}:{value}", "invalid due time")
        return InstantDeadline(at)
    raise ParseError(line, f"{DUE_KEY}:{value}", "unknown due value")


def parse_todo(line: str) -> Todo:
    """Parse one todo.txt line. The caller skips blank lines."""
    original = line
    rest = line.strip()
    if not rest:
        raise ParseError(original, reason="empty line")
    if len(rest.splitlines()) > 1:
        raise ParseError(original, reason="line break in todo")

    completed = False
    match = COMPLETED_RE.match(rest)
    if match:
        completed = True
        rest = rest[match.end():]

    priority = None
    match = PRIORITY_RE.match(rest)
    if match:
        priority = Priority(match.group(1))
        rest = rest[match.end():]

    creation = None
    match = CREATION_RE.match(rest)
    if match:
        try:
            creation = date.fromisoformat(match.group(1))
        except ValueError:
            raise ParseError(original, match.group(1), "invalid creation date")
        rest = rest[match.end():]

    deadline: Deadline = NoDeadline()
    seen_due = False
    for token in rest.split():
        tag = TAG_RE.match(token)
        if not tag or tag.group(1) != DUE_KEY:
            continue
        if seen_due:
            raise ParseError(original, token, "more than one deadline")
        seen_due = True
        deadline = parse_deadline(tag.group(2), original)

    return Todo(
        description=rest,
        completed=completed,
        priority=priority,
        creation=creation,
        deadline=deadline,
    )


def parse_priority(text: str) -> Priority:
    """Parse a priority given on the command line: `a`, `B` or `(C)`."""
    letter = text.strip().strip("()").upper()
    try:
        return Priority(letter)
    except ValueError:
        raise ParseError(text, text, "invalid priority")
