# TODO/model.py
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional, Tuple, Union

PRIORITY_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
TAG_RE = re.compile(r"^(\w[\w-]*):(\S+)$")


@dataclass(frozen=True)
class Priority:
    """A todo.txt priority letter; "A" is the most urgent."""
    letter: str

    def __post_init__(self):
        if len(self.letter) != 1 or self.letter not in PRIORITY_LETTERS:
            raise ValueError(f"priority must be a single letter A-Z, got {self.letter!r}")

    @property
    def rank(self) -> int:
        return PRIORITY_LETTERS.index(self.letter)

    def __str__(self):
        return f"({self.letter})"


def priority_cmp(a: Optional[Priority], b: Optional[Priority]) -> int:
    """Order by urgency: A before B before ... before no priority."""
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1
    return (a.rank > b.rank) - (a.rank < b.rank)


def at_least(priority: Optional[Priority], bound: Priority) -> bool:
    # No priority is never "at least" anything.
    return priority is not None and priority.rank <= bound.rank


def at_most(priority: Optional[Priority], bound: Priority) -> bool:
    # No priority is the weakest, so it is always "at most" the bound.
    return priority is None or priority.rank >= bound.rank


# --- Deadlines: one frozen class per variant ---

@dataclass(frozen=True)
class NoDeadline:
    def is_due(self, now: datetime) -> bool:
        return False


@dataclass(frozen=True)
class DayDeadline:
    day: date

    def is_due(self, now: datetime) -> bool:
        return self.day <= now.date()


@dataclass(frozen=True)
class DailyDeadline:
    def is_due(self, now: datetime) -> bool:
        return True


@dataclass(frozen=True)
class InstantDeadline:
    at: datetime  # naive, local time

    def is_due(self, now: datetime) -> bool:
        if now.tzinfo is not None:
            now = now.astimezone().replace(tzinfo=None)
        return self.at <= now


@dataclass(frozen=True)
class AlwaysDeadline:
    def is_due(self, now: datetime) -> bool:
        return True


Deadline = Union[NoDeadline, DayDeadline, DailyDeadline, InstantDeadline, AlwaysDeadline]


@dataclass
class Todo:
    description: str
    completed: bool = False
    priority: Optional[Priority] = None
    creation: Optional[date] = None
    deadline: Deadline = field(default_factory=NoDeadline)

    # --- tags ---
    def tags(self) -> List[Tuple[str, str]]:
        """All `key:value` tags, in the order they appear."""
        found = []
        for token in self.description.split():
            match = TAG_RE.match(token)
            if match:
                found.append((match.group(1), match.group(2)))
        return found

    def meta(self, key: str) -> Optional[str]:
        for tag_key, value in self.tags():
            if tag_key == key:
                return value
        return None

    @property
    def title(self) -> str:
        return " ".join(t for t in self.description.split() if not TAG_RE.match(t))

    @property
    def projects(self) -> List[str]:
        words = self.description.split()
        found = [w[1:] for w in words if w.startswith("+") and len(w) > 1]
        found += [v for k, v in self.tags() if k == "project"]
        return found

    @property
    def contexts(self) -> List[str]:
        words = self.description.split()
        found = [w[1:] for w in words if w.startswith("@") and len(w) > 1]
        found += [v for k, v in self.tags() if k == "context"]
        return found

    def has_project_tag(self, project: str) -> bool:
        return project in self.projects

    def has_context_tag(self, context: str) -> bool:
        return context in self.contexts

    # --- state ---
    def due(self, now: Optional[datetime] = None) -> bool:
        """Whether the todo currently counts as due; derived, never stored."""
        return self.deadline.is_due(now or datetime.now())

    def complete(self) -> None:
        self.completed = True

    def render(self) -> str:
        """Canonical todo.txt line for this record (no trailing newline)."""
        parts = []
        if self.completed:
            parts.append("x")
        if self.priority is not None:
            parts.append(str(self.priority))
        if self.creation is not None:
            parts.append(self.creation.isoformat())
        parts.append(self.description)
        return " ".join(parts)

    def __str__(self):
        return self.render()
