"""Tests for parsing and rendering todo.txt lines."""

from datetime import date, datetime
import pytest

from todocli.TODO.errors import ParseError
from todocli.TODO.model import (
    AlwaysDeadline, DailyDeadline, DayDeadline, InstantDeadline, NoDeadline, Priority,
)
from todocli.TODO.parser import parse_priority, parse_todo

VALID_LINES = [
    "x Buy milk",
    "(A) Call mom due:2024-01-01",
    "x (B) 2024-01-02 Pay rent +home due:2024-02-01",
    "2024-03-04 Read a book @couch",
    "(C)   spaced   out   text",
    "Stand-up due:daily id:standup",
    "Water plants due:always",
    "Dentist due:2024-05-06T14:30",
    "Flight due:2024-05-06T14:30+02:00",
    "2024-01-01 (A) not a priority",
    "x x marks the spot",
    "see http://example.com for details",
]


def test_parse_full_line():
    todo = parse_todo("x (A) 2024-01-02 Call mom +family @phone id:7 due:2024-01-05")
    assert todo.completed
    assert todo.priority == Priority("A")
    assert todo.creation == date(2024, 1, 2)
    assert todo.deadline == DayDeadline(date(2024, 1, 5))
    assert todo.description == "Call mom +family @phone id:7 due:2024-01-05"
    assert todo.title == "Call mom +family @phone"
    assert todo.meta("id") == "7"
    assert todo.meta("missing") is None
    assert todo.projects == ["family"]
    assert todo.contexts == ["phone"]


def test_plain_line_has_no_markers():
    todo = parse_todo("Buy milk")
    assert not todo.completed
    assert todo.priority is None
    assert todo.creation is None
    assert todo.deadline == NoDeadline()


@pytest.mark.parametrize("line", VALID_LINES)
def test_render_parse_round_trip(line):
    todo = parse_todo(line)
    assert parse_todo(todo.render()) == todo


def test_render_is_canonical():
    todo = parse_todo("x   (A)  2024-01-02   Pay rent")
    assert todo.render() == "x (A) 2024-01-02 Pay rent"
    assert str(todo) == todo.render()


def test_date_after_priority_only():
    todo = parse_todo("2024-01-01 (A) not a priority")
    assert todo.priority is None
    assert todo.creation == date(2024, 1, 1)
    assert todo.description == "(A) not a priority"


@pytest.mark.parametrize("value, expected", [
    ("daily", DailyDeadline()),
    ("always", AlwaysDeadline()),
    ("ALWAYS", AlwaysDeadline()),
    ("2024-01-01", DayDeadline(date(2024, 1, 1))),
    ("2024-01-01T09:30", InstantDeadline(datetime(2024, 1, 1, 9, 30))),
])
def test_deadline_variants(value, expected):
    assert parse_todo(f"Something due:{value}").deadline == expected


def test_project_and_context_tags_as_meta():
    todo = parse_todo("Plan trip project:travel context:laptop")
    assert todo.has_project_tag("travel")
    assert todo.has_context_tag("laptop")
    assert not todo.has_project_tag("work")


@pytest.mark.parametrize("line, token", [
    ("Pay rent due:2024-13-01", "due:2024-13-01"),
    ("Pay rent due:soon", "due:soon"),
    ("Pay rent due:2024-01-01Tnoon", "due:2024-01-01Tnoon"),
    ("Pay rent due:daily due:always", "due:always"),
    ("2024-13-40 Pay rent", "2024-13-40"),
    ("Thing due:0001-01-01T00:00+05:00", "due:0001-01-01T00:00+05:00"),
    ("Thing due:9999-12-31T23:59-05:00", "due:9999-12-31T23:59-05:00"),
])
def test_malformed_lines(line, token):
    with pytest.raises(ParseError) as excinfo:
        parse_todo(line)
    assert excinfo.value.token == token
    assert excinfo.value.text == line


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_blank_line_is_an_error_for_the_parser(line):
    with pytest.raises(ParseError):
        parse_todo(line)


@pytest.mark.parametrize("line", ["Buy eggs\nx (A) Sneaked in", "Buy eggs\rx Done", "Buy eggs\u2028Other"])
def test_line_breaks_inside_a_todo_are_rejected(line):
    with pytest.raises(ParseError) as excinfo:
        parse_todo(line)
    assert excinfo.value.reason == "line break in todo"


@pytest.mark.parametrize("text, letter", [("a", "A"), ("B", "B"), ("(c)", "C"), (" z ", "Z")])
def test_parse_priority(text, letter):
    assert parse_priority(text) == Priority(letter)


@pytest.mark.parametrize("text", ["", "AB", "1", "(?)"])
def test_parse_priority_rejects(text):
    with pytest.raises(ParseError):
        parse_priority(text)


def test_complete_keeps_priority():
    todo = parse_todo("(B) Pay rent")
    todo.complete()
    assert todo.completed
    assert todo.priority == Priority("B")
    assert todo.render() == "x (B) Pay rent"


def test_due_is_derived_from_now():
    todo = parse_todo("Pay rent due:2024-01-10")
    assert not todo.due(datetime(2024, 1, 9, 23, 59))
    assert todo.due(datetime(2024, 1, 10))
    assert parse_todo("Meeting due:2024-01-10T10:00").due(datetime(2024, 1, 10, 10, 0))
    assert not parse_todo("Meeting due:2024-01-10T10:00").due(datetime(2024, 1, 10, 9, 59))
    assert parse_todo("Stretch due:daily").due(datetime(2000, 1, 1))
    assert parse_todo("Breathe due:always").due()
    assert not parse_todo("Someday").due()
