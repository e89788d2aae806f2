"""Tests for the todo table and its lookups."""

import pytest

from todocli.TODO.errors import DuplicateColumn, RecordNotFound, UnknownColumn
from todocli.TODO.parser import parse_todo
from todocli.TODO.table import TODOS, TodoTable


@pytest.fixture
def table():
    table = TodoTable()
    table.add_column(TODOS)
    for line in [
        "(A) Call mom due:2024-01-01 id:1",
        "Water plants id:42",
        "x Call mom id:2",
        "Pay rent +home",
    ]:
        table.add_record(parse_todo(line), TODOS)
    return table


def test_add_column_twice_fails():
    table = TodoTable("Config")
    table.add_column("Config")
    with pytest.raises(DuplicateColumn):
        table.add_column("Config")


def test_add_record_to_unknown_column_fails():
    table = TodoTable()
    with pytest.raises(UnknownColumn):
        table.add_record(parse_todo("Something"), TODOS)


def test_find_by_title_returns_first_match(table):
    todo = table.find_by_title("Call mom", TODOS)
    assert todo is table.records(TODOS)[0]
    assert table.find_by_title("Pay rent +home", TODOS).description == "Pay rent +home"
    assert table.find_by_title("Call", TODOS) is None


def test_find_by_meta(table):
    assert table.find_by_meta(TODOS, "id", "2").completed
    assert table.find_by_meta(TODOS, "id", "99") is None
    assert table.find_by_meta(TODOS, "due", "2024-01-01").meta("id") == "1"


def test_find_falls_back_to_id(table):
    todo = table.find("42", TODOS)
    assert todo.title == "Water plants"
    todo.complete()
    assert table.records(TODOS)[1].completed


def test_find_reports_the_search_text(table):
    with pytest.raises(RecordNotFound) as excinfo:
        table.find("Feed the cat", TODOS)
    assert excinfo.value.search == "Feed the cat"


def test_column_is_a_snapshot(table):
    snapshot = table.column(TODOS)
    assert isinstance(snapshot, tuple)
    table.add_record(parse_todo("New one"), TODOS)
    assert len(snapshot) == 4
    assert len(table.column(TODOS)) == 5
    assert table.column("Missing") is None


def test_shared_record_format_for_config():
    table = TodoTable("Config")
    table.add_column("Config")
    table.add_record(parse_todo("source path:~/todo.txt"), "Config")
    entry = table.find_by_title("source", "Config")
    assert entry.meta("path") == "~/todo.txt"
    assert len(table) == 1
