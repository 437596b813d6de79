"""Integration tests: bind → render → execute against a real SQLite in-memory DB.

Covers the create/find round trip, NULL handling in both null styles,
partial filters, the unfiltered ``match_all`` query, typed-column validation
in both modes, and driver error propagation.
"""
from __future__ import annotations

import sqlite3

import pytest

from rowbind import (
    BindingValidationError,
    EmptyFilterError,
    ExecutionError,
    MapperConfig,
    TableMap,
    from_int,
    from_string,
)
from tests.fixtures import Message


def _fetch_all(db: sqlite3.Connection) -> list[tuple]:
    return db.execute("SELECT id, title, body FROM messages ORDER BY rowid").fetchall()


def _find(db: sqlite3.Connection, probe: Message, **overrides) -> list[Message]:
    found: list[Message] = []
    probe.to_table_map(db, **overrides).find(lambda row: found.append(Message(*row)))
    return found


def test_round_trip(db):
    result = Message(id=1, title="My Title", body="My Body").to_table_map(db).create()
    assert result.rowcount == 1
    assert result.lastrowid == 1

    found = _find(db, Message(id=1))
    assert found == [Message(id=1, title="My Title", body="My Body")]


def test_find_by_text_column(db):
    Message(id=1, title="greeting", body="hello").to_table_map(db).create()
    Message(id=2, title="greeting", body="hi").to_table_map(db).create()
    Message(id=3, title="farewell", body="bye").to_table_map(db).create()

    found = _find(db, Message(title="greeting"))
    assert [m.id for m in found] == [1, 2]

    found = _find(db, Message(title="greeting", body="hi"))
    assert found == [Message(id=2, title="greeting", body="hi")]


def test_find_no_match(db):
    Message(id=1, title="t", body="b").to_table_map(db).create()
    assert _find(db, Message(id=99)) == []


def test_absent_values_stored_as_sql_null(db):
    Message(id=2, title="only title").to_table_map(db).create()
    assert _fetch_all(db) == [(2, "only title", None)]


def test_literal_null_style_stores_text(db):
    Message(id=2, title="only title").to_table_map(db, null_style="literal").create()
    assert _fetch_all(db) == [(2, "only title", "NULL")]


def test_all_absent_probe_rejected(db):
    Message(id=1, title="t", body="b").to_table_map(db).create()
    with pytest.raises(EmptyFilterError):
        _find(db, Message())


def test_all_absent_probe_match_all(db):
    Message(id=1, title="a", body="x").to_table_map(db).create()
    Message(id=2, title="b", body="y").to_table_map(db).create()
    found = _find(db, Message(), empty_filter="match_all")
    assert [m.id for m in found] == [1, 2]


def test_lenient_invalid_integer_inserts_null(db):
    tm = TableMap(db, MapperConfig.for_table("messages", strict_validation=False))
    tm.int_col("id", from_string("seven"))
    tm.string_col("title", from_string("t"))
    tm.create()
    assert _fetch_all(db) == [(None, "t", None)]


def test_strict_invalid_integer_inserts_nothing(db):
    tm = TableMap(db, MapperConfig.for_table("messages"))
    tm.int_col("id", from_string("seven"))
    with pytest.raises(BindingValidationError):
        tm.create()
    assert _fetch_all(db) == []


def test_callback_error_propagates(db):
    for i in (1, 2, 3):
        Message(id=i, title="same", body=str(i)).to_table_map(db).create()
    seen = []

    def on_row(row):
        seen.append(row)
        if len(seen) == 2:
            raise LookupError("stop")

    with pytest.raises(LookupError, match="stop"):
        Message(title="same").to_table_map(db).find(on_row)
    assert [row[0] for row in seen] == [1, 2]


def test_missing_table_raises_execution_error(db):
    tm = TableMap(db, MapperConfig.for_table("nope"))
    tm.int_col("id", from_int(1))
    with pytest.raises(ExecutionError) as exc_info:
        tm.create()
    assert isinstance(exc_info.value.__cause__, sqlite3.OperationalError)
    assert exc_info.value.sql.startswith('INSERT INTO "nope"')


def test_create_commits(tmp_path):
    path = tmp_path / "messages.db"
    writer = sqlite3.connect(path)
    writer.executescript("CREATE TABLE messages (id INTEGER, title TEXT, body TEXT);")
    Message(id=1, title="t", body="b").to_table_map(writer).create()

    reader = sqlite3.connect(path)
    try:
        assert reader.execute("SELECT id, title, body FROM messages").fetchall() == [(1, "t", "b")]
    finally:
        reader.close()
        writer.close()
