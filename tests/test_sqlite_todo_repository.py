from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import SQLModel

from fixtodo.domain.todo.entities.todo import Todo
from fixtodo.domain.todo.exceptions.todo_exceptions import (
    DatabaseConnectionError,
    DeleteError,
    InsertError,
    ReadError,
    SchemaError,
    StorageError,
    UpdateError,
)
from fixtodo.infrastructure.data.database import open_database


def _execute(engine, sql: str) -> None:
    with engine.begin() as conn:
        conn.exec_driver_sql(sql)


def test_ensure_schema_creates_todos_table(engine, repository) -> None:
    with engine.connect() as conn:
        columns = conn.exec_driver_sql("PRAGMA table_info(todos)").fetchall()

    # (cid, name, type, notnull, default, pk)
    assert {c[1]: (c[2].upper(), c[3], c[5]) for c in columns} == {
        "id": ("INTEGER", 1, 1),
        "title": ("TEXT", 1, 0),
        "done": ("BOOLEAN", 1, 0),
    }


def test_ensure_schema_twice_keeps_data(repository) -> None:
    repository.insert_many(["keep me"])

    repository.ensure_schema()
    repository.ensure_schema()

    assert [todo.title for todo in repository.read_all()] == ["keep me"]


def test_read_all_on_empty_store(repository) -> None:
    assert repository.read_all() == []


def test_insert_many_round_trip(repository) -> None:
    titles = ["Einkaufen", "", "Rechnung senden"]

    repository.insert_many(titles)

    todos = repository.read_all()
    assert [todo.title for todo in todos] == titles
    assert all(todo.done is False for todo in todos)
    assert [todo.id for todo in todos] == sorted(todo.id for todo in todos)
    assert len({todo.id for todo in todos}) == 3


def test_insert_many_is_all_or_nothing(repository) -> None:
    with pytest.raises(InsertError) as excinfo:
        repository.insert_many(["fine", None])

    assert str(excinfo.value).startswith("Failed to insert todos")
    assert repository.read_all() == []


def test_update_many_round_trip(engine, repository) -> None:
    _execute(engine, "INSERT INTO todos (title, done) VALUES ('todo1', 0), ('todo2', 1)")
    first, second = repository.read_all()

    repository.update_many([
        Todo(id=first.id, title="new todo1", done=True),
        Todo(id=second.id, title="new todo2", done=False),
    ])

    received = repository.read_all()
    assert [(todo.title, todo.done) for todo in received] == [
        ("new todo1", True),
        ("new todo2", False),
    ]


def test_update_many_is_all_or_nothing(repository) -> None:
    repository.insert_many(["a", "b"])
    first, second = repository.read_all()

    with pytest.raises(UpdateError):
        repository.update_many([
            first.with_done(True),
            Todo(id=second.id, title=None, done=True),
        ])

    assert [(todo.title, todo.done) for todo in repository.read_all()] == [
        ("a", False),
        ("b", False),
    ]


def test_update_many_with_unknown_id_is_a_no_op(repository) -> None:
    repository.insert_many(["a"])
    (todo,) = repository.read_all()

    repository.update_many([Todo(id=todo.id + 100, title="ghost", done=True)])

    assert repository.read_all() == [todo]


def test_delete_many(repository) -> None:
    repository.insert_many(["a", "b", "c"])
    first, second, third = repository.read_all()

    repository.delete_many({first.id, third.id, 9999})

    assert repository.read_all() == [second]


def test_delete_many_with_empty_set(repository) -> None:
    repository.insert_many(["a"])

    repository.delete_many(set())

    assert len(repository.read_all()) == 1


def test_read_all_skips_undecodable_rows(engine, repository, caplog: pytest.LogCaptureFixture) -> None:
    _execute(
        engine,
        "INSERT INTO todos (id, title, done) VALUES (1, 'good', 0), (2, 'bad', 'maybe'), (3, 'also good', 1)",
    )

    with caplog.at_level(logging.WARNING):
        todos = repository.read_all()

    assert [(todo.id, todo.title, todo.done) for todo in todos] == [
        (1, "good", False),
        (3, "also good", True),
    ]
    assert "Skipping undecodable todo row 2" in caplog.text


def test_insert_many_rejects_unencodable_title(repository) -> None:
    with pytest.raises(InsertError) as excinfo:
        repository.insert_many(["fine", "bad\udcff"])

    assert "surrogates not allowed" in str(excinfo.value)
    assert repository.read_all() == []


def test_update_many_rejects_unencodable_title(repository) -> None:
    repository.insert_many(["a"])
    (todo,) = repository.read_all()

    with pytest.raises(UpdateError):
        repository.update_many([Todo(id=todo.id, title="bad\udcff", done=True)])

    assert repository.read_all() == [todo]


def _assert_single_line(error: StorageError) -> None:
    message = str(error)
    assert "\n" not in message
    assert "sqlalche.me" not in message


def test_connection_error_message_is_single_line(tmp_path: Path) -> None:
    with pytest.raises(DatabaseConnectionError) as excinfo:
        open_database(tmp_path)

    _assert_single_line(excinfo.value)
    assert "unable to open database file" in str(excinfo.value)


def test_schema_error_message_is_single_line(repository, monkeypatch: pytest.MonkeyPatch) -> None:
    def _locked(*args, **kwargs):
        raise OperationalError("CREATE TABLE todos", {}, sqlite3.OperationalError("database is locked"))

    monkeypatch.setattr(SQLModel.metadata, "create_all", _locked)

    with pytest.raises(SchemaError) as excinfo:
        repository.ensure_schema()

    _assert_single_line(excinfo.value)
    assert str(excinfo.value) == "Failed to create the todos table: database is locked"


def test_read_and_delete_error_messages_are_single_line(engine, repository) -> None:
    _execute(engine, "DROP TABLE todos")

    with pytest.raises(ReadError) as read_error:
        repository.read_all()
    with pytest.raises(DeleteError) as delete_error:
        repository.delete_many({1})

    for excinfo in (read_error, delete_error):
        _assert_single_line(excinfo.value)
        assert "no such table: todos" in str(excinfo.value)


def test_write_error_messages_are_single_line(repository) -> None:
    repository.insert_many(["a"])
    (todo,) = repository.read_all()

    with pytest.raises(InsertError) as insert_error:
        repository.insert_many([None])
    with pytest.raises(UpdateError) as update_error:
        repository.update_many([Todo(id=todo.id, title=None, done=False)])

    for excinfo in (insert_error, update_error):
        _assert_single_line(excinfo.value)
        assert "NOT NULL constraint failed" in str(excinfo.value)
