from __future__ import annotations

import logging
from typing import AbstractSet, Any, Sequence

from sqlalchemy import delete, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, col

from fixtodo.domain.repositories.todo_repository import TodoRepository
from fixtodo.domain.todo.entities.todo import Todo
from fixtodo.domain.todo.exceptions.todo_exceptions import (
    DeleteError,
    InsertError,
    ReadError,
    SchemaError,
    UpdateError,
)
from fixtodo.infrastructure.data.database import TodoRecord, describe_error, get_session


logger = logging.getLogger(__name__)

_SELECT_ALL = "SELECT id, title, done FROM todos ORDER BY id ASC"


class SqliteTodoRepository(TodoRepository):
    """Todo repository backed by the ``todos`` table of a SQLite file."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def ensure_schema(self) -> None:
        try:
            SQLModel.metadata.create_all(self._engine, tables=[TodoRecord.__table__])
        except SQLAlchemyError as exc:
            raise SchemaError(f"Failed to create the todos table: {describe_error(exc)}") from exc

    def read_all(self) -> list[Todo]:
        # Raw values are decoded by hand so one bad row cannot abort the whole read.
        try:
            with self._engine.connect() as conn:
                rows = conn.exec_driver_sql(_SELECT_ALL).fetchall()
        except SQLAlchemyError as exc:
            raise ReadError(f"Failed to read todos: {describe_error(exc)}") from exc

        todos: list[Todo] = []
        for row in rows:
            try:
                todos.append(_decode_row(tuple(row)))
            except ValueError as exc:
                logger.warning("Skipping undecodable todo row %r: %s", row[0], exc)
        return todos

    def insert_many(self, titles: Sequence[str]) -> None:
        records = [TodoRecord(title=title, done=False) for title in titles]
        try:
            with get_session(self._engine) as session:
                session.add_all(records)
                session.commit()
        except (SQLAlchemyError, UnicodeEncodeError) as exc:
            raise InsertError(f"Failed to insert todos: {describe_error(exc)}") from exc
        logger.debug("Inserted %d todo(s)", len(records))

    def update_many(self, todos: Sequence[Todo]) -> None:
        try:
            with self._engine.begin() as conn:
                for todo in todos:
                    conn.execute(
                        update(TodoRecord)
                        .where(col(TodoRecord.id) == todo.id)
                        .values(title=todo.title, done=todo.done)
                    )
        except (SQLAlchemyError, UnicodeEncodeError) as exc:
            raise UpdateError(f"Failed to update todos: {describe_error(exc)}") from exc
        logger.debug("Updated %d todo(s)", len(todos))

    def delete_many(self, ids: AbstractSet[int]) -> None:
        if not ids:
            return
        try:
            with self._engine.begin() as conn:
                conn.execute(delete(TodoRecord).where(col(TodoRecord.id).in_(sorted(ids))))
        except SQLAlchemyError as exc:
            raise DeleteError(f"Failed to remove todos: {describe_error(exc)}") from exc
        logger.debug("Deleted todo ids %s", sorted(ids))


def _decode_row(row: tuple[Any, ...]) -> Todo:
    todo_id, title, done = row
    if isinstance(todo_id, bool) or not isinstance(todo_id, int):
        raise ValueError(f"id is not an integer: {todo_id!r}")
    if not isinstance(title, str):
        raise ValueError(f"title is not text: {title!r}")
    if isinstance(done, bool):
        return Todo(id=todo_id, title=title, done=done)
    if not isinstance(done, int) or done not in (0, 1):
        raise ValueError(f"done is not a boolean: {done!r}")
    return Todo(id=todo_id, title=title, done=bool(done))
