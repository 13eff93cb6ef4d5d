from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sqlalchemy.engine import Engine

from fixtodo.application.todo.commands.add_todos import AddTodosCommand
from fixtodo.application.todo.commands.clear_todos import ClearCompletedCommand
from fixtodo.application.todo.commands.remove_todos import RemoveTodosCommand
from fixtodo.application.todo.commands.set_done import SetDoneCommand
from fixtodo.application.todo.queries.list_todos import ListTodosQuery
from fixtodo.infrastructure.data.database import open_database
from fixtodo.infrastructure.data.repositories.sqlite_todo_repository import (
    SqliteTodoRepository,
)


@dataclass(frozen=True)
class AppContainer:
    engine: Engine
    repository: SqliteTodoRepository
    add_todos_command: AddTodosCommand
    set_done_command: SetDoneCommand
    remove_todos_command: RemoveTodosCommand
    clear_completed_command: ClearCompletedCommand
    list_todos_query: ListTodosQuery

    def dispose(self) -> None:
        self.engine.dispose()


def create_app_container(database_path: Path) -> AppContainer:
    engine = open_database(database_path)
    repository = SqliteTodoRepository(engine)
    try:
        repository.ensure_schema()
    except Exception:
        engine.dispose()
        raise

    return AppContainer(
        engine=engine,
        repository=repository,
        add_todos_command=AddTodosCommand(repository),
        set_done_command=SetDoneCommand(repository),
        remove_todos_command=RemoveTodosCommand(repository),
        clear_completed_command=ClearCompletedCommand(repository),
        list_todos_query=ListTodosQuery(repository),
    )
