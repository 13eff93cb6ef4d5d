from __future__ import annotations

from fixtodo.application.contracts.todo_dtos import TodoListEntry
from fixtodo.domain.repositories.todo_repository import TodoRepository
from fixtodo.domain.todo.exceptions.todo_exceptions import PrintCommandError, StorageError


class ListTodosQuery:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> list[TodoListEntry]:
        try:
            todos = self._repository.read_all()
        except StorageError as exc:
            raise PrintCommandError(str(exc)) from exc
        return [
            TodoListEntry(index=index, title=todo.title, done=todo.done)
            for index, todo in enumerate(todos)
        ]
