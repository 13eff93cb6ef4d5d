from __future__ import annotations

from fixtodo.application.contracts.todo_dtos import AddTodosRequest
from fixtodo.domain.repositories.todo_repository import TodoRepository
from fixtodo.domain.todo.exceptions.todo_exceptions import AddCommandError, StorageError


class AddTodosCommand:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, request: AddTodosRequest) -> None:
        try:
            self._repository.insert_many(list(request.titles))
        except StorageError as exc:
            raise AddCommandError(str(exc)) from exc
