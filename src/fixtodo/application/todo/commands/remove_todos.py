from __future__ import annotations

from fixtodo.application.contracts.todo_dtos import RemoveTodosRequest
from fixtodo.application.todo.selection import select_by_index
from fixtodo.domain.repositories.todo_repository import TodoRepository
from fixtodo.domain.todo.exceptions.todo_exceptions import RemoveCommandError, StorageError


class RemoveTodosCommand:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, request: RemoveTodosRequest) -> None:
        try:
            selected = select_by_index(self._repository.read_all(), request.indexes)
            self._repository.delete_many({todo.id for todo in selected})
        except StorageError as exc:
            raise RemoveCommandError(str(exc)) from exc
