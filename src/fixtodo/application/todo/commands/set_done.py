from __future__ import annotations

from fixtodo.application.contracts.todo_dtos import SetDoneRequest
from fixtodo.application.todo.selection import select_by_index
from fixtodo.domain.repositories.todo_repository import TodoRepository
from fixtodo.domain.todo.exceptions.todo_exceptions import SetDoneCommandError, StorageError


class SetDoneCommand:
    """Mark the todos at the given display indexes as done or not done."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, request: SetDoneRequest) -> None:
        try:
            selected = select_by_index(self._repository.read_all(), request.indexes)
            self._repository.update_many([todo.with_done(request.done) for todo in selected])
        except StorageError as exc:
            raise SetDoneCommandError(str(exc)) from exc
