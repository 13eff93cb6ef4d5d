from __future__ import annotations

from fixtodo.domain.repositories.todo_repository import TodoRepository
from fixtodo.domain.todo.exceptions.todo_exceptions import ClearCommandError, StorageError


class ClearCompletedCommand:
    """Delete every todo that is marked done."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self) -> None:
        try:
            done_ids = {todo.id for todo in self._repository.read_all() if todo.done}
            self._repository.delete_many(done_ids)
        except StorageError as exc:
            raise ClearCommandError(str(exc)) from exc
