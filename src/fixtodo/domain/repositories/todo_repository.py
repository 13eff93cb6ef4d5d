from __future__ import annotations

from typing import AbstractSet, Protocol, Sequence, runtime_checkable

from fixtodo.domain.todo.entities.todo import Todo


@runtime_checkable
class TodoRepository(Protocol):
    """Repository interface for Todo entities.

    Every batch mutation is all-or-nothing.
    """

    def ensure_schema(self) -> None:
        ...

    def read_all(self) -> list[Todo]:
        """Return every todo ordered by ascending id."""
        ...

    def insert_many(self, titles: Sequence[str]) -> None:
        ...

    def update_many(self, todos: Sequence[Todo]) -> None:
        ...

    def delete_many(self, ids: AbstractSet[int]) -> None:
        """Delete the given ids; unknown ids are ignored."""
        ...
