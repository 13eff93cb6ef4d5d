from __future__ import annotations

from typing import AbstractSet, Sequence

from fixtodo.domain.todo.entities.todo import Todo


def select_by_index(todos: Sequence[Todo], indexes: AbstractSet[int]) -> list[Todo]:
    """Return the todos whose display position is in ``indexes``.

    Positions that are not in the current list are ignored.
    """
    return [todo for position, todo in enumerate(todos) if position in indexes]
