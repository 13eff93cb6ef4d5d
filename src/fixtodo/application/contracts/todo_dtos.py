from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AddTodosRequest:
    titles: tuple[str, ...]


@dataclass(frozen=True)
class SetDoneRequest:
    indexes: frozenset[int]
    done: bool


@dataclass(frozen=True)
class RemoveTodosRequest:
    indexes: frozenset[int]


@dataclass(frozen=True)
class TodoListEntry:
    index: int
    title: str
    done: bool
