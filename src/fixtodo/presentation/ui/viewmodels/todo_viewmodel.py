from __future__ import annotations

from collections.abc import Iterable

from fixtodo.application.contracts.todo_dtos import TodoListEntry
from fixtodo.presentation.ui.terminal import strikethrough


def render_line(index: int, title: str, done: bool) -> str:
    shown = strikethrough(title) if done else title
    return f"{index}: {shown}"


def render_list(entries: Iterable[TodoListEntry]) -> list[str]:
    return [render_line(entry.index, entry.title, entry.done) for entry in entries]
