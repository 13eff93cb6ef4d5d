from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Todo:
    id: int
    title: str
    done: bool = False

    def with_done(self, done: bool) -> Todo:
        return replace(self, done=done)
