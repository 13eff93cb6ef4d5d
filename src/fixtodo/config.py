from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


DATABASE_FILE_NAME = "todos.db"


@dataclass(frozen=True)
class AppIdentity:
    qualifier: str
    organization: str
    application: str


DEFAULT_IDENTITY = AppIdentity(qualifier="com", organization="dely", application="todo")


@dataclass(frozen=True)
class Settings:
    database_path: Path | None = None
    debug: bool = False
    log_file: Path | None = None


def _optional_path(name: str) -> Path | None:
    value = (os.getenv(name) or "").strip()
    if not value:
        return None
    return Path(value).expanduser()


def load_settings() -> Settings:
    return Settings(
        database_path=_optional_path("TODO_DB"),
        debug=os.getenv("TODO_DEBUG") == "1",
        log_file=_optional_path("TODO_LOG_FILE"),
    )
