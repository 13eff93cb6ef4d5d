from __future__ import annotations

import logging
from pathlib import Path

import pytest

from fixtodo.composition_root import create_app_container
from fixtodo.infrastructure.data.database import open_database
from fixtodo.infrastructure.data.repositories.sqlite_todo_repository import (
    SqliteTodoRepository,
)


@pytest.fixture()
def database_path(tmp_path: Path) -> Path:
    return tmp_path / "todos.db"


@pytest.fixture()
def engine(database_path: Path):
    engine = open_database(database_path)
    yield engine
    engine.dispose()


@pytest.fixture()
def repository(engine) -> SqliteTodoRepository:
    repo = SqliteTodoRepository(engine)
    repo.ensure_schema()
    return repo


@pytest.fixture()
def container(database_path: Path):
    app = create_app_container(database_path)
    yield app
    app.dispose()


@pytest.fixture()
def clean_root_logger():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    if hasattr(root, "_todo_logging_configured"):
        del root._todo_logging_configured
