import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import Column, Text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlmodel import Field, Session, SQLModel, create_engine

from fixtodo.domain.todo.exceptions.todo_exceptions import DatabaseConnectionError


logger = logging.getLogger(__name__)


# --- DB MODELS ---
# Column names and types are the on-disk contract:
# todos(id INTEGER PRIMARY KEY, title TEXT NOT NULL, done BOOLEAN NOT NULL)
class TodoRecord(SQLModel, table=True):
    __tablename__ = "todos"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(sa_column=Column(Text, nullable=False))
    done: bool = Field(default=False, nullable=False)


def describe_error(exc: Exception) -> str:
    """One-line description of a storage failure, without SQLAlchemy's background link."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        message = str(exc.orig)
    elif isinstance(exc, SQLAlchemyError) and exc.args:
        message = str(exc.args[0])
    else:
        message = str(exc) or exc.__class__.__name__
    return " ".join(message.split())


def create_database_engine(database_path: Path) -> Engine:
    return create_engine(f"sqlite:///{database_path}")


def open_database(database_path: Path) -> Engine:
    """Create an engine for ``database_path`` and make sure it can connect."""
    engine = create_database_engine(database_path)
    try:
        with engine.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
    except SQLAlchemyError as exc:
        engine.dispose()
        raise DatabaseConnectionError(
            f"Failed to create and connect to a db at {database_path}: {describe_error(exc)}"
        ) from exc
    logger.debug("Connected to %s", database_path)
    return engine


@contextmanager
def get_session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session
