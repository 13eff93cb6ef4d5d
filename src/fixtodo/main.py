"""CLI entrypoint for fixtodo."""

from __future__ import annotations

import logging
import sys
from typing import Sequence

from fixtodo.composition_root.container import create_app_container
from fixtodo.config import load_settings
from fixtodo.domain.todo.exceptions.todo_exceptions import TodoError
from fixtodo.env import load_env
from fixtodo.infrastructure.paths import resolve_database_path
from fixtodo.logging_setup import setup_logging
from fixtodo.presentation.cli.parser import parse_command
from fixtodo.presentation.controllers.todo_controller import dispatch


logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the command and return the exit status."""

    env_file = load_env()
    settings = load_settings()
    setup_logging(debug=settings.debug, log_file=settings.log_file)
    if env_file is not None:
        logger.debug("Environment loaded from %s", env_file)

    command = parse_command(argv)

    try:
        database_path = settings.database_path or resolve_database_path()
        container = create_app_container(database_path)
        try:
            dispatch(container, command)
        finally:
            container.dispose()
    except TodoError as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
