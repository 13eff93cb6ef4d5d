from __future__ import annotations

import logging
from typing import TextIO

from fixtodo.application.contracts.todo_dtos import (
    AddTodosRequest,
    RemoveTodosRequest,
    SetDoneRequest,
)
from fixtodo.composition_root.container import AppContainer
from fixtodo.presentation.cli.parser import Add, Clear, Command, Done, Print, Remove, Undone
from fixtodo.presentation.ui.terminal import print_lines
from fixtodo.presentation.ui.viewmodels.todo_viewmodel import render_list


logger = logging.getLogger(__name__)


def print_list(container: AppContainer, stream: TextIO | None = None) -> None:
    print_lines(render_list(container.list_todos_query.execute()), stream)


def dispatch(container: AppContainer, command: Command, stream: TextIO | None = None) -> None:
    """Run one parsed command; every mutation is followed by the new list."""
    logger.debug("Dispatching %r", command)

    if isinstance(command, Add):
        container.add_todos_command.execute(AddTodosRequest(titles=command.titles))
    elif isinstance(command, Done):
        container.set_done_command.execute(SetDoneRequest(indexes=command.indexes, done=True))
    elif isinstance(command, Undone):
        container.set_done_command.execute(SetDoneRequest(indexes=command.indexes, done=False))
    elif isinstance(command, Remove):
        container.remove_todos_command.execute(RemoveTodosRequest(indexes=command.indexes))
    elif isinstance(command, Clear):
        container.clear_completed_command.execute()
    elif not isinstance(command, Print):
        raise TypeError(f"Unknown command: {command!r}")

    print_list(container, stream)
