"""Argument parsing for the ``todo`` command."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence, Union

from fixtodo import __version__


@dataclass(frozen=True)
class Add:
    titles: tuple[str, ...]


@dataclass(frozen=True)
class Done:
    indexes: frozenset[int]


@dataclass(frozen=True)
class Undone:
    indexes: frozenset[int]


@dataclass(frozen=True)
class Remove:
    indexes: frozenset[int]


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Print:
    pass


Command = Union[Add, Done, Undone, Remove, Clear, Print]


def _display_index(value: str) -> int:
    try:
        index = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid index: {value!r}") from None
    if index < 0:
        raise argparse.ArgumentTypeError(f"index must not be negative: {value!r}")
    return index


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="Manage a todo list stored in your config directory.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    add = sub.add_parser("add", help="Add one or more todos.")
    add.add_argument("titles", nargs="+", metavar="title")

    for name, help_text in (
        ("done", "Mark todos as done."),
        ("undone", "Mark todos as not done."),
        ("remove", "Remove todos."),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("indexes", nargs="*", type=_display_index, metavar="index")

    sub.add_parser("clear", help="Remove all done todos.")
    sub.add_parser("print", help="Print the todo list (default).")

    return parser


def parse_command(argv: Sequence[str] | None = None) -> Command:
    args = build_parser().parse_args(argv)

    if args.command == "add":
        return Add(titles=tuple(args.titles))
    if args.command == "done":
        return Done(indexes=frozenset(args.indexes))
    if args.command == "undone":
        return Undone(indexes=frozenset(args.indexes))
    if args.command == "remove":
        return Remove(indexes=frozenset(args.indexes))
    if args.command == "clear":
        return Clear()
    return Print()
