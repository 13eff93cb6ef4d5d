from __future__ import annotations

import sys
from typing import Iterable, TextIO


_STRIKE_ON = "\x1b[9m"
_STRIKE_OFF = "\x1b[29m"


def strikethrough(text: str) -> str:
    return f"{_STRIKE_ON}{text}{_STRIKE_OFF}"


def print_lines(lines: Iterable[str], stream: TextIO | None = None) -> None:
    stream = stream or sys.stdout
    for line in lines:
        stream.write(f"{line}\n")
    stream.flush()
