from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

from fixtodo.domain.todo.exceptions.todo_exceptions import PathResolutionError
from fixtodo.infrastructure.paths import config_dir

_LOADED = False


def _default_candidates() -> list[Path]:
    candidates = [Path.cwd() / ".env"]
    try:
        candidates.append(config_dir() / ".env")
    except PathResolutionError:
        # no home directory: only the working directory is tried
        pass
    return candidates


def load_env(candidates: list[Path] | None = None) -> Path | None:
    """Load the first existing ``.env`` file, once per process.

    Candidates default to the working directory, then the config directory.
    Real environment variables always win over values from the file.
    Returns the loaded file, if any.
    """
    global _LOADED
    if _LOADED:
        return None
    _LOADED = True

    if candidates is None:
        candidates = _default_candidates()

    for path in candidates:
        if not path.is_file():
            continue
        load_dotenv(dotenv_path=path, override=False)
        return path
    return None
