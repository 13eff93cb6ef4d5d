"""Per-user configuration directory lookup.

The layout matches the usual platform conventions:

* Linux and other Unixes: ``$XDG_CONFIG_HOME/<app>`` or ``~/.config/<app>``
* macOS: ``~/Library/Application Support/<qualifier>.<org>.<app>``
* Windows: ``%APPDATA%\\<org>\\<app>\\config``
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from fixtodo.config import DATABASE_FILE_NAME, DEFAULT_IDENTITY, AppIdentity
from fixtodo.domain.todo.exceptions.todo_exceptions import (
    DirectoryCreationError,
    PathResolutionError,
)


logger = logging.getLogger(__name__)


def _home() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise PathResolutionError(f"Failed to get the database path: {exc}") from exc


def config_dir(
    identity: AppIdentity = DEFAULT_IDENTITY,
    *,
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ

    if platform.startswith("win"):
        appdata = (environ.get("APPDATA") or "").strip()
        if not appdata:
            raise PathResolutionError("Failed to get the database path: APPDATA is not set")
        return Path(appdata) / identity.organization / identity.application / "config"

    if platform == "darwin":
        bundle = ".".join(
            part for part in (identity.qualifier, identity.organization, identity.application) if part
        )
        return _home() / "Library" / "Application Support" / bundle

    xdg = (environ.get("XDG_CONFIG_HOME") or "").strip()
    if xdg and Path(xdg).is_absolute():
        return Path(xdg) / identity.application
    return _home() / ".config" / identity.application


def resolve_database_path(identity: AppIdentity = DEFAULT_IDENTITY) -> Path:
    directory = config_dir(identity)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(f"Failed to create the directory {directory}: {exc}") from exc
    logger.debug("Using database at %s", directory / DATABASE_FILE_NAME)
    return directory / DATABASE_FILE_NAME
