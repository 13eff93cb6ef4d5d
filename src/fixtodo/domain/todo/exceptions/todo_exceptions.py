"""Error hierarchy for the todo CLI.

Storage errors wrap the underlying OS or SQLAlchemy failure. Command errors
wrap the storage error that aborted the command, so ``__cause__`` tells which
layer failed while ``str()`` stays the message the user should see.
"""

from __future__ import annotations


class TodoError(Exception):
    pass


class StorageError(TodoError):
    pass


class PathResolutionError(StorageError):
    pass


class DirectoryCreationError(StorageError):
    pass


class DatabaseConnectionError(StorageError):
    pass


class SchemaError(StorageError):
    pass


class ReadError(StorageError):
    pass


class InsertError(StorageError):
    pass


class UpdateError(StorageError):
    pass


class DeleteError(StorageError):
    pass


class CommandError(TodoError):
    pass


class AddCommandError(CommandError):
    pass


class SetDoneCommandError(CommandError):
    pass


class RemoveCommandError(CommandError):
    pass


class ClearCommandError(CommandError):
    pass


class PrintCommandError(CommandError):
    pass
