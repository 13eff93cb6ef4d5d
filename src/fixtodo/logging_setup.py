import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    # stdout carries the todo list, so log records only go to stderr or a file.
    log_level = logging.DEBUG if debug else logging.WARNING
    root_logger = logging.getLogger()
    if getattr(root_logger, "_todo_logging_configured", False):
        root_logger.setLevel(log_level)
        for handler in root_logger.handlers:
            if getattr(handler, "_todo_handler", False):
                handler.setLevel(log_level)
        return

    formatter = logging.Formatter(_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(log_level)
    stream_handler.setFormatter(formatter)
    stream_handler._todo_handler = True
    handlers: list[logging.Handler] = [stream_handler]

    log_file_error: OSError | None = None
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=_MAX_LOG_BYTES,
                backupCount=_BACKUP_COUNT,
            )
        except OSError as exc:
            log_file_error = exc
        else:
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            file_handler._todo_handler = True
            handlers.append(file_handler)

    root_logger.setLevel(log_level)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger._todo_logging_configured = True

    if log_file_error is not None:
        # stderr logging stays active
        logging.getLogger(__name__).warning("Cannot write log file %s: %s", log_file, log_file_error)
