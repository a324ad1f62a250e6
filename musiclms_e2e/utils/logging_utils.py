"""Central logging configuration using Loguru sinks."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from loguru import logger as loguru_logger

LOGGER_NAMESPACE = "musiclms"

_CONSOLE_FORMAT = "{time:HH:mm:ss} | {level: <8} | {extra[logger_name]} | {message}"
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {thread.name} | {extra[logger_name]} | {message}"


def get_logger(name: str) -> logging.Logger:
    """Create a namespaced logger for a suite component."""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


class InterceptHandler(logging.Handler):
    """Forward stdlib log records into Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        loguru_logger.bind(logger_name=record.name).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(level: str = "INFO", log_dir: str | Path | None = None) -> Path | None:
    """Route ``musiclms.*`` records to stderr and, optionally, a rotating log file.

    Returns the log file path when *log_dir* is given.
    """
    loguru_logger.remove()
    loguru_logger.configure(extra={"logger_name": LOGGER_NAMESPACE})
    loguru_logger.add(sys.stderr, level=level.upper(), format=_CONSOLE_FORMAT, backtrace=False, diagnose=False)

    log_file: Path | None = None
    if log_dir is not None:
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        log_file = directory / "automation.log"
        loguru_logger.add(
            log_file,
            level="DEBUG",
            format=_FILE_FORMAT,
            rotation="5 MB",
            retention=5,
            enqueue=True,
            backtrace=False,
            diagnose=False,
        )

    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.handlers = [
        handler for handler in namespace_logger.handlers if not isinstance(handler, InterceptHandler)
    ]
    namespace_logger.addHandler(InterceptHandler())
    namespace_logger.setLevel(logging.DEBUG)
    return log_file
