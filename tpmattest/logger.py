"""Swappable logging hook for the TPM layer."""

from __future__ import annotations

import enum
import inspect
import logging
from typing import Any, Callable, Optional

LogFunction = Callable[..., None]


class LogLevel(enum.Enum):
    """Severity of a log event."""

    INFO = 0
    WARN = 1
    ERROR = 2


_PY_LEVELS = {
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

_log = logging.getLogger("tpmattest")


def _default_logger(
    file: str,
    function: str,
    line: int,
    level: LogLevel,
    event_name: str,
    fmt: str,
    *args: Any,
) -> None:
    message = fmt % args if args else fmt
    _log.log(_PY_LEVELS[level], "[%s] %s (%s:%d %s)", event_name, message, file, line, function)


_current: LogFunction = _default_logger


def set_logger(logger: Optional[LogFunction]) -> None:
    """Install ``logger`` as the log function; ``None`` restores the default."""
    global _current
    if logger is None:
        _current = _default_logger
        return
    if not callable(logger):
        raise TypeError("logger must be callable")
    _current = logger


def get_logger() -> LogFunction:
    """Return the installed log function."""
    return _current


def log(level: LogLevel, event_name: str, fmt: str, *args: Any) -> None:
    """Send an event, tagged with the caller's file, function and line."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        file, function, line = caller.f_code.co_filename, caller.f_code.co_name, caller.f_lineno
    else:
        file, function, line = "<unknown>", "<unknown>", 0
    del frame, caller
    _current(file, function, line, LogLevel(level), event_name, fmt, *args)