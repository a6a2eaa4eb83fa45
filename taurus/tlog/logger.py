"""Named loggers printing coloured lines to stdout and plain lines to rotating files."""

from __future__ import annotations

import datetime
import os
import sys
import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from taurus.maputil import _format_value
from taurus.tlog.writer import LogWriter


class Level(IntEnum):
    """Log severities, lowest first."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


@dataclass(frozen=True)
class Field:
    """A key/value pair appended to a log line as ``key=value``."""

    key: str
    value: Any


_RESET = "\033[0m"
_CYAN = "\033[36m"
_LEVEL_COLORS = {
    Level.DEBUG: "\033[32m",
    Level.INFO: "\033[34m",
    Level.WARN: "\033[33m",
    Level.ERROR: "\033[31m",
    Level.FATAL: "\033[35m",
}


def _caller() -> str:
    frame = sys._getframe(1)
    while frame is not None and frame.f_code.co_filename == __file__:
        frame = frame.f_back
    if frame is None:
        return ""
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


class Logger:
    """A named logger with a minimum level and an optional file output."""

    def __init__(self, name: str, level: Level = Level.DEBUG, has_caller: bool = True) -> None:
        self.name = name
        self.level = level
        self.has_caller = has_caller
        self.fields: list[Field] = []
        self.writer: LogWriter | None = None
        self._lock = threading.Lock()

    def set_output_path(self, path: str | os.PathLike[str], max_size: int, max_backups: int, max_age: int) -> Logger:
        """Also write to ``path``, rotating by size and once a day."""
        return self.set_output_path_with_days(path, max_size, max_backups, max_age, 1)

    def set_output_path_with_days(
        self,
        path: str | os.PathLike[str],
        max_size: int,
        max_backups: int,
        max_age: int,
        max_days: int,
    ) -> Logger:
        """Also write to ``path``, rotating by size and every ``max_days`` days."""
        with self._lock:
            os.makedirs(os.path.dirname(os.fspath(path)) or ".", exist_ok=True)
            writer = LogWriter(path, max_size, max_backups, max_age, max_days)
            if self.writer is not None:
                self.writer.close()
            self.writer = writer
        return self

    def set_level(self, level: Level) -> Logger:
        """Drop messages below ``level``."""
        with self._lock:
            self.level = Level(level)
        return self

    def set_caller(self, show: bool) -> Logger:
        """Show or hide the calling file and line."""
        with self._lock:
            self.has_caller = show
        return self

    def format_log(self, level: Level, msg: str, *args: Field) -> tuple[str, str]:
        """Return the plain and the coloured text of one log line."""
        level = Level(level)
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        name = level.name
        color = _LEVEL_COLORS[level]
        if self.has_caller:
            caller = _caller()
            plain = f"[{timestamp}] [{name}] [{caller}] {msg}"
            colored = f"[{_CYAN}{timestamp}{_RESET}] {color}{name}{_RESET} [{caller}] {msg}"
        else:
            plain = f"[{timestamp}] [{name}] {msg}"
            colored = f"[{_CYAN}{timestamp}{_RESET}] {color}{name}{_RESET} {msg}"
        field_text = "".join(f" {field.key}={_format_value(field.value)}" for field in [*self.fields, *args])
        return plain + field_text, colored + field_text

    def _log(self, level: Level, msg: str, fields: tuple[Field, ...]) -> None:
        if level < self.level:
            return
        with self._lock:
            plain, colored = self.format_log(level, msg, *fields)
            if self.writer is not None:
                try:
                    self.writer.write(plain + "\n")
                except OSError as exc:
                    print(f"failed to write log file: {exc}", file=sys.stderr)
            print(colored, file=sys.stdout)
        if level == Level.FATAL:
            raise SystemExit(1)

    def debug(self, msg: str, *args: Field) -> None:
        """Log at DEBUG level."""
        self._log(Level.DEBUG, msg, args)

    def info(self, msg: str, *args: Field) -> None:
        """Log at INFO level."""
        self._log(Level.INFO, msg, args)

    def warn(self, msg: str, *args: Field) -> None:
        """Log at WARN level."""
        self._log(Level.WARN, msg, args)

    def error(self, msg: str, *args: Field) -> None:
        """Log at ERROR level."""
        self._log(Level.ERROR, msg, args)

    def fatal(self, msg: str, *args: Field) -> None:
        """Log at FATAL level and exit with status 1; meant for program entry points."""
        self._log(Level.FATAL, msg, args)


_loggers: dict[str, Logger] = {}
_registry_lock = threading.Lock()


def get(name: str) -> Logger:
    """Return the logger called ``name``, creating it on first use."""
    with _registry_lock:
        logger = _loggers.get(name)
        if logger is None:
            logger = _loggers[name] = Logger(name)
        return logger


def debug(name: str, msg: str, *args: Field) -> None:
    """Log at DEBUG level through the logger ``name``."""
    get(name).debug(msg, *args)


def info(name: str, msg: str, *args: Field) -> None:
    """Log at INFO level through the logger ``name``."""
    get(name).info(msg, *args)


def warn(name: str, msg: str, *args: Field) -> None:
    """Log at WARN level through the logger ``name``."""
    get(name).warn(msg, *args)


def error(name: str, msg: str, *args: Field) -> None:
    """Log at ERROR level through the logger ``name``."""
    get(name).error(msg, *args)


def fatal(name: str, msg: str, *args: Field) -> None:
    """Log at FATAL level through the logger ``name`` and exit with status 1."""
    get(name).fatal(msg, *args)


def log_print(*args: Any) -> None:
    """Log the values at DEBUG level; a space separates two adjacent non-string values."""
    parts: list[str] = []
    for position, value in enumerate(args):
        if position and not isinstance(value, str) and not isinstance(args[position - 1], str):
            parts.append(" ")
        parts.append(_format_value(value))
    get("print").debug("".join(parts))


def log_printf(fmt: str, *args: Any) -> None:
    """Log ``fmt % args`` at DEBUG level."""
    get("print").debug(fmt % args if args else fmt)