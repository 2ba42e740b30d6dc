"""Hierarchical per-module loggers writing to shared files.

Module names are nested with ``::``. A logger prints a message only when
the message's level does not exceed both its own level and that of its
nearest registered ancestor (or of the default logger when there is none).
"""

from __future__ import annotations

import re
import threading
from enum import IntEnum
from typing import TextIO

from .resources import ResourceManager

DEFAULT_LOGGER_NAME = "LOG"
DEFAULT_LOGGER_FILE = "LOG.txt"

_PARENT = re.compile(r"(.*)::.*")


class LogLevel(IntEnum):
    """Verbosity levels, from silent to everything."""

    NONE = 0
    STATUS = 1
    DEBUG = 2
    EVERYTHING = 3
    MAX = 4


def _open_log_file(filename: str) -> TextIO:
    return open(filename, "w", encoding="utf-8")


class ModuleLogger:
    """A named logger with its own level and output file."""

    def __init__(
        self,
        filename: str,
        module_name: str,
        level: LogLevel = LogLevel.DEBUG,
    ) -> None:
        self.filename = filename
        self.module_name = module_name
        self.level = LogLevel(level)

    def log(self, message: object, level: LogLevel | None = None) -> bool:
        """Write ``message`` at ``level`` (default: the logger's own level).

        Returns True if the message was written, False if it was filtered out.
        """
        chosen = self.level if level is None else LogLevel(level)
        if chosen > self.get_log_level():
            return False
        stream = _streams.get(self.filename)
        stream.write(f"{self.module_name} ({chosen.name}): {message}")
        stream.flush()
        return True

    def get_log_level(self) -> LogLevel:
        """Return the effective level: the lower of this and the parent's level."""
        parent = logger(parent_logger_name(self.module_name))
        return min(self.level, parent.level)

    def __repr__(self) -> str:
        return (
            f"ModuleLogger(module_name={self.module_name!r}, "
            f"filename={self.filename!r}, level={self.level.name})"
        )


_lock = threading.RLock()
_streams: ResourceManager[str, TextIO] = ResourceManager(_open_log_file)
_registry: dict[str, ModuleLogger] = {}


def _install_default() -> None:
    _registry[DEFAULT_LOGGER_NAME] = ModuleLogger(
        DEFAULT_LOGGER_FILE, DEFAULT_LOGGER_NAME, LogLevel.MAX
    )


_install_default()


def reset_registry() -> None:
    """Close every log file and forget all loggers except a fresh default one."""
    with _lock:
        _streams.close()
        _registry.clear()
        _install_default()


def logger(module_name: str = DEFAULT_LOGGER_NAME) -> ModuleLogger:
    """Return the registered logger for ``module_name``; raises KeyError if none."""
    with _lock:
        try:
            return _registry[module_name]
        except KeyError:
            raise KeyError(f"no logger registered for {module_name!r}") from None


def parent_logger_name(module_name: str) -> str:
    """Return the name of the nearest registered ancestor of ``module_name``.

    The default logger's name is returned when no ancestor is registered.
    """
    name = module_name
    while True:
        match = _PARENT.fullmatch(name)
        if match is None:
            return DEFAULT_LOGGER_NAME
        name = match.group(1)
        if name in _registry:
            return name


def register_logger(
    module_name: str,
    filename: str = DEFAULT_LOGGER_FILE,
    level: LogLevel = LogLevel.DEBUG,
) -> ModuleLogger:
    """Register a logger, unless one already exists under that name.

    Returns the logger registered under ``module_name``.
    """
    with _lock:
        existing = _registry.get(module_name)
        if existing is not None:
            return existing
        created = ModuleLogger(filename, module_name, level)
        _registry[module_name] = created
        return created