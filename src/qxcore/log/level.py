"""Log levels shared by every backend."""

from __future__ import annotations

import enum
import logging

from qxcore.core import Nothing, Option, Some

#: ``logging`` has no level below DEBUG; TRACE sits halfway to NOTSET.
TRACE_STDLIB_LEVEL = 5

logging.addLevelName(TRACE_STDLIB_LEVEL, "TRACE")


class LogLevel(enum.IntEnum):
    """Ordered log levels; a larger value is more severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5

    def __str__(self) -> str:
        return self.label

    def __format__(self, format_spec: str) -> str:
        # Plain "{level}" renders the label; any spec formats the number.
        if format_spec:
            return int.__format__(self, format_spec)
        return self.label

    @property
    def label(self) -> str:
        """Upper-case display name, e.g. ``"WARN"``."""
        return self.name

    @property
    def stdlib_level(self) -> int:
        """The equivalent ``logging`` level number."""
        return _TO_STDLIB[self]

    @classmethod
    def parse(cls, text: str) -> Option[LogLevel]:
        """Parse a level name case-insensitively.

        Accepts the labels plus the aliases ``warning`` and ``fatal``.
        Returns ``Nothing()`` for anything else.
        """
        level = _ALIASES.get(text.strip().lower())
        if level is None:
            return Nothing()
        return Some(level)

    @classmethod
    def from_stdlib(cls, level: int) -> LogLevel:
        """Map a ``logging`` level number, rounding down to a known level.

        Numbers below TRACE map to TRACE.
        """
        for candidate in sorted(cls, reverse=True):
            if level >= candidate.stdlib_level:
                return candidate
        return cls.TRACE


_TO_STDLIB: dict[LogLevel, int] = {
    LogLevel.TRACE: TRACE_STDLIB_LEVEL,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}

_ALIASES: dict[str, LogLevel] = {
    **{level.label.lower(): level for level in LogLevel},
    "warning": LogLevel.WARN,
    "fatal": LogLevel.CRITICAL,
}


def is_level_enabled(current: LogLevel, target: LogLevel) -> bool:
    """Return True if a message at *target* passes a logger set to *current*."""
    return target >= current


__all__ = ["TRACE_STDLIB_LEVEL", "LogLevel", "is_level_enabled"]
