"""Backend on ``structlog``: key-value events, console or JSON rendering."""

from __future__ import annotations

import logging
from pathlib import Path
import sys
from typing import IO, Any

import structlog

from qxcore.log.backend import BaseBackend
from qxcore.log.level import LogLevel

# structlog method used for each level; filtering happens in BaseBackend.
_METHODS: dict[LogLevel, str] = {
    LogLevel.TRACE: "debug",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.CRITICAL: "critical",
}


class StructlogBackend(BaseBackend):
    """Emits one structlog event per message.

    Events carry ``timestamp`` (ISO 8601), ``level`` (lower-case qxcore
    label) and ``logger``. Loggers are wrapped locally rather than through
    ``structlog.configure`` so several backends can coexist with different
    settings.
    """

    def __init__(
        self,
        *,
        stream: IO[str] | None = None,
        log_dir: Path | None = None,
        json: bool = False,
    ) -> None:
        super().__init__(stream=stream, log_dir=log_dir)
        self._json = json
        self._loggers: list[Any] = []
        self._file: IO[str] | None = None

    def _processors(self) -> list[structlog.types.Processor]:
        renderer: structlog.types.Processor
        if self._json:
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(colors=False)
        return [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.UnicodeDecoder(),
            renderer,
        ]

    def _wrap(self, name: str, file: IO[str]) -> Any:
        wrapped = structlog.wrap_logger(
            structlog.PrintLogger(file),
            processors=self._processors(),
            wrapper_class=structlog.make_filtering_bound_logger(logging.NOTSET),
        )
        return wrapped.bind(logger=name)

    def _open(self, name: str, level: LogLevel) -> None:
        del level
        loggers = [self._wrap(name, self._stream or sys.stdout)]
        log_path = self.log_path
        if log_path is not None:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file = log_path.open("w", encoding="utf-8")
            loggers.append(self._wrap(name, self._file))
        self._loggers = loggers

    def _apply_level(self, level: LogLevel) -> None:
        # Levels are enforced by is_enabled; the wrapped loggers pass everything.
        del level

    def _emit(self, level: LogLevel, message: str) -> None:
        method = _METHODS[level]
        label = level.label.lower()
        for bound in self._loggers:
            getattr(bound, method)(message, level=label)

    def _flush(self) -> None:
        for stream in (self._stream, self._file):
            if stream is not None:
                stream.flush()

    def _close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self._loggers = []


__all__ = ["StructlogBackend"]
