"""Backend on the standard library ``logging`` module."""

from __future__ import annotations

import logging
import sys

from qxcore.errors import InternalError
from qxcore.log.backend import BaseBackend
from qxcore.log.level import LogLevel

LOG_FORMAT = "[%(asctime)s.%(msecs)03d] [%(name)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _LabelFormatter(logging.Formatter):
    """Render qxcore level labels (``WARN``, ``TRACE``) instead of stdlib names."""

    def format(self, record: logging.LogRecord) -> str:
        record.levelname = LogLevel.from_stdlib(record.levelno).label
        return super().format(record)


class StdlibBackend(BaseBackend):
    """Writes to a dedicated, non-propagating ``logging.Logger``.

    The logger is created per instance and never registered with
    ``logging.getLogger``, so backends sharing a name (or an application
    logger with that name) do not see each other's handlers or levels.

    The console sink defaults to ``sys.stdout`` as it is at ``init`` time.
    With ``log_dir`` set, a truncating file sink is added as
    ``<log_dir>/<name>.log``.
    """

    _logger: logging.Logger | None = None
    _handlers: list[logging.Handler]

    def _open(self, name: str, level: LogLevel) -> None:
        formatter = _LabelFormatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        handlers: list[logging.Handler] = [
            logging.StreamHandler(self._stream or sys.stdout)
        ]
        log_path = self.log_path
        if log_path is not None:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_path, mode="w", encoding="utf-8"))

        sink = logging.Logger(name, level.stdlib_level)
        sink.propagate = False
        for handler in handlers:
            handler.setFormatter(formatter)
            sink.addHandler(handler)

        self._logger = sink
        self._handlers = handlers

    def _sink(self) -> logging.Logger:
        if self._logger is None:
            raise InternalError(
                f"StdlibBackend {self._name!r} has no open logger",
                hint="Sinks exist only between a successful init() and shutdown().",
            )
        return self._logger

    def _apply_level(self, level: LogLevel) -> None:
        self._sink().setLevel(level.stdlib_level)

    def _emit(self, level: LogLevel, message: str) -> None:
        self._sink().log(level.stdlib_level, message)

    def _flush(self) -> None:
        for handler in self._handlers:
            handler.flush()

    def _close(self) -> None:
        sink = self._sink()
        for handler in self._handlers:
            sink.removeHandler(handler)
            handler.close()
        self._handlers = []
        self._logger = None


__all__ = ["DATE_FORMAT", "LOG_FORMAT", "StdlibBackend"]
