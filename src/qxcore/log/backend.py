"""Backend protocol: the sink behind a ``Log`` front-end."""

from __future__ import annotations

import abc
import logging
from pathlib import Path
from typing import IO, Protocol, runtime_checkable

from qxcore.core import Err, Ok, Result
from qxcore.errors import (
    AlreadyInitializedError,
    BackendError,
    InvalidArgumentError,
    LogError,
    NotInitializedError,
)
from qxcore.log.level import LogLevel, is_level_enabled

logger = logging.getLogger(__name__)

type Status = Result[None, LogError]


@runtime_checkable
class Backend(Protocol):
    """Minimal backend protocol: lifecycle, level control and emission."""

    def init(self, name: str, level: LogLevel = LogLevel.INFO) -> Status:
        """Set up sinks under *name* at *level*."""
        ...

    def set_level(self, level: LogLevel) -> Status:
        """Change the minimum level."""
        ...

    def get_level(self) -> LogLevel:
        """Return the current minimum level."""
        ...

    def is_enabled(self, level: LogLevel) -> bool:
        """Whether a message at *level* would be written."""
        ...

    def log(self, level: LogLevel, message: str) -> None:
        """Write *message* if *level* is enabled."""
        ...

    def flush(self) -> None:
        """Flush buffered output."""
        ...

    def shutdown(self) -> None:
        """Flush and release sinks; the backend may be re-initialized."""
        ...

    @property
    def initialized(self) -> bool:
        """Whether ``init`` has succeeded and ``shutdown`` has not run since."""
        ...

    @property
    def name(self) -> str | None:
        """The logger name, or None before ``init``."""
        ...


class BaseBackend(abc.ABC):
    """Shared lifecycle bookkeeping for concrete backends.

    Subclasses implement the ``_open``/``_apply_level``/``_emit``/``_flush``/
    ``_close`` hooks; the public methods enforce the status rules common to
    every backend.
    """

    def __init__(
        self, *, stream: IO[str] | None = None, log_dir: Path | None = None
    ) -> None:
        self._stream = stream
        self._log_dir = Path(log_dir) if log_dir is not None else None
        self._name: str | None = None
        self._level = LogLevel.INFO
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def log_path(self) -> Path | None:
        """Where the file sink writes, when a log directory is configured."""
        if self._log_dir is None or self._name is None:
            return None
        return self._log_dir / f"{self._name}.log"

    def init(self, name: str, level: LogLevel = LogLevel.INFO) -> Status:
        if self._initialized:
            return Err(
                AlreadyInitializedError("Logger already initialized", name=self._name)
            )
        if not name:
            return Err(InvalidArgumentError("Logger name cannot be empty"))

        self._name = name
        try:
            self._open(name, level)
        except OSError as exc:
            self._name = None
            error = BackendError(
                f"Failed to initialize {type(self).__name__}: {exc}",
                name=name,
                hint="Check that the log directory exists and is writable.",
            )
            error.__cause__ = exc
            return Err(error)

        self._level = level
        self._initialized = True
        logger.debug("Initialized %s %r at %s", type(self).__name__, name, level)
        return Ok(None)

    def set_level(self, level: LogLevel) -> Status:
        if not self._initialized:
            return Err(NotInitializedError("Logger not initialized", name=self._name))
        self._apply_level(level)
        self._level = level
        return Ok(None)

    def get_level(self) -> LogLevel:
        return self._level

    def is_enabled(self, level: LogLevel) -> bool:
        if not self._initialized:
            return False
        return is_level_enabled(self._level, level)

    def log(self, level: LogLevel, message: str) -> None:
        if not self.is_enabled(level):
            return
        self._emit(level, message)

    def flush(self) -> None:
        if not self._initialized:
            return
        self._flush()

    def shutdown(self) -> None:
        if not self._initialized:
            return
        self._flush()
        self._close()
        self._initialized = False
        logger.debug("Shut down %s %r", type(self).__name__, self._name)

    def __repr__(self) -> str:
        state = "initialized" if self._initialized else "uninitialized"
        return f"{type(self).__name__}(name={self._name!r}, level={self._level}, {state})"

    @abc.abstractmethod
    def _open(self, name: str, level: LogLevel) -> None:
        """Create sinks. May raise ``OSError``."""

    @abc.abstractmethod
    def _apply_level(self, level: LogLevel) -> None: ...

    @abc.abstractmethod
    def _emit(self, level: LogLevel, message: str) -> None: ...

    @abc.abstractmethod
    def _flush(self) -> None: ...

    @abc.abstractmethod
    def _close(self) -> None: ...


__all__ = ["Backend", "BaseBackend", "Status"]
