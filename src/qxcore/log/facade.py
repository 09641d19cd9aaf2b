"""``Log``: the front-end callers use, generic over its backend.

Example:
    log = Log(StdlibBackend())
    log.init("ingest", LogLevel.DEBUG).unwrap()
    log.info("loaded {} rows from {path}", 120, path="rows.csv")
    log.shutdown()

Fallible operations return a ``Result`` rather than raising; call
``.unwrap()`` where a logging failure should stop the program.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

from qxcore.core import Err, Ok, Result
from qxcore.errors import InvalidArgumentError, LogError
from qxcore.log.backend import Backend, Status
from qxcore.log.level import LogLevel
from qxcore.log.stdlib_backend import StdlibBackend
from qxcore.log.structlog_backend import StructlogBackend

if TYPE_CHECKING:
    from types import TracebackType

    from qxcore.config import LogConfig


class Log[B: Backend]:
    """Logging front-end delegating to a single backend instance."""

    def __init__(self, backend: B) -> None:
        self._backend = backend

    @classmethod
    def from_config(
        cls, config: LogConfig, *, stream: IO[str] | None = None
    ) -> Result[Log[Backend], LogError]:
        """Build the configured backend and initialize a logger on it."""
        made = make_backend(
            config.backend, stream=stream, log_dir=config.log_dir, json=config.json
        )
        if isinstance(made, Err):
            return made
        log: Log[Backend] = cls(made.value)
        status = log.init(config.name, config.level)
        if isinstance(status, Err):
            return status
        return Ok(log)

    @property
    def backend(self) -> B:
        return self._backend

    def init(self, name: str, level: LogLevel = LogLevel.INFO) -> Status:
        return self._backend.init(name, level)

    def set_level(self, level: LogLevel) -> Status:
        return self._backend.set_level(level)

    def get_level(self) -> LogLevel:
        return self._backend.get_level()

    def is_enabled(self, level: LogLevel) -> bool:
        return self._backend.is_enabled(level)

    def log(self, level: LogLevel, message: str) -> None:
        """Write *message* verbatim (no formatting)."""
        if self.is_enabled(level):
            self._backend.log(level, message)

    def logf(self, level: LogLevel, fmt: str, /, *args: Any, **kwargs: Any) -> None:
        """Format with ``str.format`` syntax and write, if *level* is enabled.

        Formatting is skipped for disabled levels. Formatting errors
        (missing arguments, bad fields) propagate to the caller.
        """
        if self.is_enabled(level):
            self._backend.log(level, fmt.format(*args, **kwargs))

    def trace(self, fmt: str, /, *args: Any, **kwargs: Any) -> None:
        self.logf(LogLevel.TRACE, fmt, *args, **kwargs)

    def debug(self, fmt: str, /, *args: Any, **kwargs: Any) -> None:
        self.logf(LogLevel.DEBUG, fmt, *args, **kwargs)

    def info(self, fmt: str, /, *args: Any, **kwargs: Any) -> None:
        self.logf(LogLevel.INFO, fmt, *args, **kwargs)

    def warn(self, fmt: str, /, *args: Any, **kwargs: Any) -> None:
        self.logf(LogLevel.WARN, fmt, *args, **kwargs)

    def error(self, fmt: str, /, *args: Any, **kwargs: Any) -> None:
        self.logf(LogLevel.ERROR, fmt, *args, **kwargs)

    def critical(self, fmt: str, /, *args: Any, **kwargs: Any) -> None:
        self.logf(LogLevel.CRITICAL, fmt, *args, **kwargs)

    def flush(self) -> None:
        self._backend.flush()

    def shutdown(self) -> None:
        self._backend.shutdown()

    def __enter__(self) -> Log[B]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()

    def __repr__(self) -> str:
        return f"Log({self._backend!r})"


def make_backend(
    kind: str,
    *,
    stream: IO[str] | None = None,
    log_dir: Path | None = None,
    json: bool = False,
) -> Result[Backend, InvalidArgumentError]:
    """Create an uninitialized backend by name."""
    if kind == "stdlib":
        return Ok(StdlibBackend(stream=stream, log_dir=log_dir))
    if kind == "structlog":
        return Ok(StructlogBackend(stream=stream, log_dir=log_dir, json=json))
    return Err(
        InvalidArgumentError(
            f"Unknown log backend: {kind!r}",
            hint="Supported backends: 'stdlib', 'structlog'",
        )
    )


__all__ = ["Log", "make_backend"]
