"""Process-wide default logger."""

from __future__ import annotations

import atexit
import logging
import threading
from typing import Any

from qxcore.core import Err, Ok
from qxcore.log.backend import Backend, Status
from qxcore.log.facade import Log, make_backend
from qxcore.log.level import LogLevel

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_default: Log[Backend] | None = None


def get_default_logger() -> Log[Backend]:
    """Return the default logger, creating it from the environment on first use.

    If the environment-derived logger fails to initialize, the returned
    logger is left uninitialized (every call on it is a no-op) and the
    failure is reported through the library's own ``logging`` logger.
    Configuration errors in ``QXCORE_LOG_*`` variables raise
    ``ConfigurationError``.
    """
    from qxcore.config import LogConfig

    global _default
    with _lock:
        if _default is None:
            config = LogConfig.from_env()
            made = make_backend(
                config.backend, log_dir=config.log_dir, json=config.json
            )
            # LogConfig validates the backend name, so this cannot be Err.
            log: Log[Backend] = Log(made.unwrap())
            status = log.init(config.name, config.level)
            if isinstance(status, Err):
                logger.warning("Default logger initialization failed: %s", status.error)
            _default = log
        return _default


def init_default_logger(
    name: str, level: LogLevel = LogLevel.INFO, **config: Any
) -> Status:
    """Replace the default logger with a new one named *name*.

    Any existing default logger is shut down first. Extra keyword arguments
    (``backend``, ``log_dir``, ``json``, ``stream``) select and configure the
    backend; ``backend`` defaults to ``"stdlib"``.
    """
    global _default
    kind = config.pop("backend", "stdlib")
    with _lock:
        if _default is not None:
            _default.shutdown()
            _default = None
        made = make_backend(kind, **config)
        if isinstance(made, Err):
            return made
        log: Log[Backend] = Log(made.value)
        status = log.init(name, level)
        _default = log
        return status if isinstance(status, Err) else Ok(None)


def shutdown_default_logger() -> None:
    """Shut down and forget the default logger, if any."""
    global _default
    with _lock:
        if _default is not None:
            _default.shutdown()
            _default = None


atexit.register(shutdown_default_logger)


__all__ = ["get_default_logger", "init_default_logger", "shutdown_default_logger"]
