"""Logging facade: levels, backends, the ``Log`` front-end and a default logger.

Public API:
    - LogLevel, is_level_enabled: ordered levels and the enablement rule
    - Log: front-end generic over a Backend
    - StdlibBackend, StructlogBackend: concrete backends
    - make_backend(): backend construction by name
    - get_default_logger(), init_default_logger(): process-wide logger
"""

from __future__ import annotations

from qxcore.log.backend import Backend, BaseBackend, Status
from qxcore.log.default import (
    get_default_logger,
    init_default_logger,
    shutdown_default_logger,
)
from qxcore.log.facade import Log, make_backend
from qxcore.log.level import TRACE_STDLIB_LEVEL, LogLevel, is_level_enabled
from qxcore.log.stdlib_backend import StdlibBackend
from qxcore.log.structlog_backend import StructlogBackend

__all__ = [
    "TRACE_STDLIB_LEVEL",
    "Backend",
    "BaseBackend",
    "Log",
    "LogLevel",
    "Status",
    "StdlibBackend",
    "StructlogBackend",
    "get_default_logger",
    "init_default_logger",
    "is_level_enabled",
    "make_backend",
    "shutdown_default_logger",
]
