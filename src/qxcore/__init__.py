"""qxcore: small generic containers and a logging facade.

Public API:
    - Ok / Err (Result): a value or a failure descriptor
    - Some / Nothing (Option): a value or explicit absence
    - VERSION: the library version string
    - LogConfig, Log, LogLevel: logging configuration and front-end
"""

from __future__ import annotations

import logging

from qxcore.config import LogConfig
from qxcore.core import VERSION, Err, Nothing, Ok, Option, Result, Some
from qxcore.errors import (
    ConfigurationError,
    InternalError,
    LogError,
    QxcoreError,
    UnwrapError,
)
from qxcore.log import Log, LogLevel, get_default_logger, init_default_logger

__version__ = VERSION

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("qxcore").addHandler(logging.NullHandler())

__all__ = [
    "VERSION",
    "ConfigurationError",
    "Err",
    "InternalError",
    "Log",
    "LogConfig",
    "LogError",
    "LogLevel",
    "Nothing",
    "Ok",
    "Option",
    "QxcoreError",
    "Result",
    "Some",
    "UnwrapError",
    "get_default_logger",
    "init_default_logger",
]
