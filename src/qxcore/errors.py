"""Exception hierarchy for qxcore."""

from __future__ import annotations

from typing import Any


class QxcoreError(Exception):
    """Base exception for all qxcore errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(QxcoreError):
    """Configuration validation or resolution failed."""


class InternalError(QxcoreError):
    """A qxcore internal error (bug) or invariant violation."""


class UnwrapError(InternalError):
    """``unwrap()`` was called on an ``Err`` or an empty ``Option``.

    This is a programmer error: callers are expected to check ``is_ok()`` or
    ``is_some()`` first. The stored failure descriptor is kept on ``error``
    (``None`` for an empty ``Option``).
    """

    def __init__(
        self, message: str, *, error: Any = None, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.error = error


class LogError(QxcoreError):
    """A logging facade operation could not be completed.

    These are returned inside ``Err`` by the logging backends rather than
    raised, so callers decide whether a logging failure matters.
    """

    def __init__(
        self, message: str, *, name: str | None = None, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.name = name


class AlreadyInitializedError(LogError):
    """The logger was already initialized."""


class NotInitializedError(LogError):
    """The logger has not been initialized yet."""


class InvalidArgumentError(LogError):
    """A logger argument (name, backend kind) was rejected."""


class BackendError(LogError):
    """The underlying logging sink could not be set up."""


__all__ = [
    "AlreadyInitializedError",
    "BackendError",
    "ConfigurationError",
    "InternalError",
    "InvalidArgumentError",
    "LogError",
    "NotInitializedError",
    "QxcoreError",
    "UnwrapError",
]
