"""Result type: a computed value or a recorded failure, never both.

``Ok`` and ``Err`` are the two variants of the ``Result`` union. The failure
branch carries no payload value, so there is no placeholder that a caller
could mistake for a real one. Inspect with ``is_ok()``/``is_err()`` or
pattern matching, then read the value:

    match load_settings(path):
        case Ok(settings):
            apply(settings)
        case Err(error):
            report(error)

``unwrap()`` is the "fail loud" accessor. Use it only after success has been
established; on ``Err`` it raises ``UnwrapError``.
"""

from __future__ import annotations

import dataclasses
from typing import Literal, Never

from qxcore.errors import UnwrapError


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """The successful branch of a Result."""

    value: T

    def unpack(self) -> tuple[T, None]:
        """Return ``(value, None)``."""
        return self.value, None

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        del default
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """The failure branch of a Result, holding an opaque failure descriptor.

    The descriptor is usually an exception instance but may be any value
    (message, code, structured cause). It is stored verbatim and is expected
    to be non-null; this is not validated.
    """

    error: E

    def unpack(self) -> tuple[None, E]:
        """Return ``(None, error)`` with the exact error object stored."""
        return None, self.error

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> Never:
        """Raise ``UnwrapError`` carrying the stored failure descriptor."""
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError(
            f"called unwrap on an Err value: {self.error!r}",
            error=self.error,
            hint="Check is_ok() first or use unwrap_or() to supply a default.",
        ) from cause

    def unwrap_or[T](self, default: T) -> T:
        return default


type Result[T, E] = Ok[T] | Err[E]


__all__ = ["Err", "Ok", "Result"]
