"""Option type: a present value or explicit absence.

Use ``Option`` instead of a sentinel when every value of ``T`` is meaningful
(``0``, ``""`` and ``None`` included).
"""

from __future__ import annotations

import dataclasses
from typing import Literal, Never

from qxcore.errors import UnwrapError

_EMPTY_UNWRAP_MESSAGE = "called unwrap on an empty Option"


@dataclasses.dataclass(frozen=True, slots=True)
class Some[T]:
    """A present value."""

    value: T

    def is_some(self) -> Literal[True]:
        return True

    def is_none(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        del default
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Nothing:
    """Explicit absence. Carries no payload."""

    def is_some(self) -> Literal[False]:
        return False

    def is_none(self) -> Literal[True]:
        return True

    def unwrap(self) -> Never:
        raise UnwrapError(
            _EMPTY_UNWRAP_MESSAGE,
            hint="Check is_some() first or use unwrap_or() to supply a default.",
        )

    def unwrap_or[T](self, default: T) -> T:
        return default


type Option[T] = Some[T] | Nothing


__all__ = ["Nothing", "Option", "Some"]
