"""Core value containers for qxcore.

- ``Result`` (``Ok`` | ``Err``): the outcome of an operation that may fail.
- ``Option`` (``Some`` | ``Nothing``): a value that may be absent.
- ``VERSION``: the library's semantic version string.
"""

from __future__ import annotations

from qxcore.core.option import Nothing, Option, Some
from qxcore.core.result import Err, Ok, Result

VERSION = "0.1.0"

__all__ = [
    "VERSION",
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
]
