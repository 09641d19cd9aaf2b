"""Public API surface tests."""

from __future__ import annotations

import logging
import re

import pytest

import qxcore
from qxcore.core import VERSION

pytestmark = pytest.mark.unit


def test_version_is_non_empty_semver() -> None:
    assert VERSION
    assert re.fullmatch(r"\d+\.\d+\.\d+", VERSION)
    assert qxcore.__version__ == VERSION


def test_public_exports_resolve() -> None:
    for name in qxcore.__all__:
        assert hasattr(qxcore, name), name


def test_library_logger_has_null_handler() -> None:
    handlers = logging.getLogger("qxcore").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_top_level_containers_round_out_a_workflow() -> None:
    """Parse a level from text, fall back on absence, wrap the outcome."""

    def parse_level(text: str) -> qxcore.Result[qxcore.LogLevel, str]:
        parsed = qxcore.LogLevel.parse(text)
        if parsed.is_none():
            return qxcore.Err(f"unknown level {text!r}")
        return qxcore.Ok(parsed.unwrap())

    assert parse_level("debug").unwrap() is qxcore.LogLevel.DEBUG
    assert parse_level("loud").unwrap_or(qxcore.LogLevel.INFO) is qxcore.LogLevel.INFO
