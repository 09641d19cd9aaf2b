"""Pytest configuration and fixtures.

Provides environment isolation and default-logger cleanup. All fixtures
here are autouse unless noted.
"""

from __future__ import annotations

import io
import os

import pytest

from qxcore.log import shutdown_default_logger

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr("qxcore.config.load_dotenv", lambda *_args, **_kwargs: False)


@pytest.fixture(autouse=True)
def isolate_qxcore_env(request, monkeypatch):
    """Clear QXCORE_* env vars to prevent test pollution.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("QXCORE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_default_logger():
    """Each test starts and ends without a process-wide default logger."""
    shutdown_default_logger()
    yield
    shutdown_default_logger()


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory console sink for backends."""
    return io.StringIO()
