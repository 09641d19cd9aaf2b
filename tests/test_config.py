"""LogConfig tests: validation, environment resolution, overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from qxcore.config import DEFAULT_LOGGER_NAME, LogConfig
from qxcore.errors import ConfigurationError
from qxcore.log import LogLevel

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    config = LogConfig()

    assert config.name == DEFAULT_LOGGER_NAME
    assert config.level is LogLevel.INFO
    assert config.backend == "stdlib"
    assert config.log_dir is None
    assert config.json is False


def test_config_is_frozen() -> None:
    config = LogConfig()
    with pytest.raises(AttributeError):
        config.name = "other"  # type: ignore[misc]


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_is_rejected(name: str) -> None:
    with pytest.raises(ConfigurationError) as exc:
        LogConfig(name=name)

    assert exc.value.hint is not None
    assert "QXCORE_LOG_NAME" in exc.value.hint


def test_unknown_backend_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="Unknown log backend") as exc:
        LogConfig(backend="syslog")  # type: ignore[arg-type]

    assert "structlog" in (exc.value.hint or "")


def test_string_level_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        LogConfig(level="debug")  # type: ignore[arg-type]


def test_log_dir_string_is_coerced_to_path() -> None:
    config = LogConfig(log_dir="logs")  # type: ignore[arg-type]
    assert config.log_dir == Path("logs")


def test_from_env_reads_all_variables(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("QXCORE_LOG_NAME", "worker")
    monkeypatch.setenv("QXCORE_LOG_LEVEL", "Warning")
    monkeypatch.setenv("QXCORE_LOG_BACKEND", "structlog")
    monkeypatch.setenv("QXCORE_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("QXCORE_LOG_JSON", "yes")

    config = LogConfig.from_env()

    assert config.name == "worker"
    assert config.level is LogLevel.WARN
    assert config.backend == "structlog"
    assert config.log_dir == tmp_path
    assert config.json is True


def test_from_env_without_variables_uses_defaults() -> None:
    assert LogConfig.from_env() == LogConfig()


def test_overrides_win_over_environment(monkeypatch) -> None:
    monkeypatch.setenv("QXCORE_LOG_NAME", "from-env")
    monkeypatch.setenv("QXCORE_LOG_LEVEL", "error")

    config = LogConfig.from_env(name="explicit")

    assert config.name == "explicit"
    assert config.level is LogLevel.ERROR


def test_invalid_env_level_raises_with_hint(monkeypatch) -> None:
    monkeypatch.setenv("QXCORE_LOG_LEVEL", "loud")

    with pytest.raises(ConfigurationError, match="QXCORE_LOG_LEVEL") as exc:
        LogConfig.from_env()

    assert "TRACE" in (exc.value.hint or "")


def test_invalid_env_bool_raises(monkeypatch) -> None:
    monkeypatch.setenv("QXCORE_LOG_JSON", "maybe")

    with pytest.raises(ConfigurationError, match="QXCORE_LOG_JSON"):
        LogConfig.from_env()


def test_empty_log_dir_env_means_no_file_sink(monkeypatch) -> None:
    monkeypatch.setenv("QXCORE_LOG_DIR", "  ")
    assert LogConfig.from_env().log_dir is None


def test_from_env_loads_dotenv(monkeypatch) -> None:
    calls: list[bool] = []
    monkeypatch.setattr(
        "qxcore.config.load_dotenv", lambda *_a, **_k: calls.append(True) or False
    )

    LogConfig.from_env()

    assert calls == [True]


def test_str_is_compact() -> None:
    text = str(LogConfig(name="svc", level=LogLevel.DEBUG))

    assert text.startswith("LogConfig(")
    assert "name='svc'" in text
    assert "level=DEBUG" in text
    assert repr(LogConfig()) == str(LogConfig())
