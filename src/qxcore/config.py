"""Configuration: frozen logging config resolved from arguments and environment."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Literal, get_args

from dotenv import load_dotenv

from qxcore.errors import ConfigurationError
from qxcore.log.level import LogLevel

BackendName = Literal["stdlib", "structlog"]

DEFAULT_LOGGER_NAME = "qxcore_default"

_BACKENDS: tuple[str, ...] = get_args(BackendName)

# Environment variable for each LogConfig field
_ENV_VARS: dict[str, str] = {
    "name": "QXCORE_LOG_NAME",
    "level": "QXCORE_LOG_LEVEL",
    "backend": "QXCORE_LOG_BACKEND",
    "log_dir": "QXCORE_LOG_DIR",
    "json": "QXCORE_LOG_JSON",
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class LogConfig:
    """Immutable configuration for a qxcore logger.

    Example:
        config = LogConfig(name="ingest", level=LogLevel.DEBUG, log_dir=Path("logs"))
        logger = Log.from_config(config).unwrap()
    """

    name: str = DEFAULT_LOGGER_NAME
    level: LogLevel = LogLevel.INFO
    backend: BackendName = "stdlib"
    #: When set, ``<log_dir>/<name>.log`` is written (truncated on init).
    log_dir: Path | None = None
    #: JSON rendering; honored by the structlog backend only.
    json: bool = False

    def __post_init__(self) -> None:
        """Validate fields."""
        if not self.name.strip():
            raise ConfigurationError(
                "Logger name cannot be empty",
                hint=f"Pass name=... or set {_ENV_VARS['name']}.",
            )
        if self.backend not in _BACKENDS:
            raise ConfigurationError(
                f"Unknown log backend: {self.backend!r}",
                hint=f"Supported backends: {', '.join(map(repr, _BACKENDS))}",
            )
        if not isinstance(self.level, LogLevel):
            raise ConfigurationError(
                f"level must be a LogLevel, got {type(self.level).__name__}",
                hint="Use LogLevel.parse() to convert strings.",
            )
        if self.log_dir is not None and not isinstance(self.log_dir, Path):
            object.__setattr__(self, "log_dir", Path(self.log_dir))

    @classmethod
    def from_env(cls, **overrides: Any) -> LogConfig:
        """Build a config from ``QXCORE_LOG_*`` variables and *overrides*.

        A ``.env`` file in the working directory is loaded first (existing
        environment variables take precedence). Explicit keyword overrides
        win over the environment.
        """
        load_dotenv()

        values: dict[str, Any] = {}
        for field_name, env_var in _ENV_VARS.items():
            raw = os.environ.get(env_var)
            if raw is None:
                continue
            values[field_name] = _coerce(field_name, env_var, raw)
        values.update(overrides)
        return cls(**values)

    def __str__(self) -> str:
        """Return a compact developer-friendly representation."""
        return (
            f"LogConfig(name={self.name!r}, level={self.level.label}, "
            f"backend={self.backend!r}, log_dir={self.log_dir}, json={self.json})"
        )

    __repr__ = __str__


def _coerce(field_name: str, env_var: str, raw: str) -> Any:
    if field_name == "level":
        parsed = LogLevel.parse(raw)
        if parsed.is_none():
            valid = ", ".join(level.label for level in LogLevel)
            raise ConfigurationError(
                f"Invalid {env_var}: {raw!r}",
                hint=f"Use one of: {valid} (case-insensitive).",
            )
        return parsed.unwrap()
    if field_name == "log_dir":
        return Path(raw).expanduser() if raw.strip() else None
    if field_name == "json":
        lowered = raw.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
        raise ConfigurationError(
            f"Invalid {env_var}: {raw!r}",
            hint="Use 1/0, true/false, yes/no or on/off.",
        )
    if field_name == "backend":
        return raw.strip().lower()
    return raw.strip()


__all__ = ["DEFAULT_LOGGER_NAME", "BackendName", "LogConfig"]
