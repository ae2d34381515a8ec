"""Runtime configuration for roadlog."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from roadlog.exceptions import RoadlogConfigError

_VALID_LOG_LEVELS: frozenset[str] = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _normalize_log_level(value: str | None) -> str | None:
    if value is None:
        return None
    level = value.strip().upper()
    if not level:
        return None
    if level not in _VALID_LOG_LEVELS:
        raise RoadlogConfigError(f"log level must be one of {sorted(_VALID_LOG_LEVELS)}, got {value!r}")
    return level


@dataclasses.dataclass(frozen=True)
class RoadlogConfig:
    """Processor configuration.

    None of these settings change what is written to the answer stream
    or the diagnostic format.

    Parameters
    ----------
    log_level : str or None
        Standard logging level name.  When ``None`` the CLI leaves
        logging unconfigured so only diagnostics reach stderr.
    log_format : str
        Format string handed to :func:`logging.basicConfig`.
    strict : bool
        Exit with a non-zero status at end of input if any diagnostic
        was emitted.
    """

    log_level: str | None = None
    log_format: str = DEFAULT_LOG_FORMAT
    strict: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "log_level", _normalize_log_level(self.log_level))

    @property
    def logging_level(self) -> int | None:
        """Numeric logging level, or ``None`` when logging stays unconfigured."""
        if self.log_level is None:
            return None
        return logging.getLevelNamesMapping()[self.log_level]

    @classmethod
    def from_env(cls, **overrides: Any) -> RoadlogConfig:
        """Create configuration from environment variables.

        Reads ``ROADLOG_LOG_LEVEL``, ``ROADLOG_LOG_FORMAT`` and
        ``ROADLOG_STRICT``.  Explicit keyword arguments whose value is not
        ``None`` override environment values.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        level_env = env.get("ROADLOG_LOG_LEVEL")
        if level_env is not None:
            config_kwargs["log_level"] = level_env

        format_env = env.get("ROADLOG_LOG_FORMAT")
        if format_env:
            config_kwargs["log_format"] = format_env

        config_kwargs["strict"] = _env_bool(env.get("ROADLOG_STRICT"), False)

        config_kwargs.update({key: value for key, value in overrides.items() if value is not None})

        return cls(**config_kwargs)
