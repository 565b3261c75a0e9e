"""Runtime domain configuration (the ``log`` section).

All keys are optional::

    log:
      level: INFO      # DEBUG / INFO / WARNING / ERROR / CRITICAL
      to_file: false   # mirror logs to <dir>/<command>/
      dir: log
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from EsQueryDsl.config.common import expect_bool, expect_str, get_optional_value, get_section

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Logging settings applied by the CLI before each command."""

    level: str = "INFO"
    to_file: bool = False
    dir: str = "log"


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Read the ``log`` section, filling gaps from `RuntimeConfig` defaults.

    Raises:
        TypeError: If a present key has the wrong type.
    """
    section = get_section(raw, "log", required=False)
    defaults = RuntimeConfig()
    level = expect_str(get_optional_value(section, "level", defaults.level), "log.level")
    return RuntimeConfig(
        level=level.strip().upper(),
        to_file=expect_bool(get_optional_value(section, "to_file", defaults.to_file), "log.to_file"),
        dir=expect_str(get_optional_value(section, "dir", defaults.dir), "log.dir"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Reject unknown levels and an empty log directory.

    Raises:
        ValueError: If a value is out of range.
    """
    if config.level not in _LOG_LEVELS:
        raise ValueError(f"log.level must be one of {list(_LOG_LEVELS)}")
    if not config.dir.strip():
        raise ValueError("log.dir must not be empty")
