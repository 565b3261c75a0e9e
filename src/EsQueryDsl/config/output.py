"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from EsQueryDsl.config.common import expect_str, get_optional_value, get_section

_ALLOWED_FORMATS = {"ndjson", "body"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration.

    Attributes:
        format: ``ndjson`` for a multi-search batch, ``body`` for one body per line.
        path: Target file, or empty string for stdout.
    """

    format: str
    path: str


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from the optional ``output`` section.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "output", required=False)
    path = get_optional_value(section, "path", None)
    return OutputConfig(
        format=expect_str(get_optional_value(section, "format", "ndjson"), "output.format").lower(),
        path="" if path is None else expect_str(path, "output.path"),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If the format is unknown.
    """
    if config.format not in _ALLOWED_FORMATS:
        raise ValueError(f"output.format must be one of {sorted(_ALLOWED_FORMATS)}")
