"""Shared helpers for configuration loading and validation.

Every helper takes the dotted ``config_key`` of the value it checks, so error
messages point at the offending YAML location (``queries[0].must[1].field``).
"""

from __future__ import annotations

from typing import Any, Mapping


def get_section(raw: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    """Return the mapping stored under ``key``.

    Args:
        raw: Parent mapping.
        key: Section name.
        required: Whether a missing section is an error.

    Returns:
        The section, or an empty mapping when an optional section is absent.

    Raises:
        ValueError: If a required section is absent.
        TypeError: If the section is present but not a mapping.
    """
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    return expect_mapping(section, key)


def get_required_value(section: Mapping[str, Any], field: str, config_key: str) -> Any:
    """Return ``section[field]``; raise ``ValueError`` naming ``config_key`` if absent."""
    if field not in section:
        raise ValueError(f"Missing required config: {config_key}")
    return section[field]


def get_optional_value(section: Mapping[str, Any], field: str, default: Any) -> Any:
    """Return ``section[field]`` or ``default``."""
    return section.get(field, default)


def _expect(value: Any, accepted: type, config_key: str, label: str) -> Any:
    # bool is an int subclass; YAML true/false must not pass as numbers.
    if not isinstance(value, accepted) or (isinstance(value, bool) and accepted is not bool):
        raise TypeError(f"{config_key} must be {label}")
    return value


def expect_str(value: Any, config_key: str) -> str:
    return _expect(value, str, config_key, "a string")


def expect_bool(value: Any, config_key: str) -> bool:
    return _expect(value, bool, config_key, "a boolean")


def expect_int(value: Any, config_key: str) -> int:
    return _expect(value, int, config_key, "an integer")


def expect_list(value: Any, config_key: str) -> list[Any]:
    return _expect(value, list, config_key, "a list")


def expect_mapping(value: Any, config_key: str) -> Mapping[str, Any]:
    return _expect(value, Mapping, config_key, "an object")
