# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Helpers shared by the ``from_config`` constructors of the model."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from declgen.model.errors import InvalidArgumentError

# ###############
# Public Interface
# ###############


def normalize_config_key(key: str) -> str:
    """Normalize a configuration key for comparison.

    Case and the separators ``_``, ``-`` and ``.`` are ignored, so that
    ``extendedClass``, ``extended_class`` and ``extended-class`` are the same key.
    """
    return key.lower().replace("_", "").replace("-", "").replace(".", "")


def iter_config(config: object, allowed: set[str], context: str) -> Iterator[tuple[str, Any]]:
    """Yield ``(normalized_key, value)`` pairs of a configuration mapping.

    Args:
        config: The configuration value; must be a mapping with string keys.
        allowed: Normalized keys accepted in this mapping.
        context: Human-readable label used in error messages.

    Raises:
        InvalidArgumentError: If *config* is not a mapping or holds an unknown key.
    """
    if not isinstance(config, Mapping):
        raise InvalidArgumentError(f"{context} configuration must be a mapping, got {config!r}")
    for key, value in config.items():
        if not isinstance(key, str):
            raise InvalidArgumentError(f"{context} configuration keys must be strings, got {key!r}")
        normalized = normalize_config_key(key)
        if normalized not in allowed:
            raise InvalidArgumentError(f"unknown {context} configuration key '{key}'")
        yield normalized, value


def require_name(config: Mapping[str, Any], context: str) -> str:
    """Return the non-empty ``name`` entry of a configuration mapping."""
    for key, value in config.items():
        if isinstance(key, str) and normalize_config_key(key) == "name":
            if not isinstance(value, str) or not value:
                raise InvalidArgumentError(f"{context} name must be a non-empty string, got {value!r}")
            return value
    raise InvalidArgumentError(f"{context} configuration requires that a name is provided")


def optional_string(value: object, context: str) -> str | None:
    """Return *value* when it is a string or ``None``, otherwise raise.

    Raises:
        InvalidArgumentError: If *value* is of any other type.
    """
    if value is not None and not isinstance(value, str):
        raise InvalidArgumentError(f"{context} must be a string, got {value!r}")
    return value
