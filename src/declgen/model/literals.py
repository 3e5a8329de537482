# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Values that can stand as defaults of properties and parameters."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from declgen.model.errors import InvalidArgumentError

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Expression:
    """Source text emitted verbatim in place of a literal, e.g. ``self::LIMIT``."""

    source: str


def check_literal(value: Any, context: str) -> Any:
    """Return *value* if it has a literal form, otherwise raise.

    Literal values are ``None``, booleans, numbers, strings, :class:`Expression`
    and lists, tuples and mappings built from them. Mapping keys must be
    strings or integers.

    Raises:
        InvalidArgumentError: If *value*, or anything nested in it, has no literal form.
    """
    if not _is_literal(value):
        raise InvalidArgumentError(
            f"{context} default value {value!r} of type {type(value).__name__} has no literal form"
        )
    return value


# ################
# Implementation
# ################


def _is_literal(value: Any) -> bool:
    if value is None or isinstance(value, (Expression, bool, int, float, str)):
        return True
    if isinstance(value, Mapping):
        return all(
            isinstance(k, (str, int)) and not isinstance(k, bool) and _is_literal(v) for k, v in value.items()
        )
    if isinstance(value, (list, tuple)):
        return all(_is_literal(v) for v in value)
    return False
