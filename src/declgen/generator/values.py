# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of Python values as source literals."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from declgen.model.errors import InvalidArgumentError
from declgen.model.literals import Expression

# ###############
# Public Interface
# ###############


def render_literal(value: Any) -> str:
    """Render *value* as a single-line literal.

    Raises:
        InvalidArgumentError: If the value has no literal form.
    """
    if isinstance(value, Expression):
        return value.source
    if value is None:
        return "null"
    # bool must be checked before int.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, Mapping):
        items = ", ".join(f"{render_literal(k)} => {render_literal(v)}" for k, v in value.items())
        return f"[{items}]"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(render_literal(v) for v in value) + "]"
    raise InvalidArgumentError(f"Cannot render {type(value).__name__} value as a literal: {value!r}")


# ################
# Implementation
# ################


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
