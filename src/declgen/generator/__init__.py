# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Source text emission for declaration models."""

from declgen.generator.emitter import emit, render_header, render_method, render_parameter, render_property
from declgen.generator.values import render_literal
from declgen.model.literals import Expression

__all__ = [
    "emit",
    "render_header",
    "render_property",
    "render_method",
    "render_parameter",
    "Expression",
    "render_literal",
]
