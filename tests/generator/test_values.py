# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for literal rendering of default values."""

import pytest

from declgen.generator import Expression, render_literal
from declgen.model import InvalidArgumentError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-42, "-42"),
        (1.5, "1.5"),
        ("plain", "'plain'"),
        ("it's", "'it\\'s'"),
        ("C:\\path", "'C:\\\\path'"),
        ([], "[]"),
        ([1, "two", None], "[1, 'two', null]"),
        ((True,), "[true]"),
        ({"a": 1, "b": [2]}, "['a' => 1, 'b' => [2]]"),
        ({0: "x"}, "[0 => 'x']"),
        (Expression("self::LIMIT"), "self::LIMIT"),
    ],
)
def test_render_literal(value: object, expected: str) -> None:
    """Literals render in their source form."""
    assert render_literal(value) == expected


def test_render_literal_rejects_unsupported_values() -> None:
    """Values without a literal form raise a generator error."""
    with pytest.raises(InvalidArgumentError, match="Cannot render object value"):
        render_literal(object())
