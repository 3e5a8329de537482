# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by the declaration model."""

# ###############
# Public Interface
# ###############


class GeneratorError(Exception):
    """Base class for all errors raised by the declaration model."""


class InvalidArgumentError(GeneratorError):
    """Raised when a call receives malformed input.

    Covers wrong value types where a name or member model was expected,
    unknown visibility or flag names, and configuration mappings that lack
    the required ``name`` key.
    """


class DuplicateMemberError(GeneratorError):
    """Raised when adding a member whose name is already taken.

    Property names collide on exact match, method names collide
    case-insensitively.
    """

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name = name
