# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML loader for declaration configuration files.

A declaration file is a YAML mapping read by
:meth:`~declgen.model.declaration.DeclarationModel.from_config`, plus an
optional top-level ``kind`` (``class``, ``trait`` or ``interface``)::

    kind: trait
    name: App\\Model\\Timestamps
    properties:
      - createdAt
      - name: updatedAt
        visibility: protected
    methods:
      - name: touch
        body: $this->updatedAt = time();
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from declgen.model.declaration import DeclarationModel
from declgen.model.errors import GeneratorError
from declgen.model.kinds import DeclarationKind

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DeclarationConfigError(Exception):
    """Raised when a declaration configuration file is invalid or cannot be loaded."""


def load_declaration_config(path: Path) -> DeclarationModel:
    """Load a declaration configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        The declaration described by the file.

    Raises:
        DeclarationConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DeclarationConfigError(f"Declaration config file not found: {path}") from None
    except OSError as exc:
        raise DeclarationConfigError(f"Cannot read declaration config file: {exc}") from exc

    logger.debug("Loading declaration config from %s", path)
    return parse_declaration_config(text, source_label=str(path))


def parse_declaration_config(text: str, source_label: str = "<string>") -> DeclarationModel:
    """Parse declaration config YAML text into a DeclarationModel.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        DeclarationConfigError: If the YAML is invalid or does not describe a declaration.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DeclarationConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise DeclarationConfigError(f"{source_label}: declaration config must be a YAML mapping")

    kind = _parse_kind(data.pop("kind", DeclarationKind.STANDARD.keyword), source_label)
    try:
        return DeclarationModel.from_config(data, kind=kind)
    except GeneratorError as exc:
        raise DeclarationConfigError(f"{source_label}: {exc}") from exc


def parse_kind(value: str) -> DeclarationKind:
    """Map a kind keyword (``class``, ``trait``, ``interface``) or enum name to a DeclarationKind.

    Raises:
        ValueError: If the value names no kind.
    """
    for kind in DeclarationKind:
        if value.lower() in (kind.keyword, kind.name.lower()):
            return kind
    choices = ", ".join(kind.keyword for kind in DeclarationKind)
    raise ValueError(f"unknown declaration kind '{value}' (expected one of: {choices})")


# ################
# Implementation
# ################


def _parse_kind(value: object, source_label: str) -> DeclarationKind:
    if not isinstance(value, str):
        raise DeclarationConfigError(f"{source_label}: 'kind' must be a string")
    try:
        return parse_kind(value)
    except ValueError as exc:
        raise DeclarationConfigError(f"{source_label}: {exc}") from exc
