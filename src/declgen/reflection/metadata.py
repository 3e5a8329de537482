# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Metadata records describing an existing, already compiled declaration.

These records are the contract between the importer and whatever inspects
the existing code (runtime reflection, a parsed syntax tree, a stored
artifact). The importer only reads them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import Field as _Field

from declgen.model.members import Visibility
from declgen.model.names import join_name

# ###############
# Public Interface
# ###############


class UseMetadata(BaseModel):
    """A ``use`` import found in the declaring file."""

    name: str
    alias: str | None = None


class ParameterMetadata(BaseModel):
    """A method parameter.

    ``default_expression`` holds source text for defaults that are not plain
    literals (e.g. ``self::LIMIT``) and takes precedence over ``default``.
    """

    name: str
    position: int
    type: str | None = None
    has_default: bool = False
    default: Any = None
    default_expression: str | None = None
    by_reference: bool = False


class PropertyMetadata(BaseModel):
    """A property. ``declaring_class`` is the qualified name of the declaration
    that defines it; ``None`` means the inspected declaration itself."""

    name: str
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    default: Any = None
    default_expression: str | None = None
    declaring_class: str | None = None


class MethodMetadata(BaseModel):
    """A method with its signature, body text and doc comment."""

    name: str
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    is_abstract: bool = False
    is_final: bool = False
    parameters: list[ParameterMetadata] = _Field(default_factory=list)
    return_type: str | None = None
    body: str = ""
    doc_comment: str | None = None
    declaring_class: str | None = None


class DeclarationMetadata(BaseModel):
    """Everything known about an existing declaration.

    Attributes:
        name: Short name of the declaration.
        namespace: Namespace, or ``None`` for the global namespace.
        parent_name: Qualified name of the supertype, if any.
        interface_names: All contracts the declaration implements, inherited ones included.
        parent_interface_names: Contracts implemented by the supertype.
        source: Original source text of the declaration, if available.
    """

    name: str
    namespace: str | None = None
    parent_name: str | None = None
    interface_names: list[str] = _Field(default_factory=list)
    parent_interface_names: list[str] = _Field(default_factory=list)
    is_abstract: bool = False
    is_final: bool = False
    doc_comment: str | None = None
    uses: list[UseMetadata] = _Field(default_factory=list)
    properties: list[PropertyMetadata] = _Field(default_factory=list)
    methods: list[MethodMetadata] = _Field(default_factory=list)
    source: str | None = None

    @property
    def qualified_name(self) -> str:
        return join_name(self.namespace, self.name)
