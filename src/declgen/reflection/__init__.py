# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reflection import: building declaration models from existing declarations."""

from declgen.reflection.artifact import (
    METADATA_FORMAT_VERSION,
    deserialize_metadata,
    read_metadata,
    serialize_metadata,
    write_metadata,
)
from declgen.reflection.importer import import_declaration
from declgen.reflection.metadata import (
    DeclarationMetadata,
    MethodMetadata,
    ParameterMetadata,
    PropertyMetadata,
    UseMetadata,
)

__all__ = [
    "import_declaration",
    "DeclarationMetadata",
    "MethodMetadata",
    "ParameterMetadata",
    "PropertyMetadata",
    "UseMetadata",
    "METADATA_FORMAT_VERSION",
    "serialize_metadata",
    "deserialize_metadata",
    "write_metadata",
    "read_metadata",
]
