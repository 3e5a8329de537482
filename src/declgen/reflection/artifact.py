# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of declaration metadata artifacts.

Metadata is stored as JSON so that an inspector written in any language can
hand declarations over to the importer. The format is versioned so future
schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path

from declgen.reflection.metadata import DeclarationMetadata

# ###############
# Public Interface
# ###############

METADATA_FORMAT_VERSION = "1"


def serialize_metadata(metadata: DeclarationMetadata) -> str:
    """Serialize declaration metadata to a JSON string."""
    return json.dumps(
        {"v": METADATA_FORMAT_VERSION, "declaration": metadata.model_dump(mode="json", exclude_defaults=True)},
        separators=(",", ":"),
    )


def deserialize_metadata(data: str) -> DeclarationMetadata:
    """Deserialize declaration metadata from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize_metadata`.

    Returns:
        The reconstructed :class:`DeclarationMetadata`.

    Raises:
        ValueError: If the JSON is malformed, the format version is not
            recognised, or the declaration does not match the schema.
    """
    obj = json.loads(data)
    if not isinstance(obj, dict):
        raise ValueError("Metadata artifact must be a JSON object")
    version = obj.get("v")
    if version != METADATA_FORMAT_VERSION:
        raise ValueError(f"Unsupported metadata format version: {version!r}")
    return DeclarationMetadata.model_validate(obj.get("declaration"))


def write_metadata(metadata: DeclarationMetadata, path: Path) -> None:
    """Write a metadata artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize_metadata(metadata), encoding="utf-8")


def read_metadata(path: Path) -> DeclarationMetadata:
    """Read and deserialize a metadata artifact from *path*."""
    return deserialize_metadata(path.read_text(encoding="utf-8"))
