# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the declaration configuration loader."""

from pathlib import Path

import pytest

from declgen.config import (
    DeclarationConfigError,
    load_declaration_config,
    parse_declaration_config,
    parse_kind,
)
from declgen.model import DeclarationKind, Visibility

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a declaration config file and return its path."""
    config_file = tmp_path / "declaration.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_minimal_config(tmp_path: Path) -> None:
    """A config with only a name yields an empty standard declaration."""
    decl = load_declaration_config(_write_config(tmp_path, "name: Sample\n"))
    assert decl.get_kind() is DeclarationKind.STANDARD
    assert decl.get_name() == "Sample"
    assert decl.generate() == "class Sample\n{\n}\n"


def test_trait_config(tmp_path: Path) -> None:
    """A full trait config is read into members, uses and a doc block."""
    content = """\
kind: trait
name: App\\Model\\Timestamps
uses:
  - DateTimeImmutable
docblock:
  short_description: Adds timestamps.
properties:
  - createdAt
  - name: updatedAt
    visibility: protected
methods:
  - name: touch
    return_type: void
    body: $this->updatedAt = new DateTimeImmutable();
"""
    decl = load_declaration_config(_write_config(tmp_path, content))
    assert decl.get_kind() is DeclarationKind.RESTRICTED_MIXIN
    assert decl.get_namespace_name() == "App\\Model"
    assert decl.get_name() == "Timestamps"
    assert decl.has_use("DateTimeImmutable")
    updated_at = decl.get_property("updatedAt")
    assert updated_at is not None
    assert updated_at.get_visibility() is Visibility.PROTECTED
    assert decl.generate() == """\
namespace App\\Model;

use DateTimeImmutable;

/**
 * Adds timestamps.
 */
trait Timestamps
{
    public $createdAt = null;

    protected $updatedAt = null;

    public function touch(): void
    {
        $this->updatedAt = new DateTimeImmutable();
    }
}
"""


def test_trait_config_ignores_supertype(tmp_path: Path) -> None:
    """Supertype entries in a trait config are accepted but have no effect."""
    decl = load_declaration_config(_write_config(tmp_path, "kind: trait\nname: T\nextended_class: Base\n"))
    assert decl.get_extended_class() is None


def test_interface_config(tmp_path: Path) -> None:
    """An interface config emits its contracts after extends."""
    content = "kind: interface\nname: Repository\nimplemented_interfaces: [Countable]\nmethods: [find]\n"
    decl = load_declaration_config(_write_config(tmp_path, content))
    assert decl.generate() == "interface Repository extends Countable\n{\n    public function find();\n}\n"


def test_parse_from_string() -> None:
    """Declarations can be parsed from a YAML string."""
    decl = parse_declaration_config("name: Inline\nflags: [final]\n")
    assert decl.is_final()


@pytest.mark.parametrize(
    "value,expected",
    [
        ("class", DeclarationKind.STANDARD),
        ("Trait", DeclarationKind.RESTRICTED_MIXIN),
        ("interface", DeclarationKind.CONTRACT),
        ("restricted_mixin", DeclarationKind.RESTRICTED_MIXIN),
        ("CONTRACT", DeclarationKind.CONTRACT),
    ],
)
def test_parse_kind(value: str, expected: DeclarationKind) -> None:
    """Kind names and their aliases map to declaration kinds."""
    assert parse_kind(value) is expected


# ###############
# Error Cases
# ###############


def test_file_not_found(tmp_path: Path) -> None:
    """A missing file is reported as a config error."""
    with pytest.raises(DeclarationConfigError, match="not found"):
        load_declaration_config(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    """Malformed YAML is reported as a config error."""
    with pytest.raises(DeclarationConfigError, match="Invalid YAML"):
        load_declaration_config(_write_config(tmp_path, "name: [unclosed\n"))


def test_non_mapping(tmp_path: Path) -> None:
    """A top-level list is rejected."""
    with pytest.raises(DeclarationConfigError, match="must be a YAML mapping"):
        load_declaration_config(_write_config(tmp_path, "- a\n- b\n"))


def test_empty_file(tmp_path: Path) -> None:
    """An empty file is rejected."""
    with pytest.raises(DeclarationConfigError, match="must be a YAML mapping"):
        load_declaration_config(_write_config(tmp_path, ""))


def test_missing_name(tmp_path: Path) -> None:
    """A file without a name is rejected."""
    with pytest.raises(DeclarationConfigError, match="requires that a name is provided"):
        load_declaration_config(_write_config(tmp_path, "namespace: App\n"))


def test_unknown_kind(tmp_path: Path) -> None:
    """An unknown kind is rejected."""
    with pytest.raises(DeclarationConfigError, match="unknown declaration kind 'enum'"):
        load_declaration_config(_write_config(tmp_path, "kind: enum\nname: E\n"))


def test_non_string_kind(tmp_path: Path) -> None:
    """A kind that is not a string is rejected."""
    with pytest.raises(DeclarationConfigError, match="'kind' must be a string"):
        load_declaration_config(_write_config(tmp_path, "kind: 3\nname: E\n"))


def test_properties_must_be_a_list(tmp_path: Path) -> None:
    """Properties that are not a list are rejected."""
    with pytest.raises(DeclarationConfigError, match="must be a list"):
        load_declaration_config(_write_config(tmp_path, "name: P\nproperties: foo\n"))


def test_unknown_key(tmp_path: Path) -> None:
    """Unknown keys are rejected."""
    with pytest.raises(DeclarationConfigError, match="unknown declaration configuration key"):
        load_declaration_config(_write_config(tmp_path, "name: P\nconstants: []\n"))


def test_duplicate_member_is_reported_with_file(tmp_path: Path) -> None:
    """A duplicate member error names the file it came from."""
    config_file = _write_config(tmp_path, "name: P\nmethods: [run, RUN]\n")
    with pytest.raises(DeclarationConfigError, match=r"declaration\.yaml: A method by name RUN already exists"):
        load_declaration_config(config_file)


def test_parse_kind_unknown() -> None:
    """parse_kind lists the valid kinds when given an unknown one."""
    with pytest.raises(ValueError, match="expected one of: class, trait, interface"):
        parse_kind("struct")


@pytest.mark.parametrize(
    "content",
    [
        "name: P\nextended_class: 5\n",
        "name: P\nnamespace: 5\n",
        "name: P\nmethods:\n  - name: run\n    body: 42\n",
    ],
)
def test_non_string_values_are_reported(tmp_path: Path, content: str) -> None:
    """Values that must be strings are checked while the file is loaded."""
    with pytest.raises(DeclarationConfigError, match="must be a string"):
        load_declaration_config(_write_config(tmp_path, content))


def test_date_default_is_reported(tmp_path: Path) -> None:
    """A YAML date has no literal form and is reported with the file name."""
    config_file = _write_config(tmp_path, "name: P\nproperties:\n  - name: since\n    default: 2024-01-01\n")
    with pytest.raises(DeclarationConfigError, match=r"declaration\.yaml: property default value"):
        load_declaration_config(config_file)
