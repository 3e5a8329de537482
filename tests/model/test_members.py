# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for property, parameter and method models."""

from datetime import date

import pytest

from declgen.model import (
    DocBlockModel,
    DuplicateMemberError,
    Expression,
    InvalidArgumentError,
    MethodModel,
    ParameterModel,
    PropertyModel,
    Visibility,
)

# ###############
# Visibility
# ###############


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("public", Visibility.PUBLIC),
        ("PROTECTED", Visibility.PROTECTED),
        (Visibility.PRIVATE, Visibility.PRIVATE),
    ],
)
def test_visibility_parse(value: object, expected: Visibility) -> None:
    """Visibility parses from names in any case and from members."""
    assert Visibility.parse(value) is expected  # type: ignore[arg-type]


@pytest.mark.parametrize("value", ["internal", "", 3])
def test_visibility_parse_rejects_unknown(value: object) -> None:
    """Unknown visibility values are rejected."""
    with pytest.raises(InvalidArgumentError, match="invalid visibility"):
        Visibility.parse(value)  # type: ignore[arg-type]


# ###############
# PropertyModel
# ###############


def test_property_defaults() -> None:
    """A new property is public, non-static and has no default."""
    prop = PropertyModel("foo")
    assert prop.get_name() == "foo"
    assert prop.get_default_value() is None
    assert prop.get_visibility() is Visibility.PUBLIC
    assert prop.is_static() is False


def test_property_from_config() -> None:
    """Property configuration sets default, visibility and static."""
    prop = PropertyModel.from_config({"name": "items", "default_value": [], "visibility": "private", "static": True})
    assert prop.get_name() == "items"
    assert prop.get_default_value() == []
    assert prop.get_visibility() is Visibility.PRIVATE
    assert prop.is_static()


def test_property_from_config_requires_name() -> None:
    """Property configuration without a name is rejected."""
    with pytest.raises(InvalidArgumentError, match="requires that a name is provided"):
        PropertyModel.from_config({"visibility": "public"})


def test_property_from_config_rejects_unknown_key() -> None:
    """Unknown property keys are rejected."""
    with pytest.raises(InvalidArgumentError, match="unknown property configuration key 'readonly'"):
        PropertyModel.from_config({"name": "x", "readonly": True})


# ###############
# ParameterModel
# ###############


def test_parameter_without_default() -> None:
    """A new parameter has no default."""
    param = ParameterModel("id")
    assert param.has_default_value() is False
    assert param.get_default_value() is None


def test_parameter_with_null_default_differs_from_no_default() -> None:
    """A null default is a default, and removing it leaves none."""
    param = ParameterModel("id", default_value=None)
    assert param.has_default_value() is True
    param.remove_default_value()
    assert param.has_default_value() is False


def test_parameter_from_config() -> None:
    """Parameter configuration sets type, default, reference and position."""
    param = ParameterModel.from_config(
        {"name": "items", "type": "array", "defaultValue": [], "passedByReference": True, "position": 2}
    )
    assert param.get_type() == "array"
    assert param.get_default_value() == []
    assert param.is_passed_by_reference()
    assert param.get_position() == 2


@pytest.mark.parametrize(
    "value",
    [None, True, 3, 2.5, "text", [1, "two"], {"key": [None]}, Expression("self::MAX")],
)
def test_literal_defaults_are_accepted(value: object) -> None:
    """Values with a literal form can be property and parameter defaults."""
    assert PropertyModel("p", value).get_default_value() == value
    assert ParameterModel("p", default_value=value).get_default_value() == value


@pytest.mark.parametrize(
    "value",
    [date(2024, 1, 1), object(), {1, 2}, [1, date(2024, 1, 1)], {"when": date(2024, 1, 1)}, {(1, 2): "x"}],
)
def test_defaults_without_literal_form_are_rejected(value: object) -> None:
    """Defaults that cannot be rendered are refused when they are set."""
    with pytest.raises(InvalidArgumentError, match="has no literal form"):
        PropertyModel("p", value)
    with pytest.raises(InvalidArgumentError, match="has no literal form"):
        PropertyModel("p").set_default_value(value)
    with pytest.raises(InvalidArgumentError, match="has no literal form"):
        ParameterModel("p", default_value=value)
    with pytest.raises(InvalidArgumentError, match="has no literal form"):
        ParameterModel("p").set_default_value(value)


def test_property_from_config_rejects_date_default() -> None:
    """A YAML date default is reported while the configuration is read."""
    with pytest.raises(InvalidArgumentError, match="property default value"):
        PropertyModel.from_config({"name": "createdAt", "default": date(2024, 1, 1)})


def test_parameter_type_must_be_a_string() -> None:
    """Parameter types are strings."""
    with pytest.raises(InvalidArgumentError, match="parameter type must be a string"):
        ParameterModel("p", type=3)  # type: ignore[arg-type]


def test_parameter_position_must_be_an_integer() -> None:
    """Parameter positions are integers."""
    with pytest.raises(InvalidArgumentError):
        ParameterModel("x").set_position("first")  # type: ignore[arg-type]


# ###############
# MethodModel
# ###############


def test_method_parameters_get_positions_in_insertion_order() -> None:
    """Parameters without a position are numbered as added."""
    method = MethodModel("call", parameters=["a", ParameterModel("b"), "c"])
    assert [p.get_name() for p in method.get_parameters()] == ["a", "b", "c"]
    assert [p.get_position() for p in method.get_parameters()] == [0, 1, 2]


def test_method_parameters_are_ordered_by_position() -> None:
    """Parameters are returned by position."""
    method = MethodModel("call")
    method.set_parameter(ParameterModel("second", position=1))
    method.set_parameter(ParameterModel("first", position=0))
    assert [p.get_name() for p in method.get_parameters()] == ["first", "second"]


def test_method_duplicate_parameter_raises() -> None:
    """A duplicate parameter raises and the first one stays."""
    method = MethodModel("call", parameters=["a"])
    with pytest.raises(DuplicateMemberError):
        method.set_parameter("a")
    assert len(method.get_parameters()) == 1


def test_method_parameter_lookup() -> None:
    """Parameters are found by name."""
    method = MethodModel("call", parameters=["a"])
    assert method.has_parameter("a")
    parameter = method.get_parameter("a")
    assert parameter is not None
    assert parameter.get_name() == "a"
    assert method.get_parameter("b") is None


def test_method_from_config() -> None:
    """Method configuration builds parameters, body and modifiers."""
    method = MethodModel.from_config(
        {
            "name": "save",
            "parameters": ["entity", {"name": "flush", "type": "bool", "default": True}],
            "body": "$this->em->persist($entity);",
            "docblock": "Persist an entity.",
            "visibility": "protected",
            "static": False,
            "final": True,
            "return_type": "void",
        }
    )
    assert method.get_name() == "save"
    assert [p.get_name() for p in method.get_parameters()] == ["entity", "flush"]
    assert method.get_body() == "$this->em->persist($entity);"
    doc_block = method.get_doc_block()
    assert isinstance(doc_block, DocBlockModel)
    assert doc_block.get_short_description() == "Persist an entity."
    assert method.get_visibility() is Visibility.PROTECTED
    assert method.is_final()
    assert method.get_return_type() == "void"


def test_method_from_config_parameters_must_be_a_list() -> None:
    """Parameters in method configuration must be a list."""
    with pytest.raises(InvalidArgumentError, match="must be a list"):
        MethodModel.from_config({"name": "save", "parameters": "entity"})


def test_method_keeps_modifiers_as_set() -> None:
    """A method reports its own abstract and final flags, independent of any declaration."""
    method = MethodModel("run", is_abstract=True, is_final=True)
    assert method.is_abstract() is True
    assert method.is_final() is True
    method.set_abstract(False)
    assert method.is_abstract() is False


@pytest.mark.parametrize(
    "setter,value",
    [
        ("set_body", 5),
        ("set_return_type", ["void"]),
        ("set_doc_block", "not a doc block"),
    ],
)
def test_method_rejects_non_string_values(setter: str, value: object) -> None:
    """Body, return type and doc block setters reject values of the wrong type."""
    with pytest.raises(InvalidArgumentError):
        getattr(MethodModel("run"), setter)(value)


def test_method_from_config_rejects_non_string_body() -> None:
    """A numeric body in configuration is reported instead of failing at emission."""
    with pytest.raises(InvalidArgumentError, match="method body must be a string"):
        MethodModel.from_config({"name": "run", "body": 42})


@pytest.mark.parametrize("bad_name", ["", 7])
def test_method_rejects_invalid_name(bad_name: object) -> None:
    """Empty and non-string method names are rejected."""
    with pytest.raises(InvalidArgumentError):
        MethodModel(bad_name)  # type: ignore[arg-type]
