# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Member models of a declaration: properties, methods and their parameters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from declgen.model.docblock import DocBlockModel
from declgen.model.errors import DuplicateMemberError, InvalidArgumentError
from declgen.model.literals import check_literal
from declgen.model.options import iter_config, optional_string, require_name


class _NoDefault:
    def __repr__(self) -> str:
        return "<no default>"


# Marks a parameter without a default value.
_NO_DEFAULT: Any = _NoDefault()

# ###############
# Public Interface
# ###############


class Visibility(Enum):
    """Member visibility."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    @classmethod
    def parse(cls, value: Visibility | str) -> Visibility:
        """Accept a Visibility or its keyword, case-insensitively."""
        if isinstance(value, Visibility):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidArgumentError(f"invalid visibility {value!r}; expected public, protected or private")


class PropertyModel:
    """A property with a default value, visibility and static flag."""

    def __init__(
        self,
        name: str | None = None,
        default_value: Any = None,
        visibility: Visibility | str = Visibility.PUBLIC,
        is_static: bool = False,
    ) -> None:
        self._name = _check_name(name, "property") if name is not None else None
        self._default_value = check_literal(default_value, "property")
        self._visibility = Visibility.parse(visibility)
        self._is_static = is_static

    def __repr__(self) -> str:
        return f"PropertyModel(name={self._name!r})"

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> PropertyModel:
        """Build a property from a mapping with ``name``, ``default_value``,
        ``visibility`` and ``static`` keys."""
        prop = cls(require_name(config, "property"))
        for key, value in iter_config(config, _PROPERTY_KEYS, "property"):
            if key in ("default", "defaultvalue"):
                prop.set_default_value(value)
            elif key == "visibility":
                prop.set_visibility(value)
            elif key == "static":
                prop.set_static(bool(value))
        return prop

    def set_name(self, name: str) -> PropertyModel:
        self._name = _check_name(name, "property")
        return self

    def get_name(self) -> str | None:
        return self._name

    def set_default_value(self, value: Any) -> PropertyModel:
        self._default_value = check_literal(value, "property")
        return self

    def get_default_value(self) -> Any:
        return self._default_value

    def set_visibility(self, visibility: Visibility | str) -> PropertyModel:
        self._visibility = Visibility.parse(visibility)
        return self

    def get_visibility(self) -> Visibility:
        return self._visibility

    def set_static(self, is_static: bool) -> PropertyModel:
        self._is_static = is_static
        return self

    def is_static(self) -> bool:
        return self._is_static


class ParameterModel:
    """A method parameter.

    A parameter without a default value is distinct from one whose default is
    ``None``; use :meth:`has_default_value` to tell them apart.
    """

    def __init__(
        self,
        name: str | None = None,
        type: str | None = None,
        default_value: Any = _NO_DEFAULT,
        passed_by_reference: bool = False,
        position: int | None = None,
    ) -> None:
        self._name = _check_name(name, "parameter") if name is not None else None
        self._type = optional_string(type, "parameter type")
        if default_value is not _NO_DEFAULT:
            check_literal(default_value, "parameter")
        self._default_value = default_value
        self._passed_by_reference = passed_by_reference
        self._position = position

    def __repr__(self) -> str:
        return f"ParameterModel(name={self._name!r}, position={self._position!r})"

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | str) -> ParameterModel:
        if isinstance(config, str):
            return cls(config)
        param = cls(require_name(config, "parameter"))
        for key, value in iter_config(config, _PARAMETER_KEYS, "parameter"):
            if key == "type":
                param.set_type(value)
            elif key in ("default", "defaultvalue"):
                param.set_default_value(value)
            elif key in ("byreference", "passedbyreference"):
                param.set_passed_by_reference(bool(value))
            elif key == "position":
                param.set_position(value)
        return param

    def set_name(self, name: str) -> ParameterModel:
        self._name = _check_name(name, "parameter")
        return self

    def get_name(self) -> str | None:
        return self._name

    def set_type(self, type: str | None) -> ParameterModel:
        self._type = optional_string(type, "parameter type")
        return self

    def get_type(self) -> str | None:
        return self._type

    def set_default_value(self, value: Any) -> ParameterModel:
        self._default_value = check_literal(value, "parameter")
        return self

    def remove_default_value(self) -> ParameterModel:
        self._default_value = _NO_DEFAULT
        return self

    def has_default_value(self) -> bool:
        return self._default_value is not _NO_DEFAULT

    def get_default_value(self) -> Any:
        """Return the default value, or ``None`` when there is none."""
        if self._default_value is _NO_DEFAULT:
            return None
        return self._default_value

    def set_passed_by_reference(self, by_reference: bool) -> ParameterModel:
        self._passed_by_reference = by_reference
        return self

    def is_passed_by_reference(self) -> bool:
        return self._passed_by_reference

    def set_position(self, position: int | None) -> ParameterModel:
        if position is not None and (isinstance(position, bool) or not isinstance(position, int)):
            raise InvalidArgumentError(f"parameter position must be an integer, got {position!r}")
        self._position = position
        return self

    def get_position(self) -> int | None:
        return self._position


class MethodModel:
    """A method with its signature, doc block and opaque body text.

    The abstract and final flags are stored as set. Whether they take effect
    depends on the declaration the method is emitted with; see
    :meth:`DeclarationModel.is_method_abstract`.
    """

    def __init__(
        self,
        name: str | None = None,
        parameters: Iterable[ParameterModel | str] = (),
        visibility: Visibility | str = Visibility.PUBLIC,
        is_static: bool = False,
        is_abstract: bool = False,
        is_final: bool = False,
        body: str | None = None,
        doc_block: DocBlockModel | None = None,
        return_type: str | None = None,
    ) -> None:
        self._name = _check_name(name, "method") if name is not None else None
        self._parameters: dict[str, ParameterModel] = {}
        self._visibility = Visibility.parse(visibility)
        self._is_static = is_static
        self._is_abstract = is_abstract
        self._is_final = is_final
        self._body = optional_string(body, "method body")
        self._doc_block: DocBlockModel | None = None
        self.set_doc_block(doc_block)
        self._return_type = optional_string(return_type, "method return type")
        self.set_parameters(parameters)

    def __repr__(self) -> str:
        return f"MethodModel(name={self._name!r})"

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> MethodModel:
        """Build a method from a mapping.

        Accepted keys: ``name`` (required), ``parameters``, ``body``,
        ``docblock``, ``visibility``, ``static``, ``abstract``, ``final`` and
        ``return_type``.
        """
        method = cls(require_name(config, "method"))
        for key, value in iter_config(config, _METHOD_KEYS, "method"):
            if key == "parameters":
                if not isinstance(value, (list, tuple)):
                    raise InvalidArgumentError(f"method parameters must be a list, got {value!r}")
                method.set_parameters(
                    p if isinstance(p, ParameterModel) else ParameterModel.from_config(p) for p in value
                )
            elif key == "body":
                method.set_body(value)
            elif key == "docblock":
                method.set_doc_block(value if isinstance(value, DocBlockModel) else DocBlockModel.from_config(value))
            elif key == "visibility":
                method.set_visibility(value)
            elif key == "static":
                method.set_static(bool(value))
            elif key == "abstract":
                method.set_abstract(bool(value))
            elif key == "final":
                method.set_final(bool(value))
            elif key == "returntype":
                method.set_return_type(value)
        return method

    def set_name(self, name: str) -> MethodModel:
        self._name = _check_name(name, "method")
        return self

    def get_name(self) -> str | None:
        return self._name

    def set_parameters(self, parameters: Iterable[ParameterModel | str]) -> MethodModel:
        """Replace all parameters."""
        self._parameters = {}
        for param in parameters:
            self.set_parameter(param)
        return self

    def set_parameter(self, parameter: ParameterModel | str) -> MethodModel:
        """Add a parameter, given as a model or a bare name.

        A parameter without a position is placed after the existing ones.

        Raises:
            DuplicateMemberError: If a parameter with the same name exists.
        """
        if isinstance(parameter, str):
            parameter = ParameterModel(parameter)
        if not isinstance(parameter, ParameterModel):
            raise InvalidArgumentError(f"{type(self).__name__}.set_parameter expects a string or ParameterModel")
        name = parameter.get_name()
        if name is None:
            raise InvalidArgumentError("parameter requires a name")
        if name in self._parameters:
            raise DuplicateMemberError(f"A parameter by name {name} already exists in method {self._name}", name)
        if parameter.get_position() is None:
            positions = [p.get_position() or 0 for p in self._parameters.values()]
            parameter.set_position(max(positions) + 1 if positions else 0)
        self._parameters[name] = parameter
        return self

    def get_parameters(self) -> list[ParameterModel]:
        """Return the parameters ordered by position (ties keep insertion order)."""
        return sorted(self._parameters.values(), key=lambda p: p.get_position() or 0)

    def get_parameter(self, name: str) -> ParameterModel | None:
        return self._parameters.get(name)

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def set_visibility(self, visibility: Visibility | str) -> MethodModel:
        self._visibility = Visibility.parse(visibility)
        return self

    def get_visibility(self) -> Visibility:
        return self._visibility

    def set_static(self, is_static: bool) -> MethodModel:
        self._is_static = is_static
        return self

    def is_static(self) -> bool:
        return self._is_static

    def set_abstract(self, is_abstract: bool) -> MethodModel:
        self._is_abstract = is_abstract
        return self

    def is_abstract(self) -> bool:
        return self._is_abstract

    def set_final(self, is_final: bool) -> MethodModel:
        self._is_final = is_final
        return self

    def is_final(self) -> bool:
        return self._is_final

    def set_body(self, body: str | None) -> MethodModel:
        self._body = optional_string(body, "method body")
        return self

    def get_body(self) -> str | None:
        return self._body

    def set_doc_block(self, doc_block: DocBlockModel | None) -> MethodModel:
        if doc_block is not None and not isinstance(doc_block, DocBlockModel):
            raise InvalidArgumentError(f"{type(self).__name__}.set_doc_block expects a DocBlockModel")
        self._doc_block = doc_block
        return self

    def get_doc_block(self) -> DocBlockModel | None:
        return self._doc_block

    def set_return_type(self, return_type: str | None) -> MethodModel:
        self._return_type = optional_string(return_type, "method return type")
        return self

    def get_return_type(self) -> str | None:
        return self._return_type



# ################
# Implementation
# ################

_PROPERTY_KEYS = {"name", "default", "defaultvalue", "visibility", "static"}
_PARAMETER_KEYS = {"name", "type", "default", "defaultvalue", "byreference", "passedbyreference", "position"}
_METHOD_KEYS = {"name", "parameters", "body", "docblock", "visibility", "static", "abstract", "final", "returntype"}


def _check_name(name: object, context: str) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError(f"{context} name must be a non-empty string, got {name!r}")
    return name
