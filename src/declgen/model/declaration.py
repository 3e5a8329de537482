# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""The declaration model: a class-like declaration and its members.

A single model type serves every :class:`DeclarationKind`. Operations that a
kind does not support (a trait extending a class, an interface being final,
...) are accepted and discarded, so generic tooling can drive any declaration
through the same calls. The corresponding getters keep reporting the empty
value.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from declgen.model.docblock import DocBlockModel
from declgen.model.errors import DuplicateMemberError, InvalidArgumentError
from declgen.model.kinds import DeclarationFlag, DeclarationKind
from declgen.model.members import MethodModel, PropertyModel, Visibility
from declgen.model.names import UseStatement, split_name
from declgen.model.options import iter_config, optional_string, require_name

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DeclarationModel:
    """A declaration ready to be emitted as source text.

    Args:
        name: Short or namespace-qualified name of the declaration.
        kind: The declaration kind; fixed for the lifetime of the model.
    """

    def __init__(self, name: str | None = None, kind: DeclarationKind = DeclarationKind.STANDARD) -> None:
        self._kind = kind
        self._name: str | None = None
        self._namespace: str | None = None
        self._doc_block: DocBlockModel | None = None
        self._uses: list[UseStatement] = []
        self._properties: dict[str, PropertyModel] = {}
        # Keyed by lower-cased name; the model keeps the display name.
        self._methods: dict[str, MethodModel] = {}
        self._extended_class: str | None = None
        self._implemented_interfaces: list[str] = []
        self._flags = DeclarationFlag(0)
        self._source_content: str | None = None
        self._source_dirty = True
        if name is not None:
            self.set_name(name)

    def __repr__(self) -> str:
        return f"DeclarationModel(name={self._name!r}, kind={self._kind.name})"

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any],
        kind: DeclarationKind = DeclarationKind.STANDARD,
    ) -> DeclarationModel:
        """Build a declaration from a plain configuration mapping.

        Accepted keys are ``name`` (required), ``namespace``, ``docblock``,
        ``properties``, ``methods``, ``extended_class``,
        ``implemented_interfaces``, ``uses`` and ``flags``. Keys compare
        ignoring case and the separators ``_``, ``-`` and ``.``.

        Raises:
            InvalidArgumentError: If ``name`` is missing or a key or value is invalid.
            DuplicateMemberError: If the configuration lists a member twice.
        """
        decl = cls(require_name(config, "declaration"), kind=kind)
        for key, value in iter_config(config, _DECLARATION_KEYS, "declaration"):
            if key in _LIST_KEYS and not isinstance(value, (list, tuple)):
                raise InvalidArgumentError(f"declaration '{key}' must be a list, got {value!r}")
            if key in ("namespace", "namespacename"):
                decl.set_namespace_name(value)
            elif key == "docblock":
                decl.set_doc_block(value if isinstance(value, DocBlockModel) else DocBlockModel.from_config(value))
            elif key == "properties":
                decl.add_properties(value)
            elif key == "methods":
                decl.add_methods(value)
            elif key == "extendedclass":
                decl.set_extended_class(value)
            elif key == "implementedinterfaces":
                decl.set_implemented_interfaces(value)
            elif key == "uses":
                for use in value:
                    decl.add_use(*_parse_use(use))
            elif key == "flags":
                decl.set_flags(_parse_flags(value))
        return decl

    # -------- identity --------

    def get_kind(self) -> DeclarationKind:
        return self._kind

    def set_name(self, name: str) -> DeclarationModel:
        """Set the name; a qualified name also sets the namespace."""
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(f"declaration name must be a non-empty string, got {name!r}")
        namespace, short_name = split_name(name)
        if namespace is not None:
            self._namespace = namespace
        self._name = short_name
        return self

    def get_name(self) -> str | None:
        return self._name

    def set_namespace_name(self, namespace: str | None) -> DeclarationModel:
        self._namespace = optional_string(namespace, "namespace name") or None
        return self

    def get_namespace_name(self) -> str | None:
        return self._namespace

    def set_doc_block(self, doc_block: DocBlockModel | None) -> DeclarationModel:
        if doc_block is not None and not isinstance(doc_block, DocBlockModel):
            raise InvalidArgumentError(f"{type(self).__name__}.set_doc_block expects a DocBlockModel")
        self._doc_block = doc_block
        return self

    def get_doc_block(self) -> DocBlockModel | None:
        return self._doc_block

    # -------- uses --------

    def add_use(self, qualified_name: str, alias: str | None = None) -> DeclarationModel:
        """Import *qualified_name*, optionally under *alias*. Re-adding a pair is a no-op."""
        if not isinstance(qualified_name, str) or not qualified_name:
            raise InvalidArgumentError(f"use requires a non-empty qualified name, got {qualified_name!r}")
        use = UseStatement(qualified_name.lstrip("\\"), optional_string(alias, "use alias") or None)
        if use not in self._uses:
            self._uses.append(use)
        return self

    def get_uses(self) -> list[UseStatement]:
        return list(self._uses)

    def has_use(self, qualified_name: str) -> bool:
        qualified_name = qualified_name.lstrip("\\")
        return any(use.qualified_name == qualified_name for use in self._uses)

    def remove_use(self, qualified_name: str) -> DeclarationModel:
        """Remove every import of *qualified_name*, whatever its alias."""
        qualified_name = qualified_name.lstrip("\\")
        self._uses = [use for use in self._uses if use.qualified_name != qualified_name]
        return self

    # -------- properties --------

    def add_property(
        self,
        prop: PropertyModel | str,
        default_value: Any = None,
        visibility: Visibility | str = Visibility.PUBLIC,
        is_static: bool = False,
    ) -> DeclarationModel:
        """Add a property, given as a model or a bare name.

        The remaining arguments only apply when a bare name is given.

        Raises:
            InvalidArgumentError: If *prop* is neither a string nor a PropertyModel.
            DuplicateMemberError: If a property with exactly this name exists.
        """
        if isinstance(prop, str):
            prop = PropertyModel(prop, default_value, visibility, is_static)
        elif not isinstance(prop, PropertyModel):
            raise InvalidArgumentError(f"{type(self).__name__}.add_property expects string for name or a PropertyModel")
        name = prop.get_name()
        if name is None:
            raise InvalidArgumentError("property requires a name")
        if not self._kind.capabilities.properties:
            logger.debug("Discarding property '%s' on %s declaration '%s'", name, self._kind.keyword, self._name)
            return self
        if name in self._properties:
            raise DuplicateMemberError(f"A property by name {name} already exists in {self._describe()}", name)
        self._properties[name] = prop
        return self

    def add_properties(self, properties: Iterable[PropertyModel | str | Mapping[str, Any]]) -> DeclarationModel:
        """Add several properties; mappings are read with :meth:`PropertyModel.from_config`."""
        for prop in properties:
            if isinstance(prop, Mapping):
                prop = PropertyModel.from_config(prop)
            self.add_property(prop)
        return self

    def get_property(self, name: str) -> PropertyModel | None:
        return self._properties.get(name)

    def get_properties(self) -> list[PropertyModel]:
        return list(self._properties.values())

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def remove_property(self, name: str) -> DeclarationModel:
        self._properties.pop(name, None)
        return self

    # -------- methods --------

    def add_method(
        self,
        method: MethodModel | str,
        parameters: Iterable[Any] = (),
        visibility: Visibility | str = Visibility.PUBLIC,
        is_static: bool = False,
        body: str | None = None,
        doc_block: DocBlockModel | None = None,
    ) -> DeclarationModel:
        """Add a method, given as a model or a bare name.

        The remaining arguments only apply when a bare name is given.

        Raises:
            InvalidArgumentError: If *method* is neither a string nor a MethodModel.
            DuplicateMemberError: If a method with this name exists, compared case-insensitively.
        """
        if isinstance(method, str):
            method = MethodModel(method, parameters, visibility, is_static, body=body, doc_block=doc_block)
        elif not isinstance(method, MethodModel):
            raise InvalidArgumentError(f"{type(self).__name__}.add_method expects string for name or a MethodModel")
        name = method.get_name()
        if name is None:
            raise InvalidArgumentError("method requires a name")
        key = name.lower()
        if key in self._methods:
            raise DuplicateMemberError(f"A method by name {name} already exists in {self._describe()}", name)
        self._methods[key] = method
        return self

    def add_methods(self, methods: Iterable[MethodModel | str | Mapping[str, Any]]) -> DeclarationModel:
        """Add several methods; mappings are read with :meth:`MethodModel.from_config`."""
        for method in methods:
            if isinstance(method, Mapping):
                method = MethodModel.from_config(method)
            self.add_method(method)
        return self

    def get_method(self, name: str) -> MethodModel | None:
        return self._methods.get(name.lower())

    def get_methods(self) -> list[MethodModel]:
        return list(self._methods.values())

    def has_method(self, name: str) -> bool:
        return name.lower() in self._methods

    def remove_method(self, name: str) -> DeclarationModel:
        self._methods.pop(name.lower(), None)
        return self

    def is_method_abstract(self, name: str) -> bool:
        """Whether the named method is emitted as abstract.

        Always ``False`` on kinds without modifiers, whatever the method holds.
        """
        method = self.get_method(name)
        return method is not None and method.is_abstract() and self._kind.capabilities.modifiers

    def is_method_final(self, name: str) -> bool:
        method = self.get_method(name)
        return method is not None and method.is_final() and self._kind.capabilities.modifiers

    # -------- supertype and contracts --------

    def set_extended_class(self, name: str | None) -> DeclarationModel:
        optional_string(name, "extended class")
        if not self._kind.capabilities.supertype:
            self._discard("extended class", name)
            return self
        self._extended_class = name or None
        return self

    def get_extended_class(self) -> str | None:
        if not self._kind.capabilities.supertype:
            return None
        return self._extended_class

    def set_implemented_interfaces(self, names: Iterable[str]) -> DeclarationModel:
        if not self._kind.capabilities.contracts:
            self._discard("implemented interfaces", names)
            return self
        self._implemented_interfaces = []
        for name in names:
            self.add_implemented_interface(name)
        return self

    def add_implemented_interface(self, name: str) -> DeclarationModel:
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(f"interface name must be a non-empty string, got {name!r}")
        if not self._kind.capabilities.contracts:
            self._discard("implemented interface", name)
            return self
        if name not in self._implemented_interfaces:
            self._implemented_interfaces.append(name)
        return self

    def has_implemented_interface(self, name: str) -> bool:
        return name in self.get_implemented_interfaces()

    def remove_implemented_interface(self, name: str) -> DeclarationModel:
        if name in self._implemented_interfaces:
            self._implemented_interfaces.remove(name)
        return self

    def get_implemented_interfaces(self) -> list[str]:
        if not self._kind.capabilities.contracts:
            return []
        return list(self._implemented_interfaces)

    # -------- modifier flags --------

    def set_flags(self, flags: DeclarationFlag | int) -> DeclarationModel:
        if not self._kind.capabilities.modifiers:
            self._discard("flags", flags)
            return self
        self._flags = DeclarationFlag(flags)
        return self

    def add_flag(self, flag: DeclarationFlag | int) -> DeclarationModel:
        if not self._kind.capabilities.modifiers:
            self._discard("flag", flag)
            return self
        self._flags = DeclarationFlag(int(self._flags) | int(flag))
        return self

    def remove_flag(self, flag: DeclarationFlag | int) -> DeclarationModel:
        if not self._kind.capabilities.modifiers:
            self._discard("flag removal", flag)
            return self
        self._flags = DeclarationFlag(int(self._flags) & ~int(flag))
        return self

    def get_flags(self) -> int:
        if not self._kind.capabilities.modifiers:
            return 0
        return int(self._flags)

    def set_abstract(self, is_abstract: bool) -> DeclarationModel:
        if is_abstract:
            return self.add_flag(DeclarationFlag.ABSTRACT)
        return self.remove_flag(DeclarationFlag.ABSTRACT)

    def is_abstract(self) -> bool:
        return bool(self.get_flags() & DeclarationFlag.ABSTRACT)

    def set_final(self, is_final: bool) -> DeclarationModel:
        if is_final:
            return self.add_flag(DeclarationFlag.FINAL)
        return self.remove_flag(DeclarationFlag.FINAL)

    def is_final(self) -> bool:
        return bool(self.get_flags() & DeclarationFlag.FINAL)

    # -------- source --------

    def set_source_content(self, source: str | None) -> DeclarationModel:
        """Keep the original source text; emitted verbatim while the model is not dirty."""
        self._source_content = source
        return self

    def get_source_content(self) -> str | None:
        return self._source_content

    def set_source_dirty(self, dirty: bool = True) -> DeclarationModel:
        self._source_dirty = dirty
        return self

    def is_source_dirty(self) -> bool:
        return self._source_dirty

    def generate(self) -> str:
        """Render the declaration as source text. See :func:`declgen.generator.emit`."""
        from declgen.generator.emitter import emit

        return emit(self)

    # -------- helpers --------

    def _describe(self) -> str:
        return f"{self._kind.keyword} {self._name}" if self._name else f"this {self._kind.keyword}"

    def _discard(self, what: str, value: object) -> None:
        logger.debug("Ignoring %s %r on %s declaration '%s'", what, value, self._kind.keyword, self._name)


# ################
# Implementation
# ################

_DECLARATION_KEYS = {
    "name",
    "namespace",
    "namespacename",
    "docblock",
    "properties",
    "methods",
    "extendedclass",
    "implementedinterfaces",
    "uses",
    "flags",
}
_LIST_KEYS = {"properties", "methods", "implementedinterfaces", "uses"}


def _parse_use(use: object) -> tuple[str, str | None]:
    """Read a use entry: a name, a ``[name, alias]`` pair or a mapping."""
    if isinstance(use, str):
        return use, None
    if isinstance(use, Mapping) and "name" in use:
        return use["name"], use.get("alias")
    if isinstance(use, (list, tuple)) and len(use) in (1, 2):
        return use[0], use[1] if len(use) == 2 else None
    raise InvalidArgumentError(f"invalid use entry: {use!r}")


def _parse_flags(flags: object) -> DeclarationFlag:
    """Read flags given as an integer or a list of flag names."""
    if isinstance(flags, int) and not isinstance(flags, bool):
        return DeclarationFlag(flags)
    if isinstance(flags, (list, tuple)):
        result = DeclarationFlag(0)
        for name in flags:
            try:
                result |= DeclarationFlag[str(name).upper()]
            except KeyError:
                raise InvalidArgumentError(f"unknown declaration flag '{name}'") from None
        return result
    raise InvalidArgumentError(f"flags must be an integer or a list of flag names, got {flags!r}")
