# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emission of declaration models as source text.

The output layout is fixed:

* ``namespace`` line and a blank line, when a namespace is set;
* ``use`` lines in insertion order and a blank line, when imports exist;
* the doc block;
* the header ``[abstract |final ]<keyword> <name>[ extends ..][ implements ..]``;
* the body in braces on their own lines, members indented by four spaces and
  separated by one blank line, properties before methods.

Emission has no side effects: the same model always yields the same text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from declgen.generator.values import render_literal
from declgen.model.errors import InvalidArgumentError
from declgen.model.names import NameResolver

if TYPE_CHECKING:
    from declgen.model.declaration import DeclarationModel
    from declgen.model.members import MethodModel, ParameterModel, PropertyModel

# ###############
# Public Interface
# ###############

INDENTATION = "    "


def emit(declaration: DeclarationModel) -> str:
    """Render *declaration* as source text ending with a newline.

    A model that is not dirty and holds source content is returned as that
    content, unchanged.

    Raises:
        InvalidArgumentError: If the declaration has no name, or a default
            value has no literal form.
    """
    source = declaration.get_source_content()
    if not declaration.is_source_dirty() and source:
        return source
    if not declaration.get_name():
        raise InvalidArgumentError(f"{declaration.get_kind().keyword} declaration requires a name to be generated")

    output = ""
    namespace = declaration.get_namespace_name()
    if namespace:
        output += f"namespace {namespace};\n\n"

    uses = declaration.get_uses()
    if uses:
        output += "".join(f"use {use.render()};\n" for use in uses)
        output += "\n"

    doc_block = declaration.get_doc_block()
    if doc_block is not None:
        output += doc_block.generate()

    output += render_header(declaration) + "\n{\n"

    capabilities = declaration.get_kind().capabilities
    members = [render_property(p) for p in declaration.get_properties()]
    members += [
        render_method(m, signature_only=not capabilities.method_bodies, modifiers=capabilities.modifiers)
        for m in declaration.get_methods()
    ]
    if members:
        output += "\n\n".join(members) + "\n"
    output += "}\n"
    return output


def render_header(declaration: DeclarationModel) -> str:
    """Render the declaration line, without the opening brace."""
    kind = declaration.get_kind()
    resolver = NameResolver(declaration.get_namespace_name(), declaration.get_uses())

    header = ""
    if declaration.is_abstract():
        header += "abstract "
    elif declaration.is_final():
        header += "final "
    header += f"{kind.keyword} {declaration.get_name()}"

    extended_class = declaration.get_extended_class()
    if extended_class:
        header += f" extends {resolver.shorten(extended_class)}"

    contracts = declaration.get_implemented_interfaces()
    if contracts:
        names = ", ".join(resolver.shorten(c) for c in contracts)
        header += f" {kind.capabilities.contracts_keyword} {names}"
    return header


def render_property(prop: PropertyModel, indentation: str = INDENTATION) -> str:
    """Render ``<visibility> [static ]$<name> = <literal>;``."""
    modifiers = prop.get_visibility().value
    if prop.is_static():
        modifiers += " static"
    return f"{indentation}{modifiers} ${prop.get_name()} = {render_literal(prop.get_default_value())};"


def render_parameter(param: ParameterModel) -> str:
    """Render ``[<type> ][&]$<name>[ = <literal>]``."""
    output = f"{param.get_type()} " if param.get_type() else ""
    if param.is_passed_by_reference():
        output += "&"
    output += f"${param.get_name()}"
    if param.has_default_value():
        output += f" = {render_literal(param.get_default_value())}"
    return output


def render_method(
    method: MethodModel,
    indentation: str = INDENTATION,
    signature_only: bool = False,
    modifiers: bool = True,
) -> str:
    """Render a method with its doc block.

    Abstract methods and methods of signature-only declarations end with
    ``;``. Otherwise the body follows in braces, each non-blank body line
    prefixed with two levels of indentation. Blank lines, including those
    holding only whitespace, are emitted empty. With *modifiers* off the
    method's abstract and final flags are ignored.
    """
    is_abstract = modifiers and method.is_abstract()
    output = ""
    doc_block = method.get_doc_block()
    if doc_block is not None:
        output += doc_block.generate(indentation)

    keywords = [method.get_visibility().value]
    if method.is_static():
        keywords.append("static")
    if is_abstract:
        keywords.append("abstract")
    if modifiers and method.is_final():
        keywords.append("final")
    params = ", ".join(render_parameter(p) for p in method.get_parameters())
    output += f"{indentation}{' '.join(keywords)} function {method.get_name()}({params})"
    if method.get_return_type():
        output += f": {method.get_return_type()}"

    if signature_only or is_abstract:
        return output + ";"

    output += f"\n{indentation}{{\n"
    body = (method.get_body() or "").strip("\n")
    if body:
        for line in body.split("\n"):
            output += f"{indentation}{indentation}{line}\n" if line.strip() else "\n"
    output += f"{indentation}}}"
    return output
