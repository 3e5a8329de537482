# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Population of declaration models from metadata of existing declarations.

The importer applies the rules of the target kind while reading:

* STANDARD keeps the supertype, the contracts the declaration adds on top of
  its supertype's, and the abstract/final modifiers.
* RESTRICTED_MIXIN reads but drops supertype, contracts and modifiers, since
  such a declaration cannot extend, implement or be abstract or final.
* CONTRACT keeps its contract list and drops properties.

Only members declared by the inspected declaration itself are imported;
inherited ones stay with the declaration that defines them.
"""

from __future__ import annotations

import logging

from declgen.model.declaration import DeclarationModel
from declgen.model.docblock import DocBlockModel
from declgen.model.kinds import DeclarationKind
from declgen.model.literals import Expression
from declgen.model.members import MethodModel, ParameterModel, PropertyModel
from declgen.reflection.metadata import DeclarationMetadata, MethodMetadata, ParameterMetadata, PropertyMetadata

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def import_declaration(
    metadata: DeclarationMetadata,
    kind: DeclarationKind = DeclarationKind.STANDARD,
) -> DeclarationModel:
    """Build a declaration model from *metadata*.

    Args:
        metadata: Description of the existing declaration.
        kind: Kind of the model to build.

    Returns:
        The populated :class:`DeclarationModel`. When the metadata carries the
        original source, the model keeps it and is not dirty, so emitting it
        unchanged reproduces that source.
    """
    qualified_name = metadata.qualified_name
    decl = DeclarationModel(metadata.name, kind=kind)
    decl.set_namespace_name(metadata.namespace)
    for use in metadata.uses:
        decl.add_use(use.name, use.alias)
    if metadata.doc_comment:
        decl.set_doc_block(DocBlockModel.from_comment(metadata.doc_comment))

    capabilities = kind.capabilities
    if capabilities.supertype:
        decl.set_extended_class(metadata.parent_name)
    elif metadata.parent_name:
        logger.debug("Dropping supertype '%s' of %s imported as %s", metadata.parent_name, qualified_name, kind.keyword)

    own_interfaces = [i for i in metadata.interface_names if i not in metadata.parent_interface_names]
    if capabilities.contracts:
        decl.set_implemented_interfaces(own_interfaces)
    elif own_interfaces:
        logger.debug("Dropping contracts %s of %s imported as %s", own_interfaces, qualified_name, kind.keyword)

    if capabilities.modifiers:
        decl.set_abstract(metadata.is_abstract)
        decl.set_final(metadata.is_final)

    for prop in metadata.properties:
        if _is_inherited(prop, qualified_name):
            logger.debug("Skipping inherited property '%s' of %s", prop.name, qualified_name)
            continue
        decl.add_property(_import_property(prop))

    for method in metadata.methods:
        if _is_inherited(method, qualified_name):
            logger.debug("Skipping inherited method '%s' of %s", method.name, qualified_name)
            continue
        decl.add_method(_import_method(method))

    if metadata.source:
        decl.set_source_content(metadata.source)
        decl.set_source_dirty(False)
    return decl


# ################
# Implementation
# ################


def _is_inherited(member: PropertyMetadata | MethodMetadata, qualified_name: str) -> bool:
    if member.declaring_class is None:
        return False
    return member.declaring_class.lstrip("\\") != qualified_name


def _import_property(prop: PropertyMetadata) -> PropertyModel:
    default = Expression(prop.default_expression) if prop.default_expression is not None else prop.default
    return PropertyModel(prop.name, default, prop.visibility, prop.is_static)


def _import_parameter(param: ParameterMetadata) -> ParameterModel:
    model = ParameterModel(
        param.name,
        type=param.type,
        passed_by_reference=param.by_reference,
        position=param.position,
    )
    if param.default_expression is not None:
        model.set_default_value(Expression(param.default_expression))
    elif param.has_default:
        model.set_default_value(param.default)
    return model


def _import_method(method: MethodMetadata) -> MethodModel:
    doc_block = DocBlockModel.from_comment(method.doc_comment) if method.doc_comment else None
    return MethodModel(
        method.name,
        parameters=[_import_parameter(p) for p in method.parameters],
        visibility=method.visibility,
        is_static=method.is_static,
        is_abstract=method.is_abstract,
        is_final=method.is_final,
        body=method.body,
        doc_block=doc_block,
        return_type=method.return_type,
    )
