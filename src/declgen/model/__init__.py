# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration model: declarations, members, doc blocks and names."""

from declgen.model.declaration import DeclarationModel
from declgen.model.docblock import DocBlockModel, DocBlockTag
from declgen.model.errors import DuplicateMemberError, GeneratorError, InvalidArgumentError
from declgen.model.kinds import Capabilities, DeclarationFlag, DeclarationKind
from declgen.model.literals import Expression, check_literal
from declgen.model.members import MethodModel, ParameterModel, PropertyModel, Visibility
from declgen.model.names import NAMESPACE_SEPARATOR, NameResolver, UseStatement, join_name, split_name

__all__ = [
    # Declarations
    "DeclarationModel",
    "DeclarationKind",
    "DeclarationFlag",
    "Capabilities",
    # Members
    "PropertyModel",
    "ParameterModel",
    "MethodModel",
    "Visibility",
    "Expression",
    "check_literal",
    # Documentation
    "DocBlockModel",
    "DocBlockTag",
    # Names
    "NAMESPACE_SEPARATOR",
    "NameResolver",
    "UseStatement",
    "split_name",
    "join_name",
    # Errors
    "GeneratorError",
    "InvalidArgumentError",
    "DuplicateMemberError",
]
