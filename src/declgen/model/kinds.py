# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration kinds and the capabilities each kind supports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag

# ###############
# Public Interface
# ###############


class DeclarationFlag(IntFlag):
    """Modifier bits of a declaration. Only STANDARD declarations store them."""

    ABSTRACT = 0x01
    FINAL = 0x02
    IMPLEMENTS_CONTRACTS = 0x04
    OBJECT_TYPE = 0x08


@dataclass(frozen=True)
class Capabilities:
    """Which parts of the declaration model are active for a kind.

    Attributes:
        supertype: The declaration may extend a supertype.
        contracts: The declaration may list contracts.
        modifiers: Abstract/final flags are stored, on the declaration and its methods.
        properties: The declaration may hold properties.
        method_bodies: Methods are emitted with bodies rather than as signatures.
        contracts_keyword: Keyword introducing the contract list in the header.
    """

    supertype: bool
    contracts: bool
    modifiers: bool
    properties: bool
    method_bodies: bool
    contracts_keyword: str


class DeclarationKind(Enum):
    """The kind of declaration; the value is its source keyword."""

    STANDARD = "class"
    RESTRICTED_MIXIN = "trait"
    CONTRACT = "interface"

    @property
    def keyword(self) -> str:
        return self.value

    @property
    def capabilities(self) -> Capabilities:
        return _CAPABILITIES[self]


# ################
# Implementation
# ################

_CAPABILITIES: dict[DeclarationKind, Capabilities] = {
    DeclarationKind.STANDARD: Capabilities(
        supertype=True,
        contracts=True,
        modifiers=True,
        properties=True,
        method_bodies=True,
        contracts_keyword="implements",
    ),
    DeclarationKind.RESTRICTED_MIXIN: Capabilities(
        supertype=False,
        contracts=False,
        modifiers=False,
        properties=True,
        method_bodies=True,
        contracts_keyword="implements",
    ),
    DeclarationKind.CONTRACT: Capabilities(
        supertype=False,
        contracts=True,
        modifiers=False,
        properties=False,
        method_bodies=False,
        contracts_keyword="extends",
    ),
}
