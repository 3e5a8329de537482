# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Namespace handling for declaration names and type references."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

NAMESPACE_SEPARATOR = "\\"


@dataclass(frozen=True)
class UseStatement:
    """A ``use`` import of a qualified name, optionally under an alias."""

    qualified_name: str
    alias: str | None = None

    @property
    def local_name(self) -> str:
        """The name under which the import is visible in the declaring file."""
        if self.alias:
            return self.alias
        return split_name(self.qualified_name)[1]

    def render(self) -> str:
        if self.alias:
            return f"{self.qualified_name} as {self.alias}"
        return self.qualified_name


def split_name(name: str) -> tuple[str | None, str]:
    """Split a possibly qualified name into ``(namespace, short_name)``.

    A leading separator marks a fully qualified name and is dropped.
    """
    name = name.lstrip(NAMESPACE_SEPARATOR)
    namespace, sep, short_name = name.rpartition(NAMESPACE_SEPARATOR)
    if not sep:
        return None, name
    return namespace, short_name


def join_name(namespace: str | None, short_name: str) -> str:
    """Inverse of :func:`split_name`."""
    if namespace:
        return f"{namespace}{NAMESPACE_SEPARATOR}{short_name}"
    return short_name


class NameResolver:
    """Resolves type references relative to a namespace and its imports.

    Args:
        namespace: The namespace of the declaration being generated.
        uses: The ``use`` imports in effect for the declaration.
    """

    def __init__(self, namespace: str | None, uses: Iterable[UseStatement] = ()) -> None:
        self._namespace = namespace or None
        self._uses = list(uses)

    def qualify(self, name: str) -> str:
        """Expand a reference as written in source to its fully qualified form.

        A leading separator makes the reference absolute. Otherwise the first
        segment is matched against the local names of the imports; when no
        import matches, the reference is relative to the current namespace.
        """
        if name.startswith(NAMESPACE_SEPARATOR):
            return name.lstrip(NAMESPACE_SEPARATOR)
        first, sep, rest = name.partition(NAMESPACE_SEPARATOR)
        for use in self._uses:
            if use.local_name == first:
                return use.qualified_name + (sep + rest if rest else "")
        return join_name(self._namespace, name)

    def shorten(self, name: str) -> str:
        """Return the shortest form of a fully qualified name valid in this scope.

        Imported names are printed by their local name and names in the
        current namespace by their short name. Everything else is printed
        fully qualified with a leading separator, except global names when no
        namespace is active.
        """
        qualified = name.lstrip(NAMESPACE_SEPARATOR)
        for use in self._uses:
            if use.qualified_name == qualified:
                return use.local_name
        namespace, short_name = split_name(qualified)
        if namespace == self._namespace:
            return short_name
        return NAMESPACE_SEPARATOR + qualified
