# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""declgen: structured generation of class, trait and interface source code.

Declarations are described by a :class:`~declgen.model.DeclarationModel`,
built in code, from a configuration mapping or from metadata of an existing
declaration, and rendered with :meth:`~declgen.model.DeclarationModel.generate`.
"""

__version__ = "0.1.0"
