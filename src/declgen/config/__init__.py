# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading declarations from YAML configuration files."""

from declgen.config.loader import (
    DeclarationConfigError,
    load_declaration_config,
    parse_declaration_config,
    parse_kind,
)

__all__ = [
    "DeclarationConfigError",
    "load_declaration_config",
    "parse_declaration_config",
    "parse_kind",
]
