# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for declgen documentation."""

project = "declgen"
author = "declgen Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
