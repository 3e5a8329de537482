# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for declgen."""
