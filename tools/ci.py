#!/usr/bin/env python3
# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the declgen CI checks locally.

Usage: ``uv run tools/ci.py [STEP ...]`` where STEP is one of the step keys
below; without arguments every step runs.
"""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, tuple[str, list[str]]] = {
    "format": ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    "lint": ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    "typecheck": ("Type check", ["uv", "run", "ty", "check", "src/"]),
    "test": ("Tests", ["uv", "run", "pytest", "--cov=declgen", "--cov-report=term-missing"]),
    "cli": ("CLI smoke test", ["uv", "run", "declgen", "--help"]),
    "build": ("Build", ["uv", "build"]),
}


def main(argv: list[str]) -> int:
    """Run the selected CI steps and print a summary; return the exit code."""
    selected = argv or list(STEPS)
    unknown = [key for key in selected if key not in STEPS]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}. Choose from: {', '.join(STEPS)}"))
        return 2

    failures: list[str] = []
    started = time.monotonic()
    for key in selected:
        title, cmd = STEPS[key]
        print(chalk.blue(f"\n--- {title} ({' '.join(cmd)})"))
        step_start = time.monotonic()
        returncode = subprocess.run(cmd, cwd=_REPO_ROOT).returncode
        elapsed = time.monotonic() - step_start
        if returncode == 0:
            print(chalk.green(f"--- {title}: ok in {elapsed:.1f}s"))
        else:
            print(chalk.red(f"--- {title}: failed with exit code {returncode} after {elapsed:.1f}s"))
            failures.append(title)

    total = time.monotonic() - started
    if failures:
        print(chalk.red(f"\n{len(failures)} of {len(selected)} step(s) failed in {total:.1f}s: {', '.join(failures)}"))
        return 1
    print(chalk.green(f"\nAll {len(selected)} step(s) passed in {total:.1f}s"))
    return 0


# ################
# Implementation
# ################

_REPO_ROOT = pathlib.Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
