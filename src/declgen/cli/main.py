# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the declgen command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from declgen.config.loader import DeclarationConfigError, load_declaration_config, parse_kind
from declgen.model.errors import GeneratorError
from declgen.reflection.artifact import read_metadata
from declgen.reflection.importer import import_declaration

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the declgen CLI."""
    parser = argparse.ArgumentParser(
        prog="declgen",
        description="declgen - generate class, trait and interface source code",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # render subcommand
    render_parser = subparsers.add_parser(
        "render",
        help="Generate source code from a declaration config file",
        description="Generate the source code of the declaration described by a YAML file.",
    )
    render_parser.add_argument("config", help="Path to the YAML declaration config file")
    render_parser.add_argument(
        "-o",
        "--output",
        help="File to write the generated code to (default: standard output)",
    )

    # import subcommand
    import_parser = subparsers.add_parser(
        "import",
        help="Regenerate source code from a declaration metadata artifact",
        description=(
            "Read a JSON metadata artifact describing an existing declaration, "
            "import it as the given kind and emit the regenerated source code."
        ),
    )
    import_parser.add_argument("metadata", help="Path to the JSON metadata artifact")
    import_parser.add_argument(
        "--kind",
        default="class",
        help="Kind to import the declaration as: class, trait or interface (default: class)",
    )
    import_parser.add_argument(
        "--regenerate",
        action="store_true",
        help="Emit from the model even when the artifact carries the original source",
    )
    import_parser.add_argument(
        "-o",
        "--output",
        help="File to write the generated code to (default: standard output)",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "render":
        return _cmd_render(args)
    if args.command == "import":
        return _cmd_import(args)
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    """Handle the render subcommand."""
    try:
        declaration = load_declaration_config(Path(args.config))
        code = declaration.generate()
    except DeclarationConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except GeneratorError as exc:
        print(f"Error: {args.config}: {exc}", file=sys.stderr)
        return 1
    return _write_output(code, args.output)


def _cmd_import(args: argparse.Namespace) -> int:
    """Handle the import subcommand."""
    try:
        kind = parse_kind(args.kind)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    path = Path(args.metadata)
    try:
        metadata = read_metadata(path)
    except FileNotFoundError:
        print(f"Error: metadata file '{path}' does not exist.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: invalid metadata artifact '{path}': {exc}", file=sys.stderr)
        return 1

    try:
        declaration = import_declaration(metadata, kind)
        if args.regenerate:
            declaration.set_source_dirty(True)
        code = declaration.generate()
    except GeneratorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return _write_output(code, args.output)


def _write_output(code: str, output: str | None) -> int:
    """Write generated code to *output*, or to standard output when not given."""
    if output is None:
        sys.stdout.write(code)
        return 0
    path = Path(output)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot write '{path}': {exc}", file=sys.stderr)
        return 1
    logger.debug("Wrote %d characters to %s", len(code), path)
    return 0
