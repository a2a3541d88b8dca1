"""Funicular CLI: one-shot builds and route listing.

Entry point registered as ``funicular`` in ``pyproject.toml``::

    [project.scripts]
    funicular = "funicular.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``funicular`` command."""
    parser = argparse.ArgumentParser(
        prog="funicular",
        description="Funicular: compile PicoRuby client apps to mruby bytecode.",
    )
    parser.add_argument("--root", default=".", help="Project root (default: current directory)")
    subparsers = parser.add_subparsers(dest="command")

    # -- funicular compile -------------------------------------------------
    compile_parser = subparsers.add_parser("compile", help="Compile sources to a .mrb file")
    compile_parser.add_argument("--source-dir", default=None, help="Source directory")
    compile_parser.add_argument("--output", default=None, help="Output .mrb path")
    compile_parser.add_argument(
        "--debug",
        action="store_true",
        help="Include debug information (picorbc -g)",
    )
    compile_parser.add_argument(
        "--env",
        default=None,
        help="Environment name written to FUNICULAR_ENV",
    )

    # -- funicular routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List client-side routes")
    routes_parser.add_argument("--source-dir", default=None, help="Source directory")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "compile":
        from funicular.cli._compile import run_compile

        run_compile(args)
    elif args.command == "routes":
        from funicular.cli._routes import run_routes

        run_routes(args)
