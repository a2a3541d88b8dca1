"""``funicular compile``: one-shot build.

Runs the same build the development middleware runs, prints warnings,
and exits with code 1 on any fatal error.
"""

import argparse
import sys

from funicular.build.compiler import BuildRequest, Compiler
from funicular.cli._config import config_from_args
from funicular.errors import FunicularError


def run_compile(args: argparse.Namespace) -> None:
    """Compile ``--source-dir`` to ``--output``."""
    config = config_from_args(args)
    request = BuildRequest(
        source_dir=config.source_path,
        output_file=config.output_path,
        debug=args.debug,
    )
    try:
        result = Compiler(config).compile(request)
    except FunicularError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for warning in result.diagnostics:
        print(f"Warning: {warning}", file=sys.stderr)
    print(f"Compiled {result.output_file}")
