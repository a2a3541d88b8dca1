"""Build a FunicularConfig from parsed CLI arguments."""

import argparse
from dataclasses import replace

from funicular.config import FunicularConfig


def config_from_args(args: argparse.Namespace) -> FunicularConfig:
    """Apply CLI overrides on top of the default configuration.

    Only flags the user actually passed override a field.
    """
    config = FunicularConfig(root=args.root)
    overrides: dict[str, object] = {}
    if getattr(args, "source_dir", None):
        overrides["source_dir"] = args.source_dir
    if getattr(args, "output", None):
        overrides["output_file"] = args.output
    if getattr(args, "env", None):
        overrides["environment"] = args.env
    return replace(config, **overrides) if overrides else config
