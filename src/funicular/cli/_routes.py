"""``funicular routes``: list client-side routes.

Parses ``<source-dir>/initializer.rb`` and prints a table of method,
path, component, and helper name, followed by a route count.
"""

import argparse

from funicular.cli._config import config_from_args
from funicular.routing.parser import parse_route_file
from funicular.routing.route import Route

_HEADERS = ("Method", "Path", "Component", "Helper")

# Gutter between columns
_GAP = "   "


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table for the configured source directory."""
    config = config_from_args(args)
    initializer = config.source_path / f"initializer{config.extension}"

    if not initializer.is_file():
        print(f"No Funicular routes found ({initializer} does not exist)")
        return

    routes = parse_route_file(initializer)
    if not routes:
        print("No routes defined")
        return

    print(format_routes(routes))


def format_routes(routes: list[Route]) -> str:
    """Render routes as a column-aligned table with a total line."""
    rows = [(r.method, r.path, r.component, r.helper or "") for r in routes]
    widths = [
        max(len(header), *(len(row[col]) for row in rows))
        for col, header in enumerate(_HEADERS)
    ]
    # Header text sets the minimum width; Helper is always at least 10 wide
    widths[3] = max(widths[3], 10)

    def fmt(row: tuple[str, ...]) -> str:
        return _GAP.join(cell.ljust(width) for cell, width in zip(row, widths, strict=True))

    count = len(routes)
    lines = [
        fmt(_HEADERS),
        "-" * (sum(widths) + 12),
        *(fmt(row) for row in rows),
        "",
        f"Total: {count} route{'' if count == 1 else 's'}",
    ]
    return "\n".join(lines)
