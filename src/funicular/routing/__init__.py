"""Route table extraction from client-side router declarations."""

from funicular.routing.parser import parse_route_file, parse_routes
from funicular.routing.route import Route

__all__ = ["Route", "parse_route_file", "parse_routes"]
