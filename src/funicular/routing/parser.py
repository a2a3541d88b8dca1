"""Heuristic single-line parser for router declarations.

Recognises the two declaration forms used in ``initializer.rb``::

    router.get '/users', to: UsersComponent, as: 'users'
    router.add_route('/old', LegacyComponent)

Each line is tokenized on its own:

1. ``router.`` marker followed by a method identifier
   (``get``, ``post``, ``put``, ``patch``, ``delete``, ``add_route``)
2. path: the first quoted literal on the line
3. component: the text after ``to:``, or for ``add_route`` the second
   positional argument, cut at the first ``,`` or ``)``
4. helper: the quoted literal after ``as:``, suffixed with ``_path``

A line that fails any of steps 1-3 is skipped, never reported.

The method must be the whole identifier after the marker, not a prefix of
it: ``router.get_all '/x', to: X`` is not a ``get`` route and is skipped.

Known limitations: declarations spanning several lines, escaped quotes,
and quotes nested inside literals are not understood. They yield no route
or a truncated value.
"""

from __future__ import annotations

import re
from pathlib import Path

from funicular.routing.route import Route

_MARKER = "router."

_METHODS = frozenset({"get", "post", "put", "patch", "delete", "add_route"})

# Identifier directly after the marker
_IDENT_RE = re.compile(r"[A-Za-z_]\w*")

# Keyword-argument markers, not preceded by an identifier character
_TO_RE = re.compile(r"(?<!\w)to:")
_AS_RE = re.compile(r"(?<!\w)as:")

_QUOTES = "'\""

_HELPER_SUFFIX = "_path"


def parse_routes(source: str) -> list[Route]:
    """Extract routes from router declaration source, in line order."""
    routes: list[Route] = []
    for line in source.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        if _MARKER not in trimmed:
            continue
        route = _parse_line(trimmed)
        if route is not None:
            routes.append(route)
    return routes


def parse_route_file(path: str | Path) -> list[Route]:
    """Parse a file; a missing file has no routes."""
    file = Path(path)
    if not file.is_file():
        return []
    return parse_routes(file.read_text(encoding="utf-8"))


def _parse_line(line: str) -> Route | None:
    method = _method(line)
    if method is None:
        return None

    path = _quoted(line)
    if path is None:
        return None

    component = _component(line, method)
    if not component:
        return None

    helper = None
    as_match = _AS_RE.search(line)
    if as_match:
        name = _quoted(line[as_match.end() :])
        helper = f"{name}{_HELPER_SUFFIX}" if name is not None else None

    return Route(
        method="GET" if method == "add_route" else method.upper(),
        path=path,
        component=component,
        helper=helper,
    )


def _method(line: str) -> str | None:
    """First recognised method identifier following a ``router.`` marker."""
    start = line.find(_MARKER)
    while start != -1:
        match = _IDENT_RE.match(line, start + len(_MARKER))
        if match and match.group(0) in _METHODS:
            return match.group(0)
        start = line.find(_MARKER, start + 1)
    return None


def _quoted(text: str) -> str | None:
    """Contents of the first quoted literal, delimited by whichever quote opens first."""
    for index, char in enumerate(text):
        if char in _QUOTES:
            end = text.find(char, index + 1)
            return text[index + 1 : end] if end != -1 else None
    return None


def _component(line: str, method: str) -> str | None:
    to_match = _TO_RE.search(line)
    if to_match:
        raw = _until_delimiter(line[to_match.end() :])
    elif method == "add_route":
        comma = line.find(",")
        if comma == -1:
            return None
        raw = _until_delimiter(line[comma + 1 :])
    else:
        return None
    return _unquote(raw.strip())


def _until_delimiter(text: str) -> str:
    """Text before the first ``,`` or ``)``, whichever comes first."""
    ends = [i for i in (text.find(","), text.find(")")) if i != -1]
    return text[: min(ends)] if ends else text


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        return text[1:-1]
    return text
