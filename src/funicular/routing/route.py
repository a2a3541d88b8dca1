"""Route frozen dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Route:
    """A client-side route declared in ``initializer.rb``.

    ``helper`` is the generated path-helper name (``users_path``), or
    ``None`` when the declaration has no ``as:`` option.
    """

    method: str
    path: str
    component: str
    helper: str | None = None
