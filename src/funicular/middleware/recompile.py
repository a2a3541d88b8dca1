"""Rebuild-on-request middleware for chirp-style apps.

Matches the chirp middleware protocol: any callable shaped like
``async def mw(request, next)``. The request is never inspected, so no
framework import is needed.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias

import anyio.to_thread

from funicular.build.compiler import Compiler
from funicular.build.coordinator import RebuildCoordinator
from funicular.config import FunicularConfig

logger = logging.getLogger("funicular.middleware")

Next: TypeAlias = Callable[[Any], Awaitable[Any]]


class RecompileMiddleware:
    """Recompiles the Funicular app before a request when sources changed.

    Only active when ``config.debug`` is set and the source directory
    exists. Without a config it is inactive, like :func:`use_funicular`. The build runs in a worker thread so the event loop keeps
    serving; the request waits for it, so it is served against the
    fresh artifact.

    Usage::

        app.add_middleware(RecompileMiddleware(FunicularConfig(debug=True)))
    """

    __slots__ = ("_config", "_coordinator")

    def __init__(
        self,
        config: FunicularConfig | None = None,
        *,
        coordinator: RebuildCoordinator | None = None,
    ) -> None:
        self._config = config or FunicularConfig()
        self._coordinator = coordinator or RebuildCoordinator(Compiler(self._config))

    @property
    def coordinator(self) -> RebuildCoordinator:
        return self._coordinator

    async def __call__(self, request: Any, next: Next) -> Any:
        await self.recompile_if_needed()
        return await next(request)

    def should_check(self) -> bool:
        return self._config.debug and self._config.source_path.is_dir()

    async def recompile_if_needed(self) -> None:
        if not self.should_check():
            return
        await anyio.to_thread.run_sync(
            self._coordinator.maybe_rebuild,
            self._config.source_path,
            self._config.output_path,
        )
