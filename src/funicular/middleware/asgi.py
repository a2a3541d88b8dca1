"""Rebuild-on-request wrapper for raw ASGI applications."""

from __future__ import annotations

from funicular._internal.asgi import ASGIApp, Receive, Scope, Send
from funicular.build.coordinator import RebuildCoordinator
from funicular.config import FunicularConfig
from funicular.middleware.recompile import RecompileMiddleware


class RecompileASGIMiddleware:
    """Wraps an ASGI app and recompiles before each HTTP request.

    Lifespan and websocket scopes pass straight through.

    Usage::

        application = RecompileASGIMiddleware(app, FunicularConfig(debug=True))
    """

    __slots__ = ("_app", "_recompiler")

    def __init__(
        self,
        app: ASGIApp,
        config: FunicularConfig | None = None,
        *,
        coordinator: RebuildCoordinator | None = None,
    ) -> None:
        self._app = app
        self._recompiler = RecompileMiddleware(config, coordinator=coordinator)

    @property
    def coordinator(self) -> RebuildCoordinator:
        return self._recompiler.coordinator

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            await self._recompiler.recompile_if_needed()
        await self._app(scope, receive, send)
