"""chirp integration: register the rebuild middleware in development.

Usage::

    from chirp import App, AppConfig
    from funicular.config import FunicularConfig
    from funicular.ext import use_funicular

    app = App(AppConfig(debug=True))
    use_funicular(app, FunicularConfig(debug=app.config.debug))
    app.run()
"""

from __future__ import annotations

from typing import Any

from funicular.config import FunicularConfig
from funicular.middleware.recompile import RecompileMiddleware


def use_funicular(app: Any, config: FunicularConfig | None = None) -> RecompileMiddleware | None:
    """Add :class:`RecompileMiddleware` to ``app`` when ``config.debug`` is set.

    ``app`` is anything with an ``add_middleware(middleware)`` method.
    The middleware owns the process's single rebuild coordinator.

    Returns the registered middleware, or ``None`` outside development.
    """
    config = config or FunicularConfig()
    if not config.debug:
        return None
    middleware = RecompileMiddleware(config)
    app.add_middleware(middleware)
    return middleware
