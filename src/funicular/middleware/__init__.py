"""Development middleware: rebuild the ``.mrb`` artifact before requests.

    RecompileMiddleware -- chirp-protocol middleware ``(request, next)``
    RecompileASGIMiddleware -- wraps any raw ASGI application
"""

from funicular.middleware.asgi import RecompileASGIMiddleware
from funicular.middleware.recompile import RecompileMiddleware

__all__ = ["RecompileASGIMiddleware", "RecompileMiddleware"]
