"""Funicular: PicoRuby client apps compiled to mruby bytecode.

Compiles ``app/funicular/**/*.rb`` into a single ``.mrb`` artifact with
``picorbc`` and rebuilds it on request in development.

Basic usage::

    from funicular import Compiler, FunicularConfig
    from funicular.build import BuildRequest

    config = FunicularConfig()
    Compiler(config).compile(
        BuildRequest(config.source_path, config.output_path)
    )

Development (chirp app)::

    from funicular.ext import use_funicular

    use_funicular(app, FunicularConfig(debug=True))
"""

__version__ = "0.1.0"
__all__ = [
    "BuildError",
    "Compiler",
    "EmptySourceError",
    "FunicularConfig",
    "FunicularError",
    "RebuildCoordinator",
    "RecompileMiddleware",
    "Route",
    "ToolchainNotFoundError",
    "parse_routes",
    "use_funicular",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import funicular`` fast while providing a clean top-level API.
    """
    if name == "FunicularConfig":
        from funicular.config import FunicularConfig

        return FunicularConfig

    if name == "Compiler":
        from funicular.build.compiler import Compiler

        return Compiler

    if name == "RebuildCoordinator":
        from funicular.build.coordinator import RebuildCoordinator

        return RebuildCoordinator

    if name == "RecompileMiddleware":
        from funicular.middleware.recompile import RecompileMiddleware

        return RecompileMiddleware

    if name == "use_funicular":
        from funicular.ext import use_funicular

        return use_funicular

    if name in ("Route", "parse_routes"):
        from funicular import routing as _routing

        return getattr(_routing, name)

    if name in ("BuildError", "EmptySourceError", "FunicularError", "ToolchainNotFoundError"):
        from funicular import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
