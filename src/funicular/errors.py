"""Funicular exception hierarchy.

Shared across the source aggregator, toolchain resolver, compiler, and CLI
so every module raises and catches the same types.
"""

import shlex
from collections.abc import Sequence


class FunicularError(Exception):
    """Base for all funicular-specific errors."""


class ConfigurationError(FunicularError):
    """Raised when funicular configuration is invalid."""


class ToolchainNotFoundError(FunicularError):
    """No ``picorbc`` binary in the project or on ``PATH``.

    Fatal: blocks any build.
    """


class EmptySourceError(FunicularError):
    """The source tree contains no compilable files."""

    def __init__(self, source_dir: object) -> None:
        self.source_dir = source_dir
        super().__init__(f"No Ruby files found in {source_dir}")


class BuildError(FunicularError):
    """The toolchain exited with a non-zero status.

    Carries the exact argument vector so the failing command can be
    re-run by hand.
    """

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        super().__init__(
            f"Failed to compile with picorbc (exit status {returncode}). "
            f"Command: {self.command_line}"
        )

    @property
    def command_line(self) -> str:
        """The command as a single printable string."""
        return shlex.join(self.command)
