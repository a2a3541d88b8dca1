"""Funicular configuration.

FunicularConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from funicular.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class FunicularConfig:
    """Build configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FunicularConfig(debug=True, environment="staging")

    Relative paths are resolved against ``root``.
    """

    root: str | Path = "."

    # Source layout
    source_dir: str | Path = "app/funicular"
    extension: str = ".rb"

    # Output artifact
    output_file: str | Path = "app/assets/builds/app.mrb"

    # Toolchain
    toolchain: str = "picorbc"  # Looked up on PATH when no project-local binary exists
    local_toolchain: str | Path = "node_modules/.bin/picorbc"
    toolchain_version: str = "3.4.0"  # Pinned for reproducibility
    version_timeout: float = 5.0

    # Runtime environment marker
    environment: str = "development"
    env_variable: str = "FUNICULAR_ENV"

    # Set this process environment variable to keep the generated marker file
    keep_temp_variable: str = "FUNICULAR_KEEP_TEMP"

    # Development mode: enables rebuild-on-request middleware
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.extension.startswith("."):
            msg = f"extension must start with '.', got {self.extension!r}"
            raise ConfigurationError(msg)
        if not self.environment:
            raise ConfigurationError("environment must not be empty")

    @property
    def root_path(self) -> Path:
        return Path(self.root)

    @property
    def source_path(self) -> Path:
        return self.root_path / self.source_dir

    @property
    def output_path(self) -> Path:
        return self.root_path / self.output_file

    @property
    def local_toolchain_path(self) -> Path:
        return self.root_path / self.local_toolchain
