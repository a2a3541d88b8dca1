"""Shared fixtures: a sample source tree and a fake ``picorbc``.

The fake compiler is a POSIX shell script that uses only shell builtins,
so it keeps working when a test narrows ``PATH``. It:

- prints ``version_output`` for ``--version`` and notes the call in
  ``version.log``
- records its arguments, one per line, in ``args.log``
- concatenates every source argument into the ``-o`` output file
- exits with ``exit_code``
"""

import stat
from dataclasses import dataclass
from pathlib import Path

import pytest

from funicular.config import FunicularConfig

_SCRIPT = """#!/bin/sh
if [ "$1" = "--version" ]; then
  printf '%s\\n' "--version" >> "{version_log}"
  echo "{version_output}"
  exit 0
fi
: > "{args_log}"
for arg in "$@"; do
  printf '%s\\n' "$arg" >> "{args_log}"
done
out=""
skip=0
for arg in "$@"; do
  if [ "$skip" = 1 ]; then out="$arg"; skip=0; continue; fi
  if [ "$arg" = "-o" ]; then skip=1; fi
done
: > "$out"
skip=0
for arg in "$@"; do
  if [ "$skip" = 1 ]; then skip=0; continue; fi
  case "$arg" in
    -o) skip=1 ;;
    -g) ;;
    *) while IFS= read -r line || [ -n "$line" ]; do printf '%s\\n' "$line"; done < "$arg" >> "$out" ;;
  esac
done
exit {exit_code}
"""


@dataclass(frozen=True, slots=True)
class FakeToolchain:
    path: Path
    args_log: Path
    version_log: Path

    def calls(self) -> list[str]:
        """Arguments of the last compile invocation (empty if none ran)."""
        if not self.args_log.exists():
            return []
        return self.args_log.read_text().splitlines()

    def version_queries(self) -> int:
        """How many times ``--version`` was run."""
        if not self.version_log.exists():
            return 0
        return len(self.version_log.read_text().splitlines())


def make_toolchain(
    directory: Path,
    *,
    version_output: str = "picorbc 3.4.0",
    exit_code: int = 0,
) -> FakeToolchain:
    """Write an executable fake ``picorbc`` into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "picorbc"
    args_log = directory / "args.log"
    version_log = directory / "version.log"
    path.write_text(
        _SCRIPT.format(
            version_output=version_output,
            args_log=args_log,
            version_log=version_log,
            exit_code=exit_code,
        )
    )
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return FakeToolchain(path=path, args_log=args_log, version_log=version_log)


def write_sources(source_dir: Path) -> None:
    """Populate a representative Funicular source tree."""
    files = {
        "models/user.rb": "class User; end",
        "models/admin/role.rb": "class Role; end",
        "components/app_component.rb": "class AppComponent; end",
        "components/users/list_component.rb": "class ListComponent; end",
        "router_initializer.rb": "# router setup",
        "auth_initializer.rb": "# auth setup",
        "initializer.rb": "router.get '/', to: AppComponent",
    }
    for relative, content in files.items():
        path = source_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content + "\n")


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the real PATH and keep-temp flag out of every test."""
    empty = tmp_path / "empty-path"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    monkeypatch.delenv("FUNICULAR_KEEP_TEMP", raising=False)


@pytest.fixture
def config(tmp_path: Path) -> FunicularConfig:
    return FunicularConfig(root=tmp_path)


@pytest.fixture
def sources(config: FunicularConfig) -> Path:
    write_sources(config.source_path)
    return config.source_path


@pytest.fixture
def toolchain(config: FunicularConfig) -> FakeToolchain:
    """A project-local fake ``picorbc`` reporting the pinned version."""
    return make_toolchain(config.local_toolchain_path.parent)


@pytest.fixture
def make_picorbc():
    """Factory for fake compilers with a custom version or exit status."""
    return make_toolchain
