"""Contrato para lanzar procesos externos.

Por qué Protocol:
- La detección y el runner solo necesitan tres operaciones; un fake en los
  tests evita depender de xcrun/adb/npx instalados.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import CommandResult


@runtime_checkable
class ProcessRunner(Protocol):
    """Spawns external commands."""

    def which(self, name: str) -> str | None:
        """Absolute path of `name` on PATH, or None."""

        ...

    def capture(self, args: Sequence[str], *, timeout: float | None = None) -> CommandResult:
        """Run to completion capturing output.

        Raises `CommandError` when the binary is missing, the timeout expires
        or the command exits non-zero.
        """

        ...

    def stream(self, args: Sequence[str], *, cwd: Path | None = None) -> int:
        """Run with inherited stdio and return the exit code.

        Raises `OSError` when the process cannot be spawned.
        """

        ...
