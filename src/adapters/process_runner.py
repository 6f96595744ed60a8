"""Wrapper de subprocess.

Por qué un wrapper:
- Estandariza encoding, captura de salida y timeouts para todas las
  herramientas (xcrun, adb, npx).
- Facilita testeo: se puede sustituir por un fake que implemente
  `core.interfaces.process.ProcessRunner`.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from core.domain.errors import CommandError
from core.domain.models import CommandResult
from core.interfaces.process import ProcessRunner


class SubprocessRunner(ProcessRunner):
    """`ProcessRunner` backed by the `subprocess` module."""

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd = cwd

    def which(self, name: str) -> str | None:
        return shutil.which(name)

    def capture(self, args: Sequence[str], *, timeout: float | None = None) -> CommandResult:
        command = list(args)
        try:
            proc = subprocess.run(
                command,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                stdin=subprocess.DEVNULL,
                timeout=timeout,
            )
        except FileNotFoundError as exc:
            raise CommandError(command, "command not found") from exc
        except subprocess.TimeoutExpired as exc:
            raise CommandError(command, f"timed out after {timeout}s") from exc
        except OSError as exc:
            raise CommandError(command, str(exc)) from exc

        result = CommandResult(returncode=proc.returncode, stdout=proc.stdout or "", stderr=proc.stderr or "")
        if not result.ok:
            message = result.stderr.strip() or f"exit code {result.returncode}"
            raise CommandError(command, message, returncode=result.returncode)
        return result

    def stream(self, args: Sequence[str], *, cwd: Path | None = None) -> int:
        proc = subprocess.run(list(args), cwd=cwd or self._cwd)
        return proc.returncode
