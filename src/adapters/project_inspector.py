"""Lectura de ficheros del proyecto (package.json, app.json) y de la config de Expo.

Por qué un adaptador:
- Los servicios de detección y config no tocan el disco ni `npx` directamente.
- Distingue "no existe" (None) de "existe pero está roto" (`ProjectFileError`),
  que se reporta como aviso.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.errors import CommandError, ProjectFileError
from core.interfaces.process import ProcessRunner
from core.interfaces.project import ProjectInspector

EXPO_HELP = ["npx", "expo", "--help"]
EXPO_CONFIG_JSON = ["npx", "expo", "config", "--json"]


def _load_json_object(path: Path) -> dict[str, Any] | None:
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise ProjectFileError(path.name, str(exc)) from exc
    if not isinstance(data, dict):
        raise ProjectFileError(path.name, "expected a JSON object")
    return data


class FileSystemProjectInspector(ProjectInspector):
    """Inspects a project directory on disk."""

    def __init__(
        self,
        root: Path,
        process: ProcessRunner,
        *,
        expo_config_timeout: float = 10.0,
    ) -> None:
        self._root = root
        self._process = process
        self._expo_config_timeout = expo_config_timeout
        self._expo_cli_available: bool | None = None

    @property
    def root(self) -> Path:
        return self._root

    def has_file(self, name: str) -> bool:
        return (self._root / name).is_file()

    def has_dir(self, name: str) -> bool:
        return (self._root / name).is_dir()

    def read_package_json(self) -> dict[str, Any] | None:
        return _load_json_object(self._root / "package.json")

    def read_app_json(self) -> dict[str, Any] | None:
        return _load_json_object(self._root / "app.json")

    def read_expo_config(self) -> dict[str, Any] | None:
        try:
            result = self._process.capture(EXPO_CONFIG_JSON, timeout=self._expo_config_timeout)
        except CommandError:
            return None
        try:
            data = json.loads(result.stdout)
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    def expo_cli_available(self) -> bool:
        # Checked once per run.
        if self._expo_cli_available is None:
            try:
                self._process.capture(EXPO_HELP)
            except CommandError:
                self._expo_cli_available = False
            else:
                self._expo_cli_available = True
        return self._expo_cli_available
