"""Contrato de inspección del proyecto React Native/Expo."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ProjectInspector(Protocol):
    """Read-only view of the project directory.

    `read_*` methods return None when the file is absent and raise
    `ProjectFileError` when it exists but cannot be parsed.
    """

    def has_file(self, name: str) -> bool: ...

    def has_dir(self, name: str) -> bool: ...

    def read_package_json(self) -> dict[str, Any] | None: ...

    def read_app_json(self) -> dict[str, Any] | None: ...

    def read_expo_config(self) -> dict[str, Any] | None:
        """Output of `npx expo config --json`, or None if it fails."""

        ...

    def expo_cli_available(self) -> bool: ...
