"""Contrato de listado de dispositivos físicos."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import DeviceInfo


@runtime_checkable
class DeviceLister(Protocol):
    """Finds the first connected physical device per platform.

    Reglas de diseño:
    - Nunca lanza excepciones: cualquier fallo de las herramientas es "no encontrado".
    """

    def find_ios(self) -> DeviceInfo | None: ...

    def find_android(self) -> DeviceInfo | None: ...
