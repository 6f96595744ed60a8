"""Contrato para las líneas de estado que ve el usuario.

Por qué:
- Mantiene los servicios libres de detalles de consola (Rich); la CLI
  inyecta la implementación real y los tests una que graba mensajes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StatusReporter(Protocol):
    def header(self) -> None: ...

    def step(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def device(self, message: str) -> None: ...

    def separator(self) -> None: ...
