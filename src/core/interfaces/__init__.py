"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: los servicios dependen de abstracciones y
  los tests sustituyen procesos y ficheros por fakes.
"""

from core.interfaces.devices import DeviceLister
from core.interfaces.process import ProcessRunner
from core.interfaces.project import ProjectInspector
from core.interfaces.reporter import StatusReporter

__all__ = [
    "DeviceLister",
    "ProcessRunner",
    "ProjectInspector",
    "StatusReporter",
]
