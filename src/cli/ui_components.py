"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- `ConsoleReporter` es la implementación real de `StatusReporter` que reciben
  los servicios del Core.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import DetectedDevices, DeviceConfig
from core.interfaces.reporter import StatusReporter


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("🚀 React Native Device Runner", style="bold white")
    subtitle = Text("Auto Device Detection & Runner Script", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(0, 4)))
    console.print()


class ConsoleReporter(StatusReporter):
    """Status lines with an icon and colour per level."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _line(self, icon: str, style: str, message: str) -> None:
        self.console.print(Text.assemble((icon, style), " ", message))

    def header(self) -> None:
        print_banner(self.console)

    def step(self, message: str) -> None:
        self._line("📋", "blue", message)

    def success(self, message: str) -> None:
        self._line("✅", "green", message)

    def warning(self, message: str) -> None:
        self._line("⚠️", "yellow", message)

    def error(self, message: str) -> None:
        self._line("❌", "red", message)

    def info(self, message: str) -> None:
        self._line("ℹ️", "magenta", message)

    def device(self, message: str) -> None:
        self._line("📱", "cyan", message)

    def separator(self) -> None:
        self.console.rule(style="cyan")


def build_config_table(config: DeviceConfig) -> Table:
    """Tabla con la config efectiva (entorno + proyecto + defaults)."""

    table = Table(title="Effective configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for field, value in config.model_dump().items():
        table.add_row(field, value or "-")
    return table


def build_devices_table(devices: DetectedDevices) -> Table:
    table = Table(title="Connected devices")
    table.add_column("Platform", style="cyan", no_wrap=True)
    table.add_column("Identifier", style="white")
    table.add_column("Name", style="magenta")
    for label, device in (("iOS", devices.ios), ("Android", devices.android)):
        if device is None:
            table.add_row(label, "-", "not detected")
        else:
            table.add_row(label, device.identifier, device.name or "")
    return table
