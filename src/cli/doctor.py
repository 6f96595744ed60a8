"""Doctor command for environment diagnostics."""

from __future__ import annotations

from typing import Callable

from rich.table import Table

from cli.context import build_context
from cli.errors import exit_on_error
from cli.ui_components import build_config_table, build_devices_table
from core.config import get_user_env_file

REQUIRED_TOOLS: tuple[tuple[str, str], ...] = (
    ("xcrun", "iOS device detection (Xcode command line tools)"),
    ("adb", "Android device detection (platform-tools)"),
    ("npx", "Running expo / react-native (Node.js)"),
)


def _tools_table(which: Callable[[str], str | None]) -> Table:
    table = Table(title="React Native Device Runner Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    for tool, purpose in REQUIRED_TOOLS:
        path = which(tool)
        if path:
            table.add_row(tool, "OK", path)
        else:
            table.add_row(tool, "MISSING", purpose)
    return table


def doctor() -> None:
    """Check tools, project type, effective config and connected devices without running anything."""

    with exit_on_error():
        context = build_context()
        console = context.reporter.console
        console.print(_tools_table(context.process.which))

        runner = context.device_runner()
        resolved = runner.resolve()

    console.print(f"\nProject type: [bold]{resolved.project_type.label()}[/bold]")
    console.print(f"Project root: {context.project_root}")
    console.print(f"User config:  {get_user_env_file()}\n", highlight=False)
    console.print(build_config_table(resolved.config))

    devices = runner.detect()
    console.print(build_devices_table(devices))

    if not (devices.ios or devices.android):
        console.print(
            "\n[yellow]Note:[/yellow] iOS devices must trust this Mac in Xcode; Android devices need USB debugging enabled."
        )
