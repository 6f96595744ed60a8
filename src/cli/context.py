"""Wiring of concrete adapters for the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from adapters.device_tools import ToolchainDeviceLister
from adapters.process_runner import SubprocessRunner
from adapters.project_inspector import FileSystemProjectInspector
from cli.ui_components import ConsoleReporter
from core.config import AppSettings, load_settings
from core.services.device_runner import DeviceRunner


@dataclass
class CliContext:
    project_root: Path
    settings: AppSettings
    process: SubprocessRunner
    inspector: FileSystemProjectInspector
    lister: ToolchainDeviceLister
    reporter: ConsoleReporter

    def device_runner(self) -> DeviceRunner:
        return DeviceRunner(
            settings=self.settings,
            inspector=self.inspector,
            lister=self.lister,
            process=self.process,
            reporter=self.reporter,
            project_root=self.project_root,
        )


def build_context(project_root: Path | None = None, reporter: ConsoleReporter | None = None) -> CliContext:
    """Adapters for a project directory (the cwd by default)."""

    root = (project_root or Path.cwd()).resolve()
    settings = load_settings(root)
    process = SubprocessRunner(cwd=root)
    return CliContext(
        project_root=root,
        settings=settings,
        process=process,
        inspector=FileSystemProjectInspector(
            root,
            process,
            expo_config_timeout=settings.expo_config_timeout_seconds,
        ),
        lister=ToolchainDeviceLister(process),
        reporter=reporter or ConsoleReporter(),
    )
