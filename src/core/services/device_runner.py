"""Run orchestration: detect devices, pick one, launch the app.

The CLI only wires adapters together and translates `DeviceRunnerError` into
exit codes; everything a run decides lives here so that other entry-points
(tests, scripts) can reuse it without the console.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.config import AppSettings
from core.domain.errors import NoDeviceError
from core.domain.models import DetectedDevices, DeviceConfig, DeviceInfo, Platform, ProjectType
from core.interfaces.devices import DeviceLister
from core.interfaces.process import ProcessRunner
from core.interfaces.project import ProjectInspector
from core.interfaces.reporter import StatusReporter
from core.services.app_runner import AppRunner
from core.services.config_loader import ConfigLoader
from core.services.device_detection import find_devices
from core.services.project_detection import ProjectTypeDetector


def choose_device(devices: DetectedDevices, prefer: Platform) -> DeviceInfo | None:
    """Preferred platform when both are connected, otherwise whichever is."""

    if devices.ios and devices.android:
        return devices.for_platform(prefer)
    return devices.ios or devices.android


@dataclass
class RunContext:
    """What a run resolved before launching anything."""

    project_type: ProjectType
    config: DeviceConfig


class DeviceRunner:
    """Ties together project detection, config, device detection and the runner."""

    def __init__(
        self,
        *,
        settings: AppSettings,
        inspector: ProjectInspector,
        lister: DeviceLister,
        process: ProcessRunner,
        reporter: StatusReporter,
        project_root: Path | None = None,
    ) -> None:
        self._settings = settings
        self._inspector = inspector
        self._lister = lister
        self._process = process
        self._reporter = reporter
        self._project_root = project_root

    def resolve(self) -> RunContext:
        project_type = ProjectTypeDetector(self._inspector, self._reporter).detect(
            forced=self._settings.force_project_type
        )
        config = ConfigLoader(self._inspector, self._reporter).load(self._settings, project_type)
        return RunContext(project_type=project_type, config=config)

    def detect(self) -> DetectedDevices:
        return find_devices(self._lister, self._reporter)

    def run(self, prefer: Platform = Platform.IOS) -> DeviceInfo:
        """Launch the app; returns the device used.

        Raises `NoDeviceError` when nothing is connected and the errors of
        `AppRunner` when the launch fails.
        """

        self._reporter.header()
        context = self.resolve()
        devices = self.detect()

        device = choose_device(devices, prefer)
        if device is None:
            self._reporter.error("No physical devices connected.")
            self._reporter.info("iOS: Check device trust settings in Xcode")
            self._reporter.info("Android: Make sure USB debugging is enabled")
            raise NoDeviceError("No physical devices connected.")

        if devices.ios and devices.android:
            self._reporter.info(f"Both devices connected. Running {device.platform.label()} first.")

        runner = AppRunner(
            context.config,
            context.project_type,
            self._process,
            self._reporter,
            cwd=self._project_root,
        )
        runner.run_on_device(device)
        return device
