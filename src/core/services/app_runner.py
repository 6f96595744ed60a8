"""Builds and runs the `npx expo run:*` / `npx react-native run-*` invocation.

The child inherits the terminal. A failing `expo run:*` is retried once with
the equivalent `react-native run-*` command; every other failure surfaces the
child's exit code through `CommandExecutionError`.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.errors import (
    EXIT_GENERIC_ERROR,
    EXIT_NPX_MISSING_ANDROID,
    EXIT_NPX_MISSING_IOS,
    CommandExecutionError,
    MissingToolError,
)
from core.domain.models import DeviceConfig, DeviceInfo, Platform, ProjectType
from core.interfaces.process import ProcessRunner
from core.interfaces.reporter import StatusReporter

NPX = "npx"

_RN_SUBCOMMANDS = {"run:ios": "run-ios", "run:android": "run-android"}
_RN_DEVICE_FLAGS = {"run:ios": "--udid", "run:android": "--deviceId"}


def build_ios_args(project_type: ProjectType, device: DeviceInfo, config: DeviceConfig) -> list[str]:
    """Arguments after `npx` for running on an iOS device."""

    if project_type.is_expo:
        args = ["expo", "run:ios", "--device", device.identifier]
    else:
        args = ["react-native", "run-ios", "--udid", device.identifier]

    if config.ios_scheme:
        args += ["--scheme", config.ios_scheme]
    if config.ios_configuration:
        args += ["--configuration", config.ios_configuration]
    return args


def build_android_args(project_type: ProjectType, device: DeviceInfo, config: DeviceConfig) -> list[str]:
    """Arguments after `npx` for running on an Android device."""

    if project_type.is_expo:
        args = ["expo", "run:android", "--device", device.identifier]
    else:
        args = ["react-native", "run-android", "--deviceId", device.identifier]

    if config.android_variant:
        args += ["--variant", config.android_variant]
    return args


def to_react_native_args(expo_args: list[str]) -> list[str] | None:
    """Translate `expo run:*` arguments to `react-native run-*`.

    `--device` becomes `--udid`/`--deviceId`; the other flags are shared.
    Returns None for anything that is not an `expo run:*` invocation.
    """

    if len(expo_args) < 2 or expo_args[0] != "expo" or expo_args[1] not in _RN_SUBCOMMANDS:
        return None

    subcommand = expo_args[1]
    translated = ["react-native", _RN_SUBCOMMANDS[subcommand]]
    for arg in expo_args[2:]:
        translated.append(_RN_DEVICE_FLAGS[subcommand] if arg == "--device" else arg)
    return translated


class AppRunner:
    """Launches the app on a detected device."""

    def __init__(
        self,
        config: DeviceConfig,
        project_type: ProjectType,
        process: ProcessRunner,
        reporter: StatusReporter,
        *,
        cwd: Path | None = None,
    ) -> None:
        self._config = config
        self._project_type = project_type
        self._process = process
        self._reporter = reporter
        self._cwd = cwd

    def run_on_device(self, device: DeviceInfo) -> None:
        if device.platform is Platform.IOS:
            self.run_ios(device)
        else:
            self.run_android(device)

    def run_ios(self, device: DeviceInfo) -> None:
        if device.platform is not Platform.IOS:
            raise ValueError("iOS device UDID is required")

        self._reporter.separator()
        self._reporter.success("iOS device found! Preparing to run...")
        self._reporter.device(f"Device UDID: {device.identifier}")
        if self._config.ios_scheme:
            self._reporter.device(f"Scheme: {self._config.ios_scheme}")
        if self._config.ios_configuration:
            self._reporter.device(f"Configuration: {self._config.ios_configuration}")

        self._require_npx(EXIT_NPX_MISSING_IOS)
        args = build_ios_args(self._project_type, device, self._config)
        self._execute(args)

    def run_android(self, device: DeviceInfo) -> None:
        if device.platform is not Platform.ANDROID:
            raise ValueError("Android device Serial is required")

        self._reporter.separator()
        self._reporter.success("Android device found! Preparing to run...")
        self._reporter.device(f"Device Serial: {device.identifier}")
        if self._config.android_variant:
            self._reporter.device(f"Variant: {self._config.android_variant}")

        self._require_npx(EXIT_NPX_MISSING_ANDROID)
        args = build_android_args(self._project_type, device, self._config)
        self._execute(args)

    def _require_npx(self, exit_code: int) -> None:
        if not self._process.which(NPX):
            self._reporter.error("npx is required")
            raise MissingToolError(NPX, exit_code=exit_code)

    def _execute(self, args: list[str]) -> None:
        self._reporter.step(f"Running {' '.join(args[:2])}...")
        code = self._spawn(args)
        if code == 0:
            return

        fallback = to_react_native_args(args)
        if fallback is not None:
            self._reporter.warning(f"{' '.join(args[:2])} failed (exit code: {code}), retrying with {' '.join(fallback[:2])}...")
            args = fallback
            code = self._spawn(args)
            if code == 0:
                return

        self._reporter.error(f"Command execution failed (exit code: {code})")
        raise CommandExecutionError([NPX, *args], exit_code=code)

    def _spawn(self, args: list[str]) -> int:
        command = [NPX, *args]
        try:
            return self._process.stream(command, cwd=self._cwd)
        except OSError as exc:
            self._reporter.error(f"Command execution error: {exc}")
            raise CommandExecutionError(command, exit_code=EXIT_GENERIC_ERROR, reason=str(exc)) from exc
