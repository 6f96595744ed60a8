"""Detección de dispositivos físicos con las herramientas de Apple y Google.

Fuentes:
- iOS: `xcrun devicectl list devices --json` (Xcode 15+), con
  `xcrun xctrace list devices` como respaldo.
- Android: `adb devices -l`.

Los parsers son funciones puras sobre el texto de salida para poder probarlos
sin dispositivos; `ToolchainDeviceLister` solo se encarga de invocar las
herramientas y de tragarse sus fallos.
"""

from __future__ import annotations

import json
import re
from typing import Any

from core.domain.errors import CommandError
from core.domain.models import DeviceInfo, Platform
from core.interfaces.devices import DeviceLister
from core.interfaces.process import ProcessRunner

DEVICECTL_LIST = ["xcrun", "devicectl", "list", "devices", "--json"]
XCTRACE_LIST = ["xcrun", "xctrace", "list", "devices"]
ADB_START_SERVER = ["adb", "start-server"]
ADB_DEVICES = ["adb", "devices", "-l"]

_XCTRACE_UDID = re.compile(r"\(([0-9a-fA-F]{40})\)")
_EMULATOR_PREFIX = "emulator-"


def _nested(data: dict[str, Any], *keys: str) -> Any:
    current: Any = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def _first_str(*values: Any) -> str | None:
    for value in values:
        if isinstance(value, str) and value:
            return value
    return None


def parse_devicectl_json(output: str) -> DeviceInfo | None:
    """First connected physical iOS device in devicectl's JSON listing.

    Reads the flat `platform`/`connectionState`/`deviceType` keys and falls
    back to devicectl's nested `hardwareProperties`/`connectionProperties`.
    """

    try:
        data = json.loads(output)
    except ValueError:
        return None

    devices = _nested(data, "result", "devices")
    if not isinstance(devices, list):
        return None

    for device in devices:
        if not isinstance(device, dict):
            continue
        platform = _first_str(device.get("platform"), _nested(device, "hardwareProperties", "platform"))
        state = _first_str(device.get("connectionState"), _nested(device, "connectionProperties", "tunnelState"))
        kind = _first_str(device.get("deviceType"), _nested(device, "hardwareProperties", "reality")) or ""
        identifier = _first_str(device.get("identifier"))

        if platform != "iOS" or state != "connected" or "physical" not in kind.lower():
            continue
        if not identifier:
            continue

        name = _first_str(device.get("name"), _nested(device, "deviceProperties", "name"))
        return DeviceInfo(platform=Platform.IOS, identifier=identifier, name=name)
    return None


def parse_xctrace_devices(output: str) -> DeviceInfo | None:
    """First line of `xctrace list devices` carrying a 40-hex UDID.

    Simulators are listed with dashed UUIDs and never match.
    """

    for line in output.splitlines():
        match = _XCTRACE_UDID.search(line)
        if not match:
            continue
        name = line.split("(", 1)[0].strip() or None
        return DeviceInfo(platform=Platform.IOS, identifier=match.group(1), name=name)
    return None


def parse_adb_devices(output: str) -> DeviceInfo | None:
    """First physical device in `adb devices -l` in the `device` state."""

    lines = output.splitlines()
    # Header: "List of devices attached"
    for raw_line in lines[1:]:
        parts = raw_line.split()
        if len(parts) < 2:
            continue
        serial, state = parts[0], parts[1]
        if state != "device" or serial.startswith(_EMULATOR_PREFIX):
            continue

        attrs = dict(part.split(":", 1) for part in parts[2:] if ":" in part)
        return DeviceInfo(platform=Platform.ANDROID, identifier=serial, name=attrs.get("model") or None)
    return None


class ToolchainDeviceLister(DeviceLister):
    """Lists devices by shelling out to xcrun and adb."""

    def __init__(self, process: ProcessRunner) -> None:
        self._process = process

    def find_ios(self) -> DeviceInfo | None:
        if not self._process.which("xcrun"):
            return None

        try:
            result = self._process.capture(DEVICECTL_LIST)
        except CommandError:
            # Xcode < 15 has no devicectl.
            pass
        else:
            device = parse_devicectl_json(result.stdout)
            if device:
                return device

        try:
            result = self._process.capture(XCTRACE_LIST)
        except CommandError:
            return None
        return parse_xctrace_devices(result.stdout)

    def find_android(self) -> DeviceInfo | None:
        if not self._process.which("adb"):
            return None

        try:
            self._process.capture(ADB_START_SERVER)
        except CommandError:
            pass

        try:
            result = self._process.capture(ADB_DEVICES)
        except CommandError:
            return None
        return parse_adb_devices(result.stdout)
