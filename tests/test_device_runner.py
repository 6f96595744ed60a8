"""
Tests for run orchestration: device choice and the no-device path.
"""

import pytest

from core.config import AppSettings
from core.domain.errors import NoDeviceError
from core.domain.models import DetectedDevices, DeviceInfo, Platform
from core.services.device_detection import find_devices
from core.services.device_runner import DeviceRunner, choose_device

IPHONE = DeviceInfo(platform=Platform.IOS, identifier="UDID-1")
PIXEL = DeviceInfo(platform=Platform.ANDROID, identifier="SERIAL-1")


def _device_runner(inspector, lister, process, reporter, **env):
    return DeviceRunner(
        settings=AppSettings(_env_file=None, **env),
        inspector=inspector,
        lister=lister,
        process=process,
        reporter=reporter,
    )


class TestChooseDevice:
    @pytest.mark.parametrize(("prefer", "expected"), [(Platform.IOS, IPHONE), (Platform.ANDROID, PIXEL)])
    def test_both_connected_uses_preference(self, prefer, expected):
        assert choose_device(DetectedDevices(ios=IPHONE, android=PIXEL), prefer) == expected

    def test_single_device_ignores_preference(self):
        assert choose_device(DetectedDevices(android=PIXEL), Platform.IOS) == PIXEL
        assert choose_device(DetectedDevices(ios=IPHONE), Platform.ANDROID) == IPHONE

    def test_nothing_connected(self):
        assert choose_device(DetectedDevices(), Platform.IOS) is None


def test_find_devices_reports_each_platform(lister, reporter):
    lister.android = PIXEL

    devices = find_devices(lister, reporter)

    assert devices == DetectedDevices(android=PIXEL)
    assert reporter.texts("success") == ["Android device found: SERIAL-1"]
    assert reporter.texts("info") == ["No iOS device detected"]
    assert reporter.messages[-1] == ("separator", "")


class TestDeviceRunner:
    def test_runs_preferred_platform_when_both_connected(self, inspector, lister, process, reporter):
        lister.ios, lister.android = IPHONE, PIXEL
        process.add_tool("npx")
        inspector.dirs.add("android")

        device = _device_runner(inspector, lister, process, reporter).run(prefer=Platform.ANDROID)

        assert device == PIXEL
        assert process.streamed == [["npx", "react-native", "run-android", "--deviceId", "SERIAL-1", "--variant", "debug"]]
        assert "Both devices connected. Running Android first." in reporter.texts("info")
        assert reporter.messages[0] == ("header", "")

    def test_forced_project_type_drives_command(self, inspector, lister, process, reporter):
        lister.ios = IPHONE
        process.add_tool("npx")
        inspector.files["package.json"] = {"name": "demo"}

        _device_runner(inspector, lister, process, reporter, force_project_type="expo-bare").run()

        assert process.streamed == [
            ["npx", "expo", "run:ios", "--device", "UDID-1", "--scheme", "demo", "--configuration", "Debug"]
        ]

    def test_no_device_raises_exit_code_2(self, inspector, lister, process, reporter):
        with pytest.raises(NoDeviceError) as excinfo:
            _device_runner(inspector, lister, process, reporter).run()

        assert excinfo.value.exit_code == 2
        assert reporter.texts("error") == ["No physical devices connected."]
        assert "Android: Make sure USB debugging is enabled" in reporter.texts("info")
        assert process.streamed == []

    def test_resolve_does_not_launch(self, inspector, lister, process, reporter):
        lister.ios = IPHONE

        context = _device_runner(inspector, lister, process, reporter).resolve()

        assert context.config.android_module == "app"
        assert process.streamed == []
