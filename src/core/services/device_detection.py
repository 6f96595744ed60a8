"""Device search across both platforms, with status output."""

from __future__ import annotations

from core.domain.models import DetectedDevices
from core.interfaces.devices import DeviceLister
from core.interfaces.reporter import StatusReporter


def find_devices(lister: DeviceLister, reporter: StatusReporter) -> DetectedDevices:
    reporter.step("Searching for connected devices...")

    ios = lister.find_ios()
    android = lister.find_android()

    if ios:
        reporter.success(f"iOS device found: {ios.identifier}")
    else:
        reporter.info("No iOS device detected")

    if android:
        reporter.success(f"Android device found: {android.identifier}")
    else:
        reporter.info("No Android device detected")

    reporter.separator()
    return DetectedDevices(ios=ios, android=android)
