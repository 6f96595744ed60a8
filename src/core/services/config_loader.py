"""Merge of build/run configuration from every source.

Priority, highest first:
1. process environment (then `.env`), via `AppSettings`;
2. project config: `app.json` -> `expo`, `npx expo config --json`, `package.json`;
3. defaults.

Each layer only fills fields the previous ones left unset. Failures never
abort the run; they are reported as warnings.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from core.config import AppSettings
from core.domain.errors import ProjectFileError
from core.domain.models import DeviceConfig, ExpoConfig, ProjectType
from core.interfaces.project import ProjectInspector
from core.interfaces.reporter import StatusReporter

DEFAULTS: dict[str, str] = {
    "ios_configuration": "Debug",
    "ios_derived_data": ".build/ios",
    "android_module": "app",
    "android_variant": "debug",
}

# Expo `extra` key -> DeviceConfig field
EXPO_EXTRA_KEYS: dict[str, str] = {
    "IOS_SCHEME": "ios_scheme",
    "IOS_CONFIGURATION": "ios_configuration",
    "IOS_WORKSPACE": "ios_workspace",
    "IOS_DERIVED_DATA": "ios_derived_data",
    "IOS_BUNDLE_ID": "ios_bundle_id",
    "AOS_APP_ID": "android_app_id",
    "AOS_MODULE": "android_module",
    "AOS_VARIANT": "android_variant",
}


def config_from_settings(settings: AppSettings) -> DeviceConfig:
    return DeviceConfig(
        ios_scheme=settings.ios_scheme,
        ios_configuration=settings.ios_configuration,
        ios_workspace=settings.ios_workspace,
        ios_derived_data=settings.ios_derived_data,
        ios_bundle_id=settings.ios_bundle_id,
        android_app_id=settings.aos_app_id,
        android_module=settings.aos_module,
        android_variant=settings.aos_variant,
    )


def merge_expo_config(config: DeviceConfig, expo: ExpoConfig) -> DeviceConfig:
    values = {field: expo.extra_value(key) for key, field in EXPO_EXTRA_KEYS.items()}
    merged = config.fill_missing(**values)
    return merged.fill_missing(
        ios_bundle_id=expo.ios.bundle_identifier if expo.ios else None,
        android_app_id=expo.android.package if expo.android else None,
    )


def apply_defaults(config: DeviceConfig) -> DeviceConfig:
    return config.fill_missing(**DEFAULTS)


class ConfigLoader:
    """Builds the `DeviceConfig` for one run."""

    def __init__(self, inspector: ProjectInspector, reporter: StatusReporter) -> None:
        self._inspector = inspector
        self._reporter = reporter

    def load(self, settings: AppSettings, project_type: ProjectType) -> DeviceConfig:
        self._reporter.step("Initializing environment variables...")
        if self._inspector.has_file(".env"):
            # Values already merged into `settings` by pydantic-settings.
            self._reporter.step("Loading .env file...")
            self._reporter.success(".env file loaded successfully")
        config = config_from_settings(settings)
        self._reporter.success("Environment variables initialized")

        if project_type.is_expo:
            config = self._load_expo(config)
        else:
            config = self._load_react_native(config)

        return apply_defaults(config)

    def _load_expo(self, config: DeviceConfig) -> DeviceConfig:
        self._reporter.step("Reading Expo configuration...")

        try:
            app_json = self._inspector.read_app_json()
        except ProjectFileError:
            self._reporter.warning("Failed to parse app.json, trying alternative method")
            app_json = None

        expo_section = app_json.get("expo") if app_json else None
        if isinstance(expo_section, dict):
            merged = self._merge_expo_payload(config, expo_section)
            if merged is not None:
                self._reporter.success("Expo configuration loaded from app.json")
                return merged

        payload = self._inspector.read_expo_config()
        if payload is not None:
            merged = self._merge_expo_payload(config, payload)
            if merged is not None:
                self._reporter.success("Expo configuration loaded successfully")
                return merged

        self._reporter.warning("Failed to run expo config command, trying package.json")
        return self._load_package_name(config)

    def _merge_expo_payload(self, config: DeviceConfig, payload: dict[str, Any]) -> DeviceConfig | None:
        try:
            expo = ExpoConfig.model_validate(payload)
        except ValidationError:
            return None
        return merge_expo_config(config, expo)

    def _load_react_native(self, config: DeviceConfig) -> DeviceConfig:
        self._reporter.step("Reading React Native configuration...")
        # Info.plist / build.gradle are not parsed; env vars cover app ids.
        config = self._load_package_name(config, announce=False)
        self._reporter.success("React Native configuration loaded successfully")
        return config

    def _load_package_name(self, config: DeviceConfig, *, announce: bool = True) -> DeviceConfig:
        try:
            package_json = self._inspector.read_package_json()
        except ProjectFileError:
            self._reporter.warning("Failed to load configuration from package.json")
            return config

        if package_json is None:
            return config

        name = package_json.get("name")
        if isinstance(name, str):
            config = config.fill_missing(ios_scheme=name)
        if announce:
            self._reporter.success("Configuration loaded from package.json")
        return config
