"""Project-type detection (Expo managed, Expo bare, React Native CLI).

Best effort: every failure becomes a warning and the decision tree keeps
going; when nothing is conclusive the project is treated as React Native CLI.
"""

from __future__ import annotations

from core.domain.errors import ProjectFileError
from core.domain.models import ProjectType
from core.interfaces.project import ProjectInspector
from core.interfaces.reporter import StatusReporter

EXPO_CONFIG_FILES = ("app.json", "app.config.js", "app.config.ts")
NATIVE_DIRS = ("ios", "android")

_FORCED_ALIASES: dict[str, ProjectType] = {
    "expo": ProjectType.EXPO_MANAGED,
    "managed": ProjectType.EXPO_MANAGED,
    "expo-managed": ProjectType.EXPO_MANAGED,
    "bare": ProjectType.EXPO_BARE,
    "expo-bare": ProjectType.EXPO_BARE,
    "rn": ProjectType.REACT_NATIVE_CLI,
    "cli": ProjectType.REACT_NATIVE_CLI,
    "rn-cli": ProjectType.REACT_NATIVE_CLI,
    "react-native": ProjectType.REACT_NATIVE_CLI,
    "react-native-cli": ProjectType.REACT_NATIVE_CLI,
}


def parse_forced_project_type(value: str | None) -> ProjectType | None:
    """Map a FORCE_PROJECT_TYPE value to a ProjectType (None if unknown/unset)."""

    if not value:
        return None
    return _FORCED_ALIASES.get(value.strip().lower().replace("_", "-"))


def _has_expo_dependency(package_json: dict) -> bool:
    for section in ("dependencies", "devDependencies"):
        deps = package_json.get(section)
        if isinstance(deps, dict) and "expo" in deps:
            return True
    return False


class ProjectTypeDetector:
    """Classifies the project found by a `ProjectInspector`."""

    def __init__(self, inspector: ProjectInspector, reporter: StatusReporter) -> None:
        self._inspector = inspector
        self._reporter = reporter

    def detect(self, forced: str | None = None) -> ProjectType:
        if forced:
            project_type = parse_forced_project_type(forced)
            if project_type is not None:
                self._reporter.info(f"Project type forced to {project_type.label()} (FORCE_PROJECT_TYPE)")
                return project_type
            self._reporter.warning(f"Ignoring unknown FORCE_PROJECT_TYPE value: {forced!r}")

        try:
            is_expo = self._is_expo()
        except Exception as exc:
            self._reporter.warning(f"Error detecting project type ({exc}), defaulting to React Native CLI")
            return ProjectType.REACT_NATIVE_CLI

        has_native_dirs = any(self._inspector.has_dir(name) for name in NATIVE_DIRS)
        if is_expo:
            if has_native_dirs:
                self._reporter.info("Detected as an Expo project (bare workflow)")
                return ProjectType.EXPO_BARE
            self._reporter.info("Detected as an Expo project (managed workflow)")
            return ProjectType.EXPO_MANAGED

        if has_native_dirs:
            self._reporter.info("Detected as a React Native CLI project")
        else:
            self._reporter.warning("Could not determine project type with certainty, defaulting to React Native CLI")
        return ProjectType.REACT_NATIVE_CLI

    def _is_expo(self) -> bool:
        try:
            package_json = self._inspector.read_package_json()
        except ProjectFileError:
            self._reporter.warning("Failed to parse package.json")
            package_json = None

        if package_json and _has_expo_dependency(package_json):
            if self._inspector.expo_cli_available():
                return True
            self._reporter.warning("Expo package found but expo CLI is not working")

        if not any(self._inspector.has_file(name) for name in EXPO_CONFIG_FILES):
            return False

        try:
            app_json = self._inspector.read_app_json()
        except ProjectFileError:
            app_json = None
        if app_json and app_json.get("expo"):
            return True

        if self._inspector.expo_cli_available():
            return True
        self._reporter.warning("Expo config files found but expo CLI is not working")
        return False
