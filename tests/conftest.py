"""Shared fakes for the adapter Protocols."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

import pytest

from core.domain.errors import CommandError, ProjectFileError
from core.domain.models import CommandResult, DeviceInfo

CONFIG_ENV_VARS = (
    "IOS_SCHEME",
    "IOS_CONFIGURATION",
    "IOS_WORKSPACE",
    "IOS_DERIVED_DATA",
    "IOS_BUNDLE_ID",
    "AOS_APP_ID",
    "AOS_MODULE",
    "AOS_VARIANT",
    "FORCE_PROJECT_TYPE",
    "EXPO_CONFIG_TIMEOUT_SECONDS",
)


class FakeProcess:
    """ProcessRunner fake: canned outputs per command, recorded calls."""

    def __init__(self) -> None:
        self.tools: dict[str, str] = {}
        self.outputs: dict[tuple[str, ...], CommandResult | Exception] = {}
        self.stream_codes: list[int | Exception] = []
        self.captured: list[list[str]] = []
        self.streamed: list[list[str]] = []
        self.timeouts: list[float | None] = []

    def add_tool(self, *names: str) -> "FakeProcess":
        for name in names:
            self.tools[name] = f"/usr/bin/{name}"
        return self

    def on(self, args: Sequence[str], stdout: str = "", *, returncode: int = 0) -> "FakeProcess":
        key = tuple(args)
        if returncode:
            self.outputs[key] = CommandError(list(args), "failed", returncode=returncode)
        else:
            self.outputs[key] = CommandResult(returncode=0, stdout=stdout)
        return self

    def which(self, name: str) -> str | None:
        return self.tools.get(name)

    def capture(self, args: Sequence[str], *, timeout: float | None = None) -> CommandResult:
        self.captured.append(list(args))
        self.timeouts.append(timeout)
        outcome = self.outputs.get(tuple(args))
        if outcome is None:
            raise CommandError(list(args), "command not found")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def stream(self, args: Sequence[str], *, cwd: Path | None = None) -> int:
        self.streamed.append(list(args))
        outcome = self.stream_codes.pop(0) if self.stream_codes else 0
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeInspector:
    """ProjectInspector fake over in-memory files."""

    def __init__(self) -> None:
        self.files: dict[str, Any] = {}
        self.dirs: set[str] = set()
        self.expo_config: dict[str, Any] | None = None
        self.expo_cli = True

    def has_file(self, name: str) -> bool:
        return name in self.files

    def has_dir(self, name: str) -> bool:
        return name in self.dirs

    def _read(self, name: str) -> dict[str, Any] | None:
        if name not in self.files:
            return None
        content = self.files[name]
        if isinstance(content, str):
            raise ProjectFileError(name, "invalid JSON")
        return content

    def read_package_json(self) -> dict[str, Any] | None:
        return self._read("package.json")

    def read_app_json(self) -> dict[str, Any] | None:
        return self._read("app.json")

    def read_expo_config(self) -> dict[str, Any] | None:
        return self.expo_config

    def expo_cli_available(self) -> bool:
        return self.expo_cli


class FakeLister:
    def __init__(self, ios: DeviceInfo | None = None, android: DeviceInfo | None = None) -> None:
        self.ios = ios
        self.android = android

    def find_ios(self) -> DeviceInfo | None:
        return self.ios

    def find_android(self) -> DeviceInfo | None:
        return self.android


class RecordingReporter:
    """StatusReporter fake keeping (level, message) pairs."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def _record(self, level: str, message: str = "") -> None:
        self.messages.append((level, message))

    def header(self) -> None:
        self._record("header")

    def step(self, message: str) -> None:
        self._record("step", message)

    def success(self, message: str) -> None:
        self._record("success", message)

    def warning(self, message: str) -> None:
        self._record("warning", message)

    def error(self, message: str) -> None:
        self._record("error", message)

    def info(self, message: str) -> None:
        self._record("info", message)

    def device(self, message: str) -> None:
        self._record("device", message)

    def separator(self) -> None:
        self._record("separator")

    def texts(self, level: str) -> list[str]:
        return [message for lvl, message in self.messages if lvl == level]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """No config variable or user-level .env leaks into a test."""

    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture
def process() -> FakeProcess:
    return FakeProcess()


@pytest.fixture
def inspector() -> FakeInspector:
    return FakeInspector()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def project_dir(tmp_path: Path):
    """Factory writing JSON/text files and directories into a temp project."""

    root = tmp_path / "project"
    root.mkdir()

    def _make(files: dict[str, Any] | None = None, dirs: Sequence[str] = ()) -> Path:
        for name, content in (files or {}).items():
            text = content if isinstance(content, str) else json.dumps(content)
            (root / name).write_text(text, encoding="utf-8")
        for name in dirs:
            (root / name).mkdir(exist_ok=True)
        return root

    return _make


@pytest.fixture
def lister() -> FakeLister:
    return FakeLister()
