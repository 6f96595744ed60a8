"""Errors that end a run with a specific process exit code."""

from __future__ import annotations

EXIT_GENERIC_ERROR = 1
EXIT_NO_DEVICE = 2
EXIT_NPX_MISSING_IOS = 10
EXIT_NPX_MISSING_ANDROID = 11


class DeviceRunnerError(Exception):
    """Base error; `exit_code` is what the CLI exits with."""

    exit_code: int = EXIT_GENERIC_ERROR

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class NoDeviceError(DeviceRunnerError):
    exit_code = EXIT_NO_DEVICE


class MissingToolError(DeviceRunnerError):
    """A required executable (e.g. `npx`) is not on PATH."""

    def __init__(self, tool: str, *, exit_code: int) -> None:
        super().__init__(f"{tool} is required", exit_code=exit_code)
        self.tool = tool


class CommandExecutionError(DeviceRunnerError):
    """The build/run child process failed or could not be spawned."""

    def __init__(self, command: list[str], *, exit_code: int, reason: str | None = None) -> None:
        detail = reason or f"exit code: {exit_code}"
        # Killed by a signal: subprocess reports a negative code.
        code = exit_code if exit_code > 0 else EXIT_GENERIC_ERROR
        super().__init__(f"Command execution failed ({detail})", exit_code=code)
        self.command = list(command)


class CommandError(Exception):
    """A captured helper command failed (missing binary, timeout, non-zero exit).

    Detection code catches this and degrades to "not found".
    """

    def __init__(self, command: list[str], message: str, *, returncode: int | None = None) -> None:
        super().__init__(f"{' '.join(command)}: {message}")
        self.command = list(command)
        self.returncode = returncode


class ProjectFileError(Exception):
    """A project file exists but could not be read or parsed."""

    def __init__(self, filename: str, message: str) -> None:
        super().__init__(f"{filename}: {message}")
        self.filename = filename
