"""
Tests for the subprocess-backed ProcessRunner.

They run the current interpreter as the external command so no xcrun/adb/npx
is needed.
"""

import sys

import pytest

from adapters.process_runner import SubprocessRunner
from core.domain.errors import CommandError


def _python(code):
    return [sys.executable, "-c", code]


class TestCapture:
    def test_success_returns_output(self):
        result = SubprocessRunner().capture(_python("print('List of devices attached')"))

        assert result.ok
        assert result.returncode == 0
        assert result.stdout.strip() == "List of devices attached"

    def test_non_zero_exit_raises_with_returncode(self):
        code = "import sys; sys.stderr.write('no devices'); sys.exit(3)"

        with pytest.raises(CommandError) as excinfo:
            SubprocessRunner().capture(_python(code))

        assert excinfo.value.returncode == 3
        assert "no devices" in str(excinfo.value)

    def test_timeout_raises_command_error(self):
        with pytest.raises(CommandError) as excinfo:
            SubprocessRunner().capture(_python("import time; time.sleep(5)"), timeout=0.2)

        assert "timed out" in str(excinfo.value)
        assert excinfo.value.returncode is None

    def test_missing_binary_raises_command_error(self):
        with pytest.raises(CommandError) as excinfo:
            SubprocessRunner().capture(["rn-device-runner-no-such-tool", "devices"])

        assert "command not found" in str(excinfo.value)

    def test_invalid_utf8_is_replaced(self):
        code = "import sys; sys.stdout.buffer.write(b'model:Pixel\\xff\\n')"

        result = SubprocessRunner().capture(_python(code))

        assert result.stdout == "model:Pixel�\n"

    def test_runs_in_configured_directory(self, tmp_path):
        result = SubprocessRunner(cwd=tmp_path).capture(_python("import os; print(os.getcwd())"))

        assert result.stdout.strip() == str(tmp_path)


class TestStreamAndWhich:
    def test_stream_returns_exit_code(self):
        assert SubprocessRunner().stream(_python("import sys; sys.exit(0)")) == 0
        assert SubprocessRunner().stream(_python("import sys; sys.exit(7)")) == 7

    def test_stream_missing_binary_raises_oserror(self):
        with pytest.raises(OSError):
            SubprocessRunner().stream(["rn-device-runner-no-such-tool"])

    def test_which(self):
        runner = SubprocessRunner()

        assert runner.which("rn-device-runner-no-such-tool") is None
        assert runner.which(sys.executable) is not None
