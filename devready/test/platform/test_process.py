"""Tests for devready.platform.process module."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest

from devready.core.result import Err, Ok
from devready.platform.process import ProcessError, run, split_command


class TestProcessError:
    """Test ProcessError dataclass."""

    def test_str_short_command(self) -> None:
        error = ProcessError(command=("xcrun", "--version"), returncode=1, stdout="", stderr="")
        assert str(error) == "xcrun --version failed (exit 1)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(
            command=("xcrun", "simctl", "list", "devices", "--json"),
            returncode=72,
            stdout="",
            stderr="error",
        )
        assert str(error) == "xcrun simctl list ... failed (exit 72)"


class TestSplitCommand:
    def test_string(self) -> None:
        assert split_command("npm list --json") == ["npm", "list", "--json"]

    def test_quoted(self) -> None:
        assert split_command('"/opt/Android SDK/sdkmanager" --version') == [
            "/opt/Android SDK/sdkmanager",
            "--version",
        ]

    def test_sequence_copied(self) -> None:
        args = ["node", "-v"]
        result = split_command(args)
        assert result == args
        assert result is not args


class TestRun:
    """Test run coroutine against the running interpreter."""

    @pytest.mark.asyncio
    async def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = await run([sys.executable, "-c", "print('hello')"], cwd=tmp_path)
        assert isinstance(result, Ok)
        assert "hello" in result.value.stdout

    @pytest.mark.asyncio
    async def test_stderr_captured_on_success(self, tmp_path: Path) -> None:
        result = await run(
            [sys.executable, "-c", "import sys; sys.stderr.write('warn'); print('ok')"],
            cwd=tmp_path,
        )
        assert isinstance(result, Ok)
        assert result.value.stderr == "warn"

    @pytest.mark.asyncio
    async def test_failure_returns_error(self, tmp_path: Path) -> None:
        result = await run([sys.executable, "-c", "import sys; sys.exit(42)"], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == 42

    @pytest.mark.asyncio
    async def test_failure_keeps_output(self, tmp_path: Path) -> None:
        result = await run(
            [sys.executable, "-c", "import sys; print('out'); sys.stderr.write('err'); sys.exit(1)"],
            cwd=tmp_path,
        )
        assert isinstance(result, Err)
        assert "out" in result.error.stdout
        assert "err" in result.error.stderr

    @pytest.mark.asyncio
    async def test_command_not_found(self, tmp_path: Path) -> None:
        result = await run(["nonexistent_command_12345"], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert len(result.error.stderr) > 0

    @pytest.mark.asyncio
    async def test_empty_command(self) -> None:
        result = await run("")
        assert isinstance(result, Err)

    @pytest.mark.asyncio
    async def test_uses_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "marker.txt").write_text("content")
        result = await run([sys.executable, "-c", "import os; print(os.listdir('.'))"], cwd=tmp_path)
        assert isinstance(result, Ok)
        assert "marker.txt" in result.value.stdout

    @pytest.mark.asyncio
    async def test_no_built_in_timeout(self, tmp_path: Path) -> None:
        task = asyncio.create_task(
            run([sys.executable, "-c", "import time; time.sleep(5)"], cwd=tmp_path)
        )

        done, pending = await asyncio.wait({task}, timeout=0.5)
        assert not done
        assert pending == {task}

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
