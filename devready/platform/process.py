"""Async subprocess execution with Result-based error handling.

Wraps asyncio.create_subprocess_exec so callers get captured output or a
structured error instead of exceptions.

No timeout is applied: a child that never exits keeps the awaiting
coroutine suspended.

Usage:
    result = await run("xcrun --version")
    match result:
        case Ok(output):
            print(output.stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import asyncio
import shlex
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from devready.core.result import Err, Ok, Result

__all__ = ["ProcessOutput", "ProcessError", "split_command", "run"]


@dataclass(frozen=True, slots=True)
class ProcessOutput:
    """Captured output of a command that exited with status 0."""

    stdout: str
    stderr: str


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code of the process, -1 if it could not be spawned.
        stdout: Standard output (may be empty).
        stderr: Standard error, or the OS error text on spawn failure.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        """Format error for display."""
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def split_command(cmd: Sequence[str] | str) -> list[str]:
    """Turn a command line into an argument list.

    Strings are split with shell quoting rules, sequences are copied.
    """
    if isinstance(cmd, str):
        return shlex.split(cmd)
    return list(cmd)


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


async def run(
    cmd: Sequence[str] | str,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Result[ProcessOutput, ProcessError]:
    """Execute a command and return its output or an error.

    Args:
        cmd: Command line or argument list.
        cwd: Working directory (inherits the current one if None).
        env: Environment variables (uses current env if None).

    Returns:
        Ok(ProcessOutput) on exit status 0, Err(ProcessError) otherwise.
    """
    args = split_command(cmd)
    if not args:
        return Err(ProcessError(command=(), returncode=-1, stdout="", stderr="empty command"))

    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            cwd=str(cwd) if cwd is not None else None,
            env=dict(env) if env is not None else None,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(args), returncode=-1, stdout="", stderr=str(e)))

    stdout_bytes, stderr_bytes = await proc.communicate()
    stdout = _decode(stdout_bytes)
    stderr = _decode(stderr_bytes)

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(args),
                returncode=proc.returncode if proc.returncode is not None else -1,
                stdout=stdout,
                stderr=stderr,
            )
        )

    return Ok(ProcessOutput(stdout=stdout, stderr=stderr))
