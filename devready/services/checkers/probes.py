# SPDX-License-Identifier: MIT
"""Probe primitives.

A probe answers one "is X present" question and never raises:
- CommandProbe: run a command, require success and non-empty stdout
- PathsProbe: require that every path exists
- AllOf: logical AND of several probes
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from devready.core.result import Err, Result
from devready.platform import files, process
from devready.platform.process import ProcessError, ProcessOutput, split_command
from devready.services.checkers.base import Absent, Present, ProbeOutcome

logger = logging.getLogger(__name__)

__all__ = [
    "CommandRunner",
    "DefaultCommandRunner",
    "Probe",
    "CommandProbe",
    "PathsProbe",
    "AllOf",
    "all_of",
]


class CommandRunner(Protocol):
    """Protocol for running external commands.

    This abstraction allows faking subprocess calls in tests.
    """

    async def run(
        self, cmd: Sequence[str] | str, *, cwd: Path | None = None
    ) -> Result[ProcessOutput, ProcessError]:
        """Run a command to completion.

        Args:
            cmd: Command line or argument list
            cwd: Working directory (optional)

        Returns:
            Ok(ProcessOutput) on exit status 0, Err(ProcessError) otherwise
        """
        ...


class DefaultCommandRunner:
    """Default command runner using asyncio subprocesses."""

    async def run(
        self, cmd: Sequence[str] | str, *, cwd: Path | None = None
    ) -> Result[ProcessOutput, ProcessError]:
        return await process.run(cmd, cwd=cwd)


class Probe(Protocol):
    async def probe(self, runner: CommandRunner) -> ProbeOutcome: ...

    def describe(self) -> str: ...


@dataclass(frozen=True, slots=True)
class CommandProbe:
    """Present if the command completes and prints non-blank text on stdout.

    stderr is not looked at: several CLIs print warnings there during a
    perfectly healthy run. With require_output=False only successful
    completion is required.
    """

    cmd: Sequence[str] | str
    cwd: Path | None = None
    require_output: bool = True

    def describe(self) -> str:
        return " ".join(split_command(self.cmd))

    async def probe(self, runner: CommandRunner) -> ProbeOutcome:
        try:
            result = await runner.run(self.cmd, cwd=self.cwd)
        except Exception as e:  # noqa: BLE001
            logger.debug("`%s` raised %r", self.describe(), e)
            return Absent(f"`{self.describe()}` could not be run: {e}")

        if isinstance(result, Err):
            logger.debug("`%s`: %s", self.describe(), result.error)
            return Absent(f"`{self.describe()}`: {result.error}")

        if self.require_output and not result.value.stdout.strip():
            return Absent(f"`{self.describe()}` printed nothing")
        return Present()


type PathsSource = Sequence[Path] | Callable[[], Sequence[Path] | None]


@dataclass(frozen=True, slots=True)
class PathsProbe:
    """Present if every path exists.

    `paths` may be a callable computed at probe time. If it returns None or
    raises, the prerequisite location is unknown and the probe is Absent.
    """

    paths: PathsSource
    label: str | None = None

    def describe(self) -> str:
        if self.label:
            return self.label
        if callable(self.paths):
            return "required paths"
        return ", ".join(str(p) for p in self.paths)

    def _resolve(self) -> Sequence[Path] | None:
        if callable(self.paths):
            return self.paths()
        return self.paths

    async def probe(self, runner: CommandRunner) -> ProbeOutcome:
        try:
            paths = self._resolve()
        except Exception as e:  # noqa: BLE001
            logger.debug("Could not resolve %s: %r", self.describe(), e)
            return Absent(f"{self.describe()}: location could not be resolved")

        if paths is None:
            return Absent(f"{self.describe()}: location could not be resolved")

        missing = [p for p in paths if not files.exists(p)]
        if missing:
            return Absent("missing: " + ", ".join(str(p) for p in missing))
        return Present()


@dataclass(frozen=True, slots=True)
class AllOf:
    """Conjunction of probes.

    Every sub-probe runs (concurrently, no short-circuit); the result is
    Present only if all of them are.
    """

    probes: tuple[Probe, ...]

    def describe(self) -> str:
        return " and ".join(p.describe() for p in self.probes)

    async def probe(self, runner: CommandRunner) -> ProbeOutcome:
        outcomes = await asyncio.gather(*(p.probe(runner) for p in self.probes))
        reasons = [o.reason for o in outcomes if isinstance(o, Absent)]
        if reasons:
            return Absent("; ".join(reasons))
        return Present()


def all_of(*probes: Probe) -> AllOf:
    """Combine probes with logical AND."""
    return AllOf(probes=tuple(probes))
