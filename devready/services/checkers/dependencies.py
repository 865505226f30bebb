# SPDX-License-Identifier: MIT
"""Dependency checker.

Validates the toolchains a React Native workspace needs:
- Node.js and the project's node_modules
- Android Studio (emulator binary + SDK manager)
- Xcode (xcodebuild, xcrun, simctl), CocoaPods and installed pods
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from devready.core.config import Config
from devready.core.workspace import ios_source_dir
from devready.services.checkers.base import Absent, CheckResult
from devready.services.checkers.probes import (
    CommandProbe,
    CommandRunner,
    DefaultCommandRunner,
    PathsProbe,
    Probe,
    all_of,
)

logger = logging.getLogger(__name__)


class Dependency(Enum):
    """Dependencies that can be verified."""

    NODEJS = "Nodejs"
    NODE_MODULES = "NodeModules"
    ANDROID_STUDIO = "AndroidStudio"
    XCODE = "Xcode"
    COCOAPODS = "CocoaPods"
    PODS = "Pods"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class DependencySpec:
    """Static texts reported for a dependency."""

    dependency: Dependency
    info: str
    error: str
    label: str


SPECS: dict[Dependency, DependencySpec] = {
    Dependency.NODEJS: DependencySpec(
        Dependency.NODEJS,
        info="Used for running scripts and getting dependencies.",
        error="Node.js was not found. Make sure to [install Node.js](https://nodejs.org/en).",
        label="Nodejs",
    ),
    Dependency.NODE_MODULES: DependencySpec(
        Dependency.NODE_MODULES,
        info="Whether JavaScript packages are installed.",
        error="Node modules are not installed.",
        label="Node modules",
    ),
    Dependency.ANDROID_STUDIO: DependencySpec(
        Dependency.ANDROID_STUDIO,
        info="Used for building and running Android apps.",
        error=(
            "Android Studio was not found. Make sure to "
            "[install Android Studio](https://developer.android.com/studio) "
            "and setup ANDROID_HOME environmental variable."
        ),
        label="Android Emulator & Android SDK",
    ),
    Dependency.XCODE: DependencySpec(
        Dependency.XCODE,
        info="Used for building and running iOS apps.",
        error=(
            "Xcode was not found. "
            "[Install Xcode from the Mac App Store](https://apps.apple.com/us/app/xcode/id497799835?mt=12) "
            "and have Xcode Command Line Tools enabled."
        ),
        label="Xcode Command Line Tools",
    ),
    Dependency.COCOAPODS: DependencySpec(
        Dependency.COCOAPODS,
        info="Used for installing iOS dependencies.",
        error=(
            "CocoaPods was not found. Make sure to "
            "[install CocoaPods](https://guides.cocoapods.org/using/getting-started.html)."
        ),
        label="CocoaPods",
    ),
    Dependency.PODS: DependencySpec(
        Dependency.PODS,
        info="Whether iOS dependencies are installed.",
        error="iOS dependencies are not installed.",
        label="Project pods",
    ),
}


@dataclass(frozen=True, slots=True)
class DependencyChecker:
    """Check that workspace dependencies are installed.

    Every check is independent and stateless; several may run at once.

    Attributes:
        config: Android binary locations and workspace-relative paths
        workspace_root: Project root, None if it could not be resolved
        runner: Command runner for the command probes
    """

    config: Config = field(default_factory=Config.default)
    workspace_root: Path | None = None
    runner: CommandRunner = field(default_factory=DefaultCommandRunner)

    def probe_for(self, dependency: Dependency) -> Probe:
        """Build the probe that decides whether a dependency is installed."""
        match dependency:
            case Dependency.NODEJS:
                return CommandProbe("node -v")
            case Dependency.NODE_MODULES:
                return CommandProbe("npm list --json", cwd=self.workspace_root)
            case Dependency.ANDROID_STUDIO:
                android = self.config.android
                return all_of(
                    PathsProbe([android.emulator_binary], label="Android emulator"),
                    CommandProbe(
                        [str(android.sdkmanager_binary), "--version"],
                        require_output=False,
                    ),
                )
            case Dependency.XCODE:
                return all_of(
                    CommandProbe("xcodebuild -version"),
                    CommandProbe("xcrun --version"),
                    CommandProbe("xcrun simctl help"),
                )
            case Dependency.COCOAPODS:
                return CommandProbe("pod --version")
            case Dependency.PODS:
                return PathsProbe(self._pods_paths, label="iOS pods")

    def _pods_paths(self) -> list[Path] | None:
        ios_dir = ios_source_dir(self.workspace_root, self.config.paths)
        logger.debug("Check pods in %s %s", ios_dir, self.workspace_root)
        if ios_dir is None:
            return None
        return [ios_dir / "Podfile.lock", ios_dir / "Pods"]

    async def check(self, dependency: Dependency) -> CheckResult:
        """Run the check for a dependency. Never raises."""
        spec = SPECS[dependency]
        outcome = await self.probe_for(dependency).probe(self.runner)

        logger.debug("%s installed: %s", spec.label, outcome.ok)
        if isinstance(outcome, Absent):
            logger.debug("%s: %s", spec.label, outcome.reason)
            return CheckResult.absent(spec.info, spec.error)
        return CheckResult.present(spec.info)

    async def check_nodejs_installed(self) -> CheckResult:
        return await self.check(Dependency.NODEJS)

    async def check_node_modules_installed(self) -> CheckResult:
        return await self.check(Dependency.NODE_MODULES)

    async def check_android_studio_installed(self) -> CheckResult:
        return await self.check(Dependency.ANDROID_STUDIO)

    async def check_xcode_installed(self) -> CheckResult:
        return await self.check(Dependency.XCODE)

    async def check_cocoapods_installed(self) -> CheckResult:
        return await self.check(Dependency.COCOAPODS)

    async def check_pods_installed(self) -> CheckResult:
        return await self.check(Dependency.PODS)
