# SPDX-License-Identifier: MIT
"""Checker modules for dependency verification.

- base: result schema (CheckResult) and probe outcomes (Present / Absent)
- probes: command, filesystem and composite probes
- dependencies: the six dependency checks built from those probes
"""

from devready.services.checkers.base import Absent, CheckResult, Present, ProbeOutcome
from devready.services.checkers.dependencies import (
    SPECS,
    Dependency,
    DependencyChecker,
    DependencySpec,
)
from devready.services.checkers.probes import (
    AllOf,
    CommandProbe,
    CommandRunner,
    DefaultCommandRunner,
    PathsProbe,
    Probe,
    all_of,
)

__all__ = [
    # Result types
    "CheckResult",
    "Present",
    "Absent",
    "ProbeOutcome",
    # Probes
    "CommandRunner",
    "DefaultCommandRunner",
    "Probe",
    "CommandProbe",
    "PathsProbe",
    "AllOf",
    "all_of",
    # Dependencies
    "Dependency",
    "DependencySpec",
    "DependencyChecker",
    "SPECS",
]
