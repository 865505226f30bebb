# SPDX-License-Identifier: MIT
"""Base types for checkers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Present:
    """Probe outcome: the checked thing is there."""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Absent:
    """Probe outcome: the checked thing is missing.

    Attributes:
        reason: Diagnostic text (what was probed and why it failed)
    """

    reason: str

    @property
    def ok(self) -> bool:
        return False


type ProbeOutcome = Present | Absent


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a single dependency check, as reported to the UI.

    Attributes:
        installed: Whether the dependency is present
        info: Static description of what the dependency is used for
        error: Remediation hint, set if and only if not installed
    """

    installed: bool
    info: str
    error: str | None = None

    def __post_init__(self) -> None:
        if self.installed and self.error is not None:
            raise ValueError("CheckResult: error must be None when installed")
        if not self.installed and self.error is None:
            raise ValueError("CheckResult: error is required when not installed")

    @classmethod
    def present(cls, info: str) -> CheckResult:
        """Create a result for an installed dependency."""
        return cls(installed=True, info=info)

    @classmethod
    def absent(cls, info: str, error: str) -> CheckResult:
        """Create a result for a missing dependency."""
        return cls(installed=False, info=info, error=error)

    def to_dict(self) -> dict[str, object]:
        """Wire form. `error` is left out when installed."""
        data: dict[str, object] = {"installed": self.installed, "info": self.info}
        if self.error is not None:
            data["error"] = self.error
        return data
