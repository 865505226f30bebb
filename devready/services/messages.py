"""Wire messages exchanged with the UI.

Inbound:  {"command": "check<Dependency>Installed"}
Outbound: {"command": "is<Dependency>Installed", "data": {...CheckResult}}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from devready.services.checkers import CheckResult, Dependency

__all__ = ["Command", "ResultTag", "ResultMessage", "decode_command"]


class Command(Enum):
    """Inbound command identifiers."""

    CHECK_NODEJS = "checkNodejsInstalled"
    CHECK_NODE_MODULES = "checkNodeModulesInstalled"
    CHECK_ANDROID_STUDIO = "checkAndroidStudioInstalled"
    CHECK_XCODE = "checkXcodeInstalled"
    CHECK_COCOAPODS = "checkCocoaPodsInstalled"
    CHECK_PODS = "checkPodsInstalled"

    def __str__(self) -> str:
        return self.value

    @property
    def dependency(self) -> Dependency:
        return _COMMAND_DEPENDENCY[self]

    @classmethod
    def for_dependency(cls, dependency: Dependency) -> Command:
        return cls(f"check{dependency.value}Installed")


class ResultTag(Enum):
    """Outbound result tags."""

    IS_NODEJS = "isNodejsInstalled"
    IS_NODE_MODULES = "isNodeModulesInstalled"
    IS_ANDROID_STUDIO = "isAndroidStudioInstalled"
    IS_XCODE = "isXcodeInstalled"
    IS_COCOAPODS = "isCocoaPodsInstalled"
    IS_PODS = "isPodsInstalled"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def for_dependency(cls, dependency: Dependency) -> ResultTag:
        return cls(f"is{dependency.value}Installed")


_COMMAND_DEPENDENCY: dict[Command, Dependency] = {
    Command.CHECK_NODEJS: Dependency.NODEJS,
    Command.CHECK_NODE_MODULES: Dependency.NODE_MODULES,
    Command.CHECK_ANDROID_STUDIO: Dependency.ANDROID_STUDIO,
    Command.CHECK_XCODE: Dependency.XCODE,
    Command.CHECK_COCOAPODS: Dependency.COCOAPODS,
    Command.CHECK_PODS: Dependency.PODS,
}


def decode_command(message: object) -> Command | None:
    """Read the command identifier from an inbound message.

    Anything that is not a mapping with a known `command` string gives None.
    Other fields are ignored.
    """
    if not isinstance(message, Mapping):
        return None
    raw = message.get("command")
    if not isinstance(raw, str):
        return None
    try:
        return Command(raw)
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class ResultMessage:
    """Outbound message carrying one check result."""

    command: ResultTag
    data: CheckResult

    @classmethod
    def for_result(cls, dependency: Dependency, result: CheckResult) -> ResultMessage:
        return cls(command=ResultTag.for_dependency(dependency), data=result)

    def to_dict(self) -> dict[str, object]:
        return {"command": self.command.value, "data": self.data.to_dict()}
