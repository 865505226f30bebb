"""Workspace detection and paths.

The workspace is the root directory of the JavaScript project being checked.
It is identified by a `package.json` file, or given explicitly through the
DEVREADY_WORKSPACE environment variable (the CLI sets it from --workspace).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import CONFIG_FILE_NAME, PathsConfig
from .result import Err, Ok, Result

__all__ = [
    "Workspace",
    "WorkspaceError",
    "WORKSPACE_ENV_VAR",
    "detect_workspace",
    "find_workspace_upward",
    "ios_source_dir",
    "is_workspace_root",
    "workspace_root",
]

WORKSPACE_ENV_VAR = "DEVREADY_WORKSPACE"


@dataclass(frozen=True)
class WorkspaceError:
    """Error when workspace cannot be detected."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Workspace:
    """A detected project workspace."""

    root: Path

    @property
    def config_path(self) -> Path:
        """Path to devready.toml."""
        return self.root / CONFIG_FILE_NAME

    @property
    def package_json_path(self) -> Path:
        return self.root / "package.json"

    def ios_source_dir(self, paths: PathsConfig | None = None) -> Path:
        """Directory holding the Xcode project and Podfile."""
        return self.root / (paths or PathsConfig()).ios

    def __str__(self) -> str:
        return str(self.root)


def is_workspace_root(path: Path) -> bool:
    """Check if a path looks like a project root (has package.json)."""
    return (path / "package.json").is_file()


def find_workspace_upward(start: Path) -> Path | None:
    """Search upward from start directory for a workspace root."""
    for parent in (start, *start.parents):
        if is_workspace_root(parent):
            return parent
    return None


def detect_workspace(
    *,
    start_dir: Path | None = None,
    env_var: str = WORKSPACE_ENV_VAR,
) -> Result[Workspace, WorkspaceError]:
    """Detect the workspace root directory.

    Detection order:
    1. Environment variable (if set it must point to a directory)
    2. Search upward from start_dir (or cwd) for package.json
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir():
            return Ok(Workspace(root=env_path))
        return Err(
            WorkspaceError(
                message=f"${env_var} is set to '{env_value}' but it is not a directory",
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_workspace_upward(search_start)
    if found:
        return Ok(Workspace(root=found))

    return Err(
        WorkspaceError(
            message="Could not find workspace (package.json not found)",
            searched_from=search_start,
        )
    )


def workspace_root(
    *,
    start_dir: Path | None = None,
    env_var: str = WORKSPACE_ENV_VAR,
) -> Path | None:
    """Return the workspace root, or None when it cannot be resolved."""
    result = detect_workspace(start_dir=start_dir, env_var=env_var)
    if isinstance(result, Err):
        return None
    return result.value.root


def ios_source_dir(root: Path | None, paths: PathsConfig | None = None) -> Path | None:
    """Resolve the iOS source directory for a workspace root.

    Returns None when there is no workspace root to resolve against.
    """
    if root is None:
        return None
    return Workspace(root=root).ios_source_dir(paths)
