from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import typer

from devready.core.config import Config, load_config
from devready.core.errors import ErrorCode
from devready.core.result import Err
from devready.core.workspace import WORKSPACE_ENV_VAR, Workspace, detect_workspace
from devready.output.console import ConsoleProtocol, RichConsole
from devready.platform.detection import Platform, detect_platform
from devready.services.checkers import DependencyChecker

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CLIContext:
    workspace: Workspace | None
    platform: Platform
    config: Config
    console: ConsoleProtocol

    def checker(self) -> DependencyChecker:
        return DependencyChecker(
            config=self.config,
            workspace_root=self.workspace.root if self.workspace is not None else None,
        )


def build_context() -> CLIContext:
    workspace_result = detect_workspace()
    workspace: Workspace | None = None
    if isinstance(workspace_result, Err):
        if os.environ.get(WORKSPACE_ENV_VAR):
            typer.echo(f"error: {workspace_result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        # Checks that need the workspace report themselves as missing.
        logger.debug(workspace_result.error.message)
    else:
        workspace = workspace_result.value

    config = Config.default()
    if workspace is not None and workspace.config_path.exists():
        config_result = load_config(workspace.config_path)
        if isinstance(config_result, Err):
            logger.warning("%s (using defaults)", config_result.error.message)
        else:
            config = config_result.value

    return CLIContext(
        workspace=workspace,
        platform=detect_platform(),
        config=config,
        console=RichConsole(),
    )
