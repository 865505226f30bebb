from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

import pytest
import typer

from devready.cli.context import CLIContext
from devready.core.config import Config
from devready.core.errors import ErrorCode
from devready.core.workspace import Workspace
from devready.output.console import MockConsole, Style
from devready.platform.detection import Platform
from devready.services.check import CheckReport
from devready.services.checkers import SPECS, CheckResult, Dependency


def _ctx(tmp_path: Path, console: MockConsole) -> CLIContext:
    return CLIContext(
        workspace=Workspace(root=tmp_path),
        platform=Platform.MACOS,
        config=Config.default(),
        console=console,
    )


def _result(dep: Dependency, installed: bool) -> CheckResult:
    spec = SPECS[dep]
    if installed:
        return CheckResult.present(spec.info)
    return CheckResult.absent(spec.info, spec.error)


def _patch(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    *,
    installed: dict[Dependency, bool],
) -> MockConsole:
    import devready.cli.commands.check as check_cmd

    console = MockConsole()

    class FakeCheckService:
        def __init__(self, **_: object) -> None:
            pass

        async def run(self, dependencies: Iterable[Dependency] | None = None) -> CheckReport:
            selected = list(dependencies) if dependencies is not None else list(Dependency)
            return CheckReport(results={d: _result(d, installed.get(d, True)) for d in selected})

    monkeypatch.setattr(check_cmd, "build_context", lambda: _ctx(tmp_path, console))
    monkeypatch.setattr(check_cmd, "CheckService", FakeCheckService)
    return console


def test_all_installed(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import devready.cli.commands.check as check_cmd

    console = _patch(monkeypatch, tmp_path, installed={})
    check_cmd.check(dependencies=None, as_json=False)

    assert console.count(Style.SUCCESS) == len(Dependency)
    assert not console.find("hint:")


def test_missing_exits_env_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import devready.cli.commands.check as check_cmd

    console = _patch(monkeypatch, tmp_path, installed={Dependency.PODS: False})

    with pytest.raises(typer.Exit) as exc:
        check_cmd.check(dependencies=None, as_json=False)

    assert exc.value.exit_code == int(ErrorCode.ENV_ERROR)
    assert console.find("Project pods: missing")
    assert console.find("hint: iOS dependencies are not installed.")


def test_select_dependencies(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import devready.cli.commands.check as check_cmd

    console = _patch(monkeypatch, tmp_path, installed={})
    check_cmd.check(dependencies=["xcode", "CocoaPods", "xcode"], as_json=False)

    assert console.count(Style.SUCCESS) == 2


def test_unknown_dependency(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import devready.cli.commands.check as check_cmd

    _patch(monkeypatch, tmp_path, installed={})
    with pytest.raises(typer.Exit) as exc:
        check_cmd.check(dependencies=["flutter"], as_json=False)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)


def test_json_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import devready.cli.commands.check as check_cmd

    console = _patch(monkeypatch, tmp_path, installed={})
    check_cmd.check(dependencies=["Nodejs"], as_json=True)

    assert json.loads(console.text) == [
        {
            "command": "isNodejsInstalled",
            "data": {
                "installed": True,
                "info": "Used for running scripts and getting dependencies.",
            },
        }
    ]


def test_missing_workspace_is_a_warning(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import devready.cli.commands.check as check_cmd

    console = _patch(monkeypatch, tmp_path, installed={})
    no_workspace = CLIContext(
        workspace=None,
        platform=Platform.LINUX,
        config=Config.default(),
        console=console,
    )
    monkeypatch.setattr(check_cmd, "build_context", lambda: no_workspace)
    check_cmd.check(dependencies=["Nodejs"], as_json=False)

    assert console.count(Style.WARNING) == 1
    assert console.find("workspace: (not found)")[0].style == Style.WARNING
    assert console.find("platform: linux")[0].style == Style.INFO
