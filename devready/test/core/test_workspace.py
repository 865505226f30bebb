"""Tests for devready.core.workspace module."""

from __future__ import annotations

from pathlib import Path

import pytest

from devready.core.config import PathsConfig
from devready.core.result import Err, Ok
from devready.core.workspace import (
    WORKSPACE_ENV_VAR,
    Workspace,
    detect_workspace,
    find_workspace_upward,
    ios_source_dir,
    is_workspace_root,
    workspace_root,
)


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(WORKSPACE_ENV_VAR, raising=False)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a minimal JS project with nested directories."""
    (tmp_path / "package.json").write_text('{"name": "app"}')
    (tmp_path / "src" / "screens").mkdir(parents=True)
    return tmp_path


class TestWorkspace:
    def test_paths(self, tmp_path: Path) -> None:
        ws = Workspace(root=tmp_path)
        assert ws.config_path == tmp_path / "devready.toml"
        assert ws.package_json_path == tmp_path / "package.json"
        assert ws.ios_source_dir() == tmp_path / "ios"
        assert ws.ios_source_dir(PathsConfig(ios="app/ios")) == tmp_path / "app" / "ios"

    def test_str(self, tmp_path: Path) -> None:
        assert str(Workspace(root=tmp_path)) == str(tmp_path)


class TestDetection:
    def test_is_workspace_root(self, project: Path) -> None:
        assert is_workspace_root(project)
        assert not is_workspace_root(project / "src")

    def test_find_upward(self, project: Path) -> None:
        assert find_workspace_upward(project / "src" / "screens") == project

    def test_detect_from_nested_dir(self, project: Path) -> None:
        result = detect_workspace(start_dir=project / "src" / "screens")
        assert isinstance(result, Ok)
        assert result.value.root == project.resolve()

    def test_env_var(self, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(WORKSPACE_ENV_VAR, str(project / "src"))
        result = detect_workspace(start_dir=project)
        assert isinstance(result, Ok)
        assert result.value.root == (project / "src").resolve()

    def test_env_var_invalid(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(WORKSPACE_ENV_VAR, str(tmp_path / "missing"))
        result = detect_workspace(start_dir=tmp_path)
        assert isinstance(result, Err)
        assert WORKSPACE_ENV_VAR in result.error.message

    def test_not_found(self, tmp_path: Path) -> None:
        # tmp_path is not expected to live under a package.json
        result = detect_workspace(start_dir=tmp_path)
        if isinstance(result, Ok):
            pytest.skip("tmp_path is inside a JS project")
        assert result.error.searched_from == tmp_path.resolve()
        assert workspace_root(start_dir=tmp_path) is None


class TestIosSourceDir:
    def test_resolves_under_root(self, tmp_path: Path) -> None:
        assert ios_source_dir(tmp_path) == tmp_path / "ios"

    def test_absent_without_root(self) -> None:
        assert ios_source_dir(None) is None
