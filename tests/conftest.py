"""Shared pytest fixtures: isolated XDG directories and a throwaway project."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillset.config import ConfigPaths


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point config and cache lookups at per-test directories."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg-cache"))
    monkeypatch.delenv("SKILLSET_PROJECT_ROOT", raising=False)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return a git-marked project directory."""
    root = tmp_path / "project"
    (root / ".git").mkdir(parents=True)
    return root.resolve()


@pytest.fixture
def config_paths(project_root: Path) -> ConfigPaths:
    return ConfigPaths.for_project(project_root)
