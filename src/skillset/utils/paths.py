"""XDG-style directory resolution and tool inference for skill paths."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from skillset.constants.config import APP_DIR_NAME, PROJECT_ROOT_ENV
from skillset.constants.scopes import TOOL_SKILL_DIRS


def get_config_dir() -> Path:
    """Return the per-user Skillset config directory."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / f".{APP_DIR_NAME}"
    return Path.home() / ".config" / APP_DIR_NAME


def get_cache_dir() -> Path:
    """Return the per-user Skillset cache directory."""
    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / f".{APP_DIR_NAME}" / "cache"
    return Path.home() / ".cache" / APP_DIR_NAME


def get_project_root() -> Path:
    """Return the project root, honouring ``SKILLSET_PROJECT_ROOT``."""
    override = os.environ.get(PROJECT_ROOT_ENV)
    return Path(override) if override else Path.cwd()


def infer_tool_from_path(path: str, project_root: Path, home: Path | None = None) -> str | None:
    """Return the tool whose project or user skill directory contains ``path``."""
    home = home or Path.home()
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = project_root / candidate
    resolved = candidate.resolve()
    for tool, relative_dir in TOOL_SKILL_DIRS.items():
        for base in (project_root, home):
            if resolved.is_relative_to((base / relative_dir).resolve()):
                return tool
    return None
