"""Stable project identifiers for per-project generated overrides."""

from __future__ import annotations

import hashlib
import logging
import subprocess
from pathlib import Path

from skillset.constants.config import DEFAULT_PROJECT_ID_STRATEGY, PROJECT_ID_HASH_LENGTH, ProjectIdStrategy

logger = logging.getLogger(__name__)

GIT_DIR_NAME: str = ".git"
GIT_TIMEOUT_SECONDS: float = 5.0


def find_git_root(start: Path) -> Path:
    """Return the nearest ancestor of ``start`` holding ``.git``, else ``start`` itself."""
    resolved = start.resolve()
    for candidate in (resolved, *resolved.parents):
        if (candidate / GIT_DIR_NAME).exists():
            return candidate
    return resolved


def get_git_remote_url(repo_root: Path) -> str | None:
    """Return ``remote.origin.url`` for ``repo_root`` or ``None`` when unavailable."""
    try:
        completed = subprocess.run(
            ["git", "config", "--get", "remote.origin.url"],
            cwd=repo_root,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git remote lookup failed in %s: %s", repo_root, exc)
        return None
    if completed.returncode != 0:
        return None
    value = completed.stdout.strip()
    return value or None


def get_project_id(project_path: Path, strategy: ProjectIdStrategy = DEFAULT_PROJECT_ID_STRATEGY) -> str:
    """Hash the repository root path, or its origin URL under the ``remote`` strategy."""
    repo_root = find_git_root(project_path)
    if strategy == "remote":
        remote_url = get_git_remote_url(repo_root)
        if remote_url:
            return _hash_string(remote_url)
    return _hash_string(str(repo_root))


def _hash_string(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:PROJECT_ID_HASH_LENGTH]
