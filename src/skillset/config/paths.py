"""Locations of the config layers for one project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from skillset.constants.config import CONFIG_FILENAME, GENERATED_CONFIG_FILENAME, PROJECT_CONFIG_DIR
from skillset.utils.paths import get_config_dir, get_project_root

type ConfigScope = Literal["project", "user"]


@dataclass(frozen=True)
class ConfigPaths:
    """Resolved file paths for the user, project and generated config layers."""

    project_root: Path
    user_config: Path
    project_config: Path
    generated_config: Path

    @classmethod
    def for_project(cls, project_root: Path | None = None, config_dir: Path | None = None) -> ConfigPaths:
        """Build paths from the ambient environment, allowing either root to be pinned."""
        root = (project_root or get_project_root()).resolve()
        directory = config_dir or get_config_dir()
        return cls(
            project_root=root,
            user_config=directory / CONFIG_FILENAME,
            project_config=root / PROJECT_CONFIG_DIR / CONFIG_FILENAME,
            generated_config=directory / GENERATED_CONFIG_FILENAME,
        )

    def yaml_path(self, scope: ConfigScope) -> Path:
        """Return the hand-edited file for ``scope``."""
        return self.project_config if scope == "project" else self.user_config
