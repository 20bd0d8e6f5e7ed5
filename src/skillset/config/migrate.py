"""Translation of the pre-v1 camelCase config format."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import yaml

from skillset.config.writer import write_yaml_config
from skillset.constants.config import CONFIG_VERSION, LEGACY_CONFIG_KEYS, LEGACY_PASSTHROUGH_KEYS
from skillset.exceptions import ConfigError

logger = logging.getLogger(__name__)

BACKUP_SUFFIX: str = ".bak"
LEGACY_STRICT_MODE: str = "strict"


@dataclass(frozen=True)
class MigrationResult:
    migrated: bool
    backup_path: Path | None = None


def detect_legacy_config(config: Any) -> bool:
    """Return True when ``config`` carries any pre-v1 key."""
    return isinstance(config, dict) and any(key in config for key in LEGACY_CONFIG_KEYS)


def migrate_legacy_config(config: Any) -> dict[str, Any]:
    """Map a legacy config mapping onto the current schema.

    ``mode: strict`` becomes ``rules.unresolved: error``; ``mappings`` become
    ``skills``. Keys that already exist in the current schema pass through.
    """
    if not isinstance(config, dict):
        raise ConfigError(f"Invalid legacy config: expected a mapping, got {type(config).__name__}")

    migrated: dict[str, Any] = {
        "version": CONFIG_VERSION,
        "rules": {
            "unresolved": "error" if config.get("mode") == LEGACY_STRICT_MODE else "warn",
            "ambiguous": "warn",
        },
        "output": {
            "max_lines": config.get("maxLines", 500),
            "include_layout": config.get("showStructure", False),
        },
        "skills": dict(config.get("mappings") or {}),
    }
    for key in LEGACY_PASSTHROUGH_KEYS:
        if key in config:
            migrated[key] = config[key]
    return migrated


def migrate_config_file(path: Path, *, now: datetime | None = None) -> MigrationResult:
    """Rewrite a legacy config file in place after saving a timestamped backup."""
    if not path.exists():
        return MigrationResult(migrated=False)
    try:
        content = path.read_text(encoding="utf-8")
        parsed = yaml.safe_load(content)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("Cannot read config %s for migration: %s", path, exc)
        return MigrationResult(migrated=False)

    if not detect_legacy_config(parsed):
        return MigrationResult(migrated=False)

    timestamp = (now or datetime.now(UTC)).strftime("%Y-%m-%dT%H-%M-%S-%fZ")
    backup_path = path.with_name(f"{path.name}.{timestamp}{BACKUP_SUFFIX}")
    backup_path.write_text(content, encoding="utf-8")

    write_yaml_config(path, migrate_legacy_config(parsed))
    logger.info("Migrated legacy config %s (backup at %s)", path, backup_path)
    return MigrationResult(migrated=True, backup_path=backup_path)
