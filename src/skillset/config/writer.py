"""Write side of the config layers: generated overrides and YAML files."""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from skillset.config.hashing import hash_value_at, to_json_value
from skillset.config.keypath import delete_value_at_path, join_key_path, set_value_at_path, split_key_path
from skillset.config.loader import load_generated_config, load_yaml_config, resolve_project_id
from skillset.config.overrides import cleanup_stale_hashes, find_stale_overrides
from skillset.config.paths import ConfigPaths, ConfigScope
from skillset.constants.config import (
    CONFIG_DEFAULTS,
    GENERATED_META_KEYS,
    HASHES_KEY,
    OVERRIDE_TEMP_PREFIX,
    OVERRIDE_TEMP_SUFFIX,
    PROJECTS_KEY,
    SCHEMA_HEADER,
)
from skillset.exceptions import ConfigError, OverrideWriteError
from skillset.io import file_lock, write_json_atomic, write_text_atomic

logger = logging.getLogger(__name__)

YAML_TEMP_SUFFIX: str = ".yaml.tmp"
VALID_OVERRIDE_SCOPES: tuple[ConfigScope, ...] = ("user", "project")

type OverrideMutation = Callable[[dict[str, Any]], dict[str, Any]]


def save_generated_config(path: Path, generated: dict[str, Any]) -> None:
    write_json_atomic(
        path=path,
        payload=generated,
        temp_prefix=OVERRIDE_TEMP_PREFIX,
        temp_suffix=OVERRIDE_TEMP_SUFFIX,
    )


def set_override(
    key_path: str,
    value: Any,
    *,
    scope: ConfigScope = "user",
    paths: ConfigPaths | None = None,
) -> None:
    """Record ``value`` as the generated override at ``key_path``.

    The hash of the hand-edited value currently at ``key_path`` is stored next
    to it; later loads drop the override once that value changes. Values are
    stored in their JSON form, so a YAML date is kept as its ISO string.
    """
    segments = _checked_segments(key_path, scope)
    canonical = join_key_path(segments)
    stored = to_json_value(value)
    paths = paths or ConfigPaths.for_project()

    def apply(target: dict[str, Any]) -> dict[str, Any]:
        yaml_config = load_yaml_config(paths.yaml_path(scope))
        updated = set_value_at_path(target, segments, stored)
        updated[HASHES_KEY] = {**(target.get(HASHES_KEY) or {}), canonical: hash_value_at(yaml_config, canonical)}
        return updated

    _update_generated(paths, scope, apply)
    logger.debug("Set %s override %s", scope, canonical)


def reset_override(
    key_path: str,
    *,
    scope: ConfigScope = "user",
    paths: ConfigPaths | None = None,
) -> None:
    """Remove the generated override (value and hash) at ``key_path``."""
    segments = _checked_segments(key_path, scope)
    canonical = join_key_path(segments)
    paths = paths or ConfigPaths.for_project()

    def apply(target: dict[str, Any]) -> dict[str, Any]:
        updated = delete_value_at_path(target, segments)
        hashes = dict(target.get(HASHES_KEY) or {})
        hashes.pop(canonical, None)
        return {**updated, HASHES_KEY: hashes}

    _update_generated(paths, scope, apply)
    logger.debug("Reset %s override %s", scope, canonical)


def cleanup_generated_config(paths: ConfigPaths | None = None) -> dict[ConfigScope, list[str]]:
    """Drop stale overrides for the user map and the current project's map.

    Returns the removed key paths per scope.
    """
    paths = paths or ConfigPaths.for_project()
    removed: dict[ConfigScope, list[str]] = {"user": [], "project": []}
    for scope in VALID_OVERRIDE_SCOPES:

        def apply(target: dict[str, Any], scope: ConfigScope = scope) -> dict[str, Any]:
            yaml_config = load_yaml_config(paths.yaml_path(scope))
            removed[scope] = find_stale_overrides(target, yaml_config)
            return cleanup_stale_hashes(target, yaml_config)

        _update_generated(paths, scope, apply)
    return removed


def write_yaml_config(path: Path, config: dict[str, Any], *, include_schema_comment: bool = True) -> None:
    """Write a hand-editable config file, optionally led by the schema comment."""
    text = yaml.safe_dump(config, sort_keys=False, allow_unicode=True)
    if include_schema_comment:
        text = SCHEMA_HEADER + text
    write_text_atomic(path=path, text=text, temp_prefix=OVERRIDE_TEMP_PREFIX, temp_suffix=YAML_TEMP_SUFFIX)


def ensure_config_files(paths: ConfigPaths | None = None) -> list[Path]:
    """Create missing user and project config files from defaults; return those created."""
    paths = paths or ConfigPaths.for_project()
    created: list[Path] = []
    for path in (paths.user_config, paths.project_config):
        if path.exists():
            continue
        write_yaml_config(path, copy.deepcopy(CONFIG_DEFAULTS))
        created.append(path)
    return created


def _checked_segments(key_path: str, scope: str) -> list[str]:
    if scope not in VALID_OVERRIDE_SCOPES:
        raise ConfigError(f"Unknown override scope {scope!r}; expected one of: {', '.join(VALID_OVERRIDE_SCOPES)}")
    segments = split_key_path(key_path)
    if not segments:
        raise ConfigError("Override key path must not be empty")
    if segments[0] in GENERATED_META_KEYS:
        raise ConfigError(f"`{segments[0]}` is reserved for override metadata")
    return segments


def _update_generated(paths: ConfigPaths, scope: ConfigScope, mutate: OverrideMutation) -> None:
    """Read-modify-write the generated file under its advisory lock."""
    target_path = paths.generated_config
    try:
        with file_lock(target_path):
            generated = load_generated_config(target_path)
            if scope == "project":
                project_id = resolve_project_id(paths, generated)
                projects = dict(generated.get(PROJECTS_KEY) or {})
                projects[project_id] = mutate(dict(projects.get(project_id) or {HASHES_KEY: {}}))
                generated[PROJECTS_KEY] = projects
            else:
                generated = mutate(generated)
            save_generated_config(target_path, generated)
    except OverrideWriteError:
        raise
    except OSError as exc:
        raise OverrideWriteError(f"Failed to write generated config {target_path}: {exc}") from exc
