"""Layered config loading: defaults, hand-edited YAML and generated overrides."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from skillset.config.keypath import get_value_at_path
from skillset.config.merge import merge_configs
from skillset.config.model import SkillsetConfig, build_config
from skillset.config.overrides import apply_generated_overrides
from skillset.config.paths import ConfigPaths, ConfigScope
from skillset.config.project import get_project_id
from skillset.config.schema import CONFIG_SCHEMA, GENERATED_SETTINGS_SCHEMA, PROJECT_SETTINGS_SCHEMA
from skillset.constants.config import (
    CONFIG_DEFAULTS,
    DEFAULT_PROJECT_ID_STRATEGY,
    HASHES_KEY,
    PROJECT_ID_STRATEGY_KEY,
    PROJECTS_KEY,
)
from skillset.io import load_json_file

logger = logging.getLogger(__name__)


def sanitize_by_schema(
    schema: dict[str, Any],
    payload: Any,
    *,
    label: str,
    source: Path | str,
) -> dict[str, Any]:
    """Drop the top-level sections of ``payload`` that violate ``schema``.

    A payload that is not a mapping at all yields ``{}``. The remaining
    sections are kept as-is, so one malformed section never disables another.
    """
    if not isinstance(payload, dict):
        if payload is not None:
            logger.warning("Ignored %s at %s: expected a mapping, got %s", label, source, type(payload).__name__)
        return {}

    validator = Draft202012Validator(schema)
    cleaned = dict(payload)
    dropped: list[str] = []
    while True:
        invalid: set[str] = set()
        for error in validator.iter_errors(cleaned):
            if not error.absolute_path:
                logger.warning("Ignored %s at %s: %s", label, source, error.message)
                return {}
            invalid.add(str(error.absolute_path[0]))
        if not invalid:
            break
        for key in invalid:
            cleaned.pop(key, None)
            # YAML may yield non-string keys; the error path stringifies them.
            for raw_key in [raw for raw in cleaned if str(raw) == key]:
                cleaned.pop(raw_key)
        dropped.extend(sorted(invalid))

    if dropped:
        logger.warning("Ignored invalid %s section(s): %s (%s)", label, ", ".join(dropped), source)
    return cleaned


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load one hand-edited YAML layer; unreadable or invalid content reads as ``{}``."""
    if not path.exists():
        return {}
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.warning("Ignored unparsable config file %s: %s", path, exc)
        return {}
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read config file %s: %s", path, exc)
        return {}
    return sanitize_by_schema(CONFIG_SCHEMA, raw, label="config", source=path)


def default_generated_config() -> dict[str, Any]:
    return {HASHES_KEY: {}, PROJECTS_KEY: {}}


def load_generated_config(path: Path) -> dict[str, Any]:
    """Load the generated override file, falling back to an empty override set."""
    if not path.exists():
        return default_generated_config()
    try:
        raw = load_json_file(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Ignored unreadable generated config %s: %s", path, exc)
        return default_generated_config()
    if not isinstance(raw, dict):
        logger.warning("Ignored generated config %s: expected a mapping", path)
        return default_generated_config()

    payload = dict(raw)
    projects = payload.get(PROJECTS_KEY)
    if isinstance(projects, dict):
        payload[PROJECTS_KEY] = {
            project_id: sanitize_by_schema(
                PROJECT_SETTINGS_SCHEMA,
                settings,
                label=f"project {project_id} override",
                source=path,
            )
            for project_id, settings in projects.items()
        }

    generated = sanitize_by_schema(GENERATED_SETTINGS_SCHEMA, payload, label="generated override", source=path)
    generated.setdefault(HASHES_KEY, {})
    generated.setdefault(PROJECTS_KEY, {})
    return generated


def resolve_project_id(paths: ConfigPaths, generated: dict[str, Any]) -> str:
    """Return the id under which ``paths.project_root`` stores its overrides."""
    strategy = generated.get(PROJECT_ID_STRATEGY_KEY, DEFAULT_PROJECT_ID_STRATEGY)
    return get_project_id(paths.project_root, strategy)


def load_merged_config(paths: ConfigPaths) -> dict[str, Any]:
    """Merge every config layer for ``paths`` into one raw mapping.

    Order: defaults, user YAML, user overrides, project YAML, project overrides.
    Overrides whose recorded hash no longer matches the hand-edited value are skipped.
    """
    generated = load_generated_config(paths.generated_config)

    user_yaml = load_yaml_config(paths.user_config)
    merged = merge_configs(copy.deepcopy(CONFIG_DEFAULTS), user_yaml)
    merged = apply_generated_overrides(merged, user_yaml, generated)

    project_yaml = load_yaml_config(paths.project_config)
    merged = merge_configs(merged, project_yaml)

    project_overrides = generated[PROJECTS_KEY].get(resolve_project_id(paths, generated))
    if project_overrides:
        merged = apply_generated_overrides(merged, project_yaml, project_overrides)
    return merged


def load_config(project_root: Path | None = None, *, paths: ConfigPaths | None = None) -> SkillsetConfig:
    """Load the effective configuration for ``project_root`` (or explicit ``paths``)."""
    # Each layer was checked alone; the merged result is checked once more.
    merged = load_merged_config(paths)
    # Last line of defence: each layer is checked on its own, not the merged result.
    valid = sanitize_by_schema(CONFIG_SCHEMA, merged, label="merged config", source=paths.project_root)
    return build_config(merge_configs(copy.deepcopy(CONFIG_DEFAULTS), valid))


def load_yaml_config_by_scope(scope: ConfigScope, paths: ConfigPaths | None = None) -> dict[str, Any]:
    """Load only the hand-edited file for ``scope``."""
    paths = paths or ConfigPaths.for_project()
    return load_yaml_config(paths.yaml_path(scope))


def get_config_value(key_path: str, *, paths: ConfigPaths | None = None, default: Any = None) -> Any:
    """Return the effective value at ``key_path`` after every layer is applied."""
    paths = paths or ConfigPaths.for_project()
    return get_value_at_path(load_merged_config(paths), key_path, default)
