"""Layered configuration: loading, overrides, validation and migration."""

from __future__ import annotations

from .hashing import hash_value, hash_value_at
from .keypath import delete_value_at_path, get_value_at_path, join_key_path, set_value_at_path, split_key_path
from .loader import (
    get_config_value,
    load_config,
    load_generated_config,
    load_merged_config,
    load_yaml_config,
    load_yaml_config_by_scope,
)
from .merge import merge_configs
from .migrate import MigrationResult, detect_legacy_config, migrate_config_file, migrate_legacy_config
from .model import (
    ObjectEntry,
    OutputConfig,
    ResolutionConfig,
    RulesConfig,
    SetDefinition,
    SkillEntry,
    SkillsetConfig,
    StringEntry,
    build_config,
)
from .overrides import apply_generated_overrides, cleanup_stale_hashes
from .paths import ConfigPaths, ConfigScope
from .project import get_project_id
from .validator import validate_config_file
from .writer import (
    cleanup_generated_config,
    ensure_config_files,
    reset_override,
    set_override,
    write_yaml_config,
)

__all__ = [
    "ConfigPaths",
    "ConfigScope",
    "MigrationResult",
    "ObjectEntry",
    "OutputConfig",
    "ResolutionConfig",
    "RulesConfig",
    "SetDefinition",
    "SkillEntry",
    "SkillsetConfig",
    "StringEntry",
    "apply_generated_overrides",
    "build_config",
    "cleanup_generated_config",
    "cleanup_stale_hashes",
    "delete_value_at_path",
    "detect_legacy_config",
    "ensure_config_files",
    "get_config_value",
    "get_project_id",
    "get_value_at_path",
    "hash_value",
    "hash_value_at",
    "join_key_path",
    "load_config",
    "load_generated_config",
    "load_merged_config",
    "load_yaml_config",
    "load_yaml_config_by_scope",
    "merge_configs",
    "migrate_config_file",
    "migrate_legacy_config",
    "reset_override",
    "set_override",
    "set_value_at_path",
    "split_key_path",
    "validate_config_file",
    "write_yaml_config",
]
