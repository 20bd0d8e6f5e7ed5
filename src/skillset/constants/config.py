"""Configuration defaults, filenames and merge rules."""

from __future__ import annotations

from typing import Literal

from skillset.types.common import JsonObject

type MergeStrategy = Literal["replace", "merge_keys", "replace_list"]
type ProjectIdStrategy = Literal["path", "remote"]

APP_DIR_NAME: str = "skillset"
PROJECT_CONFIG_DIR: str = ".skillset"
CONFIG_FILENAME: str = "config.yaml"
GENERATED_CONFIG_FILENAME: str = "config.generated.json"
PROJECT_ROOT_ENV: str = "SKILLSET_PROJECT_ROOT"

SCHEMA_URL: str = "https://unpkg.com/@skillset/types/schemas/config.schema.json"
SCHEMA_HEADER: str = f"# yaml-language-server: $schema={SCHEMA_URL}\n"

CONFIG_VERSION: int = 1

CONFIG_DEFAULTS: JsonObject = {
    "version": CONFIG_VERSION,
    "rules": {
        "unresolved": "warn",
        "ambiguous": "warn",
    },
    "resolution": {
        "fuzzy_matching": True,
        "default_scope_priority": ["project", "user", "plugin"],
    },
    "output": {
        "max_lines": 500,
        "include_layout": False,
    },
    "skills": {},
    "sets": {},
}

# How an overlay layer combines with the layer below it, per top-level key.
# Keys not listed fall back to "replace".
CONFIG_MERGE_STRATEGIES: dict[str, MergeStrategy] = {
    "version": "replace",
    "rules": "merge_keys",
    "output": "merge_keys",
    "resolution": "merge_keys",
    "skills": "merge_keys",
    "sets": "merge_keys",
    "ignore_scopes": "replace_list",
    "tools": "replace_list",
}

HASHES_KEY: str = "_yaml_hashes"
PROJECTS_KEY: str = "projects"
PROJECT_ID_STRATEGY_KEY: str = "project_id_strategy"
DEFAULT_PROJECT_ID_STRATEGY: ProjectIdStrategy = "path"
# Top-level generated keys that carry metadata rather than overridden values.
GENERATED_META_KEYS: frozenset[str] = frozenset({HASHES_KEY, PROJECTS_KEY, PROJECT_ID_STRATEGY_KEY})

# Canonical serialization of an absent value for hashing.
ABSENT_HASH_SENTINEL: str = "undefined"
VALUE_HASH_LENGTH: int = 12
PROJECT_ID_HASH_LENGTH: int = 16

OVERRIDE_TEMP_PREFIX: str = ".skillset-"
OVERRIDE_TEMP_SUFFIX: str = ".json.tmp"

LEGACY_CONFIG_KEYS: tuple[str, ...] = ("mode", "mappings", "showStructure", "maxLines", "namespaceAliases")
LEGACY_PASSTHROUGH_KEYS: tuple[str, ...] = ("resolution", "ignore_scopes", "tools", "sets")
