"""JSON Schemas for hand-edited config files and the generated override file.

Every key is optional: each file is a partial layer over built-in defaults.
"""

from __future__ import annotations

from typing import Any

from skillset.constants.resolution import VALID_SEVERITIES
from skillset.constants.scopes import VALID_SCOPES, VALID_TOOLS

SCOPE_SCHEMA: dict[str, Any] = {"enum": list(VALID_SCOPES)}
TOOL_SCHEMA: dict[str, Any] = {"enum": list(VALID_TOOLS)}
SEVERITY_SCHEMA: dict[str, Any] = {"enum": list(VALID_SEVERITIES)}

SKILL_ENTRY_SCHEMA: dict[str, Any] = {
    "anyOf": [
        {"type": "string"},
        {
            "type": "object",
            "properties": {
                "skill": {"type": "string"},
                "path": {"type": "string"},
                "scope": {
                    "anyOf": [
                        SCOPE_SCHEMA,
                        {"type": "array", "items": SCOPE_SCHEMA},
                    ]
                },
                "include_full": {"type": "boolean"},
                "include_layout": {"type": "boolean"},
            },
            "not": {"required": ["skill", "path"]},
        },
    ]
}

SET_DEFINITION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "description": {"type": "string"},
        "skills": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["skills"],
}

RULES_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "unresolved": SEVERITY_SCHEMA,
        "ambiguous": SEVERITY_SCHEMA,
        "missing_set_members": SEVERITY_SCHEMA,
    },
}

OUTPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "max_lines": {"type": "integer", "minimum": 1},
        "include_layout": {"type": "boolean"},
    },
}

RESOLUTION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "fuzzy_matching": {"type": "boolean"},
        "default_scope_priority": {"type": "array", "items": SCOPE_SCHEMA},
    },
}

SKILLS_SCHEMA: dict[str, Any] = {"type": "object", "additionalProperties": SKILL_ENTRY_SCHEMA}
SCOPE_LIST_SCHEMA: dict[str, Any] = {"type": "array", "items": SCOPE_SCHEMA}
TOOL_LIST_SCHEMA: dict[str, Any] = {"type": "array", "items": TOOL_SCHEMA}

# Schema of each top-level config section, keyed by section name.
CONFIG_SECTION_SCHEMAS: dict[str, dict[str, Any]] = {
    "version": {"type": "integer"},
    "rules": RULES_SCHEMA,
    "resolution": RESOLUTION_SCHEMA,
    "output": OUTPUT_SCHEMA,
    "ignore_scopes": SCOPE_LIST_SCHEMA,
    "tools": TOOL_LIST_SCHEMA,
    "skills": SKILLS_SCHEMA,
    "sets": {"type": "object", "additionalProperties": SET_DEFINITION_SCHEMA},
}

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "skillset config",
    "type": "object",
    "properties": CONFIG_SECTION_SCHEMAS,
}

# Override values are checked one key path at a time when applied, so a bad
# value never takes its sibling overrides down with it.
_OVERRIDE_PROPERTIES: dict[str, Any] = {
    "_yaml_hashes": {"type": "object", "additionalProperties": {"type": "string"}},
}

PROJECT_SETTINGS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": _OVERRIDE_PROPERTIES,
}


GENERATED_SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "skillset generated overrides",
    "type": "object",
    "properties": {
        **_OVERRIDE_PROPERTIES,
        "project_id_strategy": {"enum": ["path", "remote"]},
        "projects": {"type": "object", "additionalProperties": PROJECT_SETTINGS_SCHEMA},
    },
}
