"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit path)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # contradictory skill entry (skill and path both set)
CFG009: str = "CFG009"  # invalid nested mapping

ALL_CFG_CODES: tuple[str, ...] = (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "version",
        "rules",
        "resolution",
        "output",
        "ignore_scopes",
        "tools",
        "skills",
        "sets",
    }
)

# jsonschema validator keywords mapped to stable codes.
SCHEMA_KEYWORD_CODES: dict[str, str] = {
    "type": CFG005,
    "enum": CFG006,
    "minimum": CFG007,
    "required": CFG009,
    "additionalProperties": CFG004,
    "anyOf": CFG005,
    "oneOf": CFG005,
    "not": CFG008,
}
