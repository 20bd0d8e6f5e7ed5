"""Hash-validated application of generated (CLI-written) overrides.

Each override records the hash of the hand-edited value it replaced. An
override only applies while the hand-edited value still hashes the same;
once the user edits that key, the override is ignored.
"""

from __future__ import annotations

import logging
from typing import Any

from jsonschema import Draft202012Validator

from skillset.config.hashing import hash_value_at
from skillset.config.keypath import delete_value_at_path, join_key_path, set_value_at_path
from skillset.config.schema import CONFIG_SECTION_SCHEMAS
from skillset.constants.config import GENERATED_META_KEYS, HASHES_KEY

logger = logging.getLogger(__name__)


def apply_generated_overrides(
    base: dict[str, Any],
    yaml_config: dict[str, Any],
    generated: dict[str, Any],
) -> dict[str, Any]:
    """Return ``base`` with every still-valid override from ``generated`` applied.

    ``yaml_config`` is the hand-edited layer the hashes were computed against.
    An override that would leave its top-level section invalid is skipped, so
    the hand-edited values around it survive.
    """
    hashes: dict[str, str] = generated.get(HASHES_KEY) or {}
    if not hashes:
        return base

    result = base
    pending: list[tuple[list[str], Any]] = [
        ([key], value) for key, value in generated.items() if key not in GENERATED_META_KEYS
    ]
    while pending:
        segments, value = pending.pop(0)
        key_path = join_key_path(segments)
        stored_hash = hashes.get(key_path)
        if stored_hash is not None:
            if hash_value_at(yaml_config, key_path) != stored_hash:
                logger.debug("Ignoring stale override for %s", key_path)
                continue
            candidate = set_value_at_path(result, segments, value)
            if _section_is_valid(candidate, segments[0]):
                result = candidate
            else:
                logger.warning("Ignored generated override %s: value does not fit the config schema", key_path)
            continue
        if isinstance(value, dict):
            pending.extend(([*segments, key], nested) for key, nested in value.items())
    return result


def find_stale_overrides(target: dict[str, Any], yaml_config: dict[str, Any]) -> list[str]:
    """Return key paths whose stored hash no longer matches the hand-edited value."""
    hashes: dict[str, str] = target.get(HASHES_KEY) or {}
    return sorted(
        key_path for key_path, stored in hashes.items() if hash_value_at(yaml_config, key_path) != stored
    )


def cleanup_stale_hashes(target: dict[str, Any], yaml_config: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``target`` without stale overrides (hash entry and value)."""
    stale = find_stale_overrides(target, yaml_config)
    hashes = dict(target.get(HASHES_KEY) or {})
    cleaned = dict(target)
    for key_path in stale:
        hashes.pop(key_path, None)
        cleaned = delete_value_at_path(cleaned, key_path)
    cleaned[HASHES_KEY] = hashes
    return cleaned


def _section_is_valid(config: dict[str, Any], section: str) -> bool:
    schema = CONFIG_SECTION_SCHEMAS.get(section)
    if schema is None:
        return True
    return Draft202012Validator(schema).is_valid(config.get(section))
