"""Stable content hashes for override staleness detection."""

from __future__ import annotations

import datetime
import hashlib
import json
from typing import Any

from skillset.config.keypath import get_value_at_path, has_value_at_path
from skillset.constants.config import ABSENT_HASH_SENTINEL, VALUE_HASH_LENGTH

_ABSENT = object()


def to_json_value(value: Any) -> Any:
    """Return ``value`` reduced to JSON types.

    YAML can produce dates, non-string mapping keys and sets; dates become ISO
    strings, keys become strings and sets become sorted lists. Anything else
    JSON cannot hold is stored as its ``str()``.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, dict):
        return {str(key): to_json_value(item) for key, item in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted((to_json_value(item) for item in value), key=str)
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def canonical_json(value: object) -> str:
    """Serialize ``value`` with sorted keys and compact separators."""
    return json.dumps(to_json_value(value), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def hash_value(value: object = _ABSENT) -> str:
    """Return a short SHA-256 hash of ``value``'s canonical JSON form.

    Calling without an argument hashes the "absent" marker, which differs from
    every concrete value including ``None``.
    """
    canonical = ABSENT_HASH_SENTINEL if value is _ABSENT else canonical_json(value)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:VALUE_HASH_LENGTH]


def hash_value_at(data: Any, key_path: str) -> str:
    """Hash the value stored at ``key_path`` in ``data``, or the absent marker."""
    if not has_value_at_path(data, key_path):
        return hash_value()
    return hash_value(get_value_at_path(data, key_path))
