"""Dotted key-path helpers over nested mappings.

Segments are joined with ``.``; a literal dot inside a key is written as
``\\.``. Setters and deleters return new containers and leave their input
untouched.
"""

from __future__ import annotations

from typing import Any

KEY_SEPARATOR: str = "."
ESCAPE_CHAR: str = "\\"


def escape_key_segment(segment: str) -> str:
    return segment.replace(KEY_SEPARATOR, ESCAPE_CHAR + KEY_SEPARATOR)


def split_key_path(path: str) -> list[str]:
    """Split a dotted path, honouring escaped dots and dropping empty segments."""
    segments: list[str] = []
    current: list[str] = []
    escaped = False
    for char in path:
        if escaped:
            current.append(char)
            escaped = False
        elif char == ESCAPE_CHAR:
            escaped = True
        elif char == KEY_SEPARATOR:
            segments.append("".join(current))
            current = []
        else:
            current.append(char)
    segments.append("".join(current))
    return [segment for segment in segments if segment]


def join_key_path(segments: list[str]) -> str:
    return KEY_SEPARATOR.join(escape_key_segment(segment) for segment in segments)


def _as_parts(path: str | list[str]) -> list[str]:
    return list(path) if isinstance(path, list) else split_key_path(path)


def get_value_at_path(data: Any, path: str | list[str], default: Any = None) -> Any:
    """Return the value at ``path`` or ``default`` when any segment is missing."""
    current = data
    for part in _as_parts(path):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def has_value_at_path(data: Any, path: str | list[str]) -> bool:
    current = data
    for part in _as_parts(path):
        if not isinstance(current, dict) or part not in current:
            return False
        current = current[part]
    return True


def set_value_at_path(data: dict[str, Any], path: str | list[str], value: Any) -> dict[str, Any]:
    """Return a copy of ``data`` with ``value`` stored at ``path``.

    Intermediate mappings are copied (or created when missing or not a mapping).
    """
    parts = _as_parts(path)
    if not parts:
        return data
    result = dict(data)
    cursor = result
    original: Any = data
    for part in parts[:-1]:
        original = original.get(part) if isinstance(original, dict) else None
        nested = dict(original) if isinstance(original, dict) else {}
        cursor[part] = nested
        cursor = nested
    cursor[parts[-1]] = value
    return result


def delete_value_at_path(data: dict[str, Any], path: str | list[str]) -> dict[str, Any]:
    """Return a copy of ``data`` without the key at ``path``.

    The input is returned unchanged when the path does not exist.
    """
    parts = _as_parts(path)
    if not parts or not has_value_at_path(data, parts):
        return data
    result = dict(data)
    cursor = result
    for part in parts[:-1]:
        nested = dict(cursor[part])
        cursor[part] = nested
        cursor = nested
    del cursor[parts[-1]]
    return result
