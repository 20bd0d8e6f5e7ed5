"""String normalization helpers for aliases, namespaces and references."""

from __future__ import annotations

from skillset.constants.naming import (
    ACRONYM_BOUNDARY_PATTERN,
    COLLAPSE_DASH_PATTERN,
    LOWER_UPPER_BOUNDARY_PATTERN,
    NON_ALNUM_DASH_PATTERN,
    PATH_SEPARATOR,
    REF_SEPARATOR,
    UNDERSCORE_SPACE_PATTERN,
)


def normalize_segment(text: str) -> str:
    """Convert one alias segment to lowercase kebab-case.

    ``FrontEnd_Design`` and ``frontEndDesign`` both become ``front-end-design``;
    ``HTTPServer`` becomes ``http-server``.
    """
    normalized = UNDERSCORE_SPACE_PATTERN.sub("-", text)
    normalized = LOWER_UPPER_BOUNDARY_PATTERN.sub(r"\1-\2", normalized)
    normalized = ACRONYM_BOUNDARY_PATTERN.sub(r"\1-\2", normalized)
    normalized = NON_ALNUM_DASH_PATTERN.sub("-", normalized)
    normalized = COLLAPSE_DASH_PATTERN.sub("-", normalized)
    return normalized.strip("-").lower()


def normalize_ref(text: str) -> str:
    """Normalize every ``:``/``/`` delimited segment of a reference, dropping empty ones."""
    groups: list[str] = []
    for group in text.split(REF_SEPARATOR):
        parts = [normalize_segment(part) for part in group.split(PATH_SEPARATOR)]
        joined = PATH_SEPARATOR.join(part for part in parts if part)
        if joined:
            groups.append(joined)
    return REF_SEPARATOR.join(groups)


def strip_dashes(text: str) -> str:
    """Return ``text`` without hyphens, for format-tolerant comparisons."""
    return text.replace("-", "")
