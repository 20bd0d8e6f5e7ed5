"""Constants for prompt tokenization."""

from __future__ import annotations

import re
from re import Pattern

TOKEN_SIGIL: str = "$"

# $[skill:|set:]segment[:segment...]; each segment starts with an alphanumeric or underscore.
TOKEN_PATTERN: Pattern[str] = re.compile(
    r"\$(?:(?P<kind>(?i:skill|set)):)?"
    r"(?P<ref>[A-Za-z0-9_][A-Za-z0-9_-]*(?::[A-Za-z0-9_][A-Za-z0-9_-]*)*)"
)
KIND_PREFIX_PATTERN: Pattern[str] = re.compile(r"^(skill|set):", re.IGNORECASE)
FENCE_PATTERN: Pattern[str] = re.compile(r"^(?:`{3,}|~{3,})")
LINE_SPLIT_PATTERN: Pattern[str] = re.compile(r"\r?\n")

INLINE_CODE_MARKER: str = "`"

LEFT_BOUNDARY_CHARS: frozenset[str] = frozenset("([{<\"'`")
RIGHT_BOUNDARY_CHARS: frozenset[str] = frozenset(".,;!?)]}>\"'`")

KIND_SKILL: str = "skill"
KIND_SET: str = "set"
VALID_KINDS: frozenset[str] = frozenset({KIND_SKILL, KIND_SET})
