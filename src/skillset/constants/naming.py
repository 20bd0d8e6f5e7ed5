"""Constants for alias and reference normalization."""

from __future__ import annotations

import re
from re import Pattern

UNDERSCORE_SPACE_PATTERN: Pattern[str] = re.compile(r"[_\s]+")
LOWER_UPPER_BOUNDARY_PATTERN: Pattern[str] = re.compile(r"([a-z0-9])([A-Z])")
ACRONYM_BOUNDARY_PATTERN: Pattern[str] = re.compile(r"([A-Z]+)([A-Z][a-z0-9])")
NON_ALNUM_DASH_PATTERN: Pattern[str] = re.compile(r"[^a-zA-Z0-9-]")
COLLAPSE_DASH_PATTERN: Pattern[str] = re.compile(r"-+")

REF_SEPARATOR: str = ":"
PATH_SEPARATOR: str = "/"
