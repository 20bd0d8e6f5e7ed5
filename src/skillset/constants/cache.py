"""Constants used by skill cache reading."""

from __future__ import annotations

CACHE_VERSION: int = 1
CACHE_FILENAME: str = "cache.json"
DEFAULT_STRUCTURE_TTL: int = 3600
