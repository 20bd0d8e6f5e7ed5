"""Advisory lock tuning for the generated override file."""

from __future__ import annotations

LOCK_SUFFIX: str = ".lock"
LOCK_STALE_SUFFIX: str = ".stale"
LOCK_RETRIES: int = 3
LOCK_MIN_BACKOFF_SECONDS: float = 0.1
LOCK_MAX_BACKOFF_SECONDS: float = 1.0
# A lock older than this is considered abandoned by a crashed writer.
LOCK_STALE_SECONDS: float = 10.0
