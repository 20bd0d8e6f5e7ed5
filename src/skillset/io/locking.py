"""Advisory lock files guarding read-modify-write of shared files.

The lock is a sibling ``<name>.lock`` file created with ``O_EXCL``. Writers
retry with exponential backoff and treat a lock older than the staleness
window as abandoned.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path

from skillset.constants.locking import (
    LOCK_MAX_BACKOFF_SECONDS,
    LOCK_MIN_BACKOFF_SECONDS,
    LOCK_RETRIES,
    LOCK_STALE_SECONDS,
    LOCK_STALE_SUFFIX,
    LOCK_SUFFIX,
)
from skillset.exceptions import LockTimeoutError

logger = logging.getLogger(__name__)


def lock_path_for(path: Path) -> Path:
    """Return the lock file path guarding ``path``."""
    return path.with_name(path.name + LOCK_SUFFIX)


@contextmanager
def file_lock(
    path: Path,
    *,
    retries: int = LOCK_RETRIES,
    min_backoff: float = LOCK_MIN_BACKOFF_SECONDS,
    max_backoff: float = LOCK_MAX_BACKOFF_SECONDS,
    stale_after: float = LOCK_STALE_SECONDS,
) -> Iterator[Path]:
    """Hold an exclusive advisory lock on ``path`` for the duration of the block."""
    lock_path = lock_path_for(path)
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    _acquire(lock_path, retries=retries, min_backoff=min_backoff, max_backoff=max_backoff, stale_after=stale_after)
    try:
        yield lock_path
    finally:
        with suppress(FileNotFoundError):
            lock_path.unlink()


def _acquire(
    lock_path: Path,
    *,
    retries: int,
    min_backoff: float,
    max_backoff: float,
    stale_after: float,
) -> None:
    attempt = 0
    while True:
        try:
            fd = os.open(lock_path, os.O_CREAT | os.O_EXCL | os.O_WRONLY)
        except FileExistsError:
            if _remove_if_stale(lock_path, stale_after):
                continue
            if attempt >= retries:
                raise LockTimeoutError(f"Could not acquire lock {lock_path} after {retries + 1} attempts") from None
            delay = min(min_backoff * (2**attempt), max_backoff)
            logger.debug("Lock %s is held, retrying in %.2fs", lock_path, delay)
            time.sleep(delay)
            attempt += 1
            continue
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(str(os.getpid()))
        return


def _remove_if_stale(lock_path: Path, stale_after: float) -> bool:
    """Delete an abandoned lock file; return True when the caller should retry at once.

    The lock is first renamed to a private name, so only one waiter can take it
    over. If the renamed file is not the one judged stale (another writer
    replaced it in between), it is put back.
    """
    try:
        observed = lock_path.stat()
    except FileNotFoundError:
        return True
    age = time.time() - observed.st_mtime
    if age < stale_after:
        return False

    claimed = lock_path.with_name(f"{lock_path.name}.{os.getpid()}.{time.monotonic_ns()}{LOCK_STALE_SUFFIX}")
    try:
        os.rename(lock_path, claimed)
    except FileNotFoundError:
        return True
    try:
        current = claimed.stat()
        if (current.st_ino, current.st_mtime_ns) == (observed.st_ino, observed.st_mtime_ns):
            logger.warning("Removing stale lock %s (age %.1fs)", lock_path, age)
            return True
        logger.debug("Lock %s was replaced while checking staleness, restoring it", lock_path)
        with suppress(FileExistsError):
            os.link(claimed, lock_path)
        return False
    finally:
        with suppress(FileNotFoundError):
            claimed.unlink()
